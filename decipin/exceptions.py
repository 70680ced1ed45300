"""Errors raised by the DeciPin codec"""

__all__ = ['DeciPinError', 'InvalidFormatError', 'OutOfRangeError']

from typing import Any


class DeciPinError(ValueError):
    """Base class for all DeciPin errors"""


class OutOfRangeError(DeciPinError):
    """
    A coordinate fell outside the configured bounds during encoding.

    Args:
        axis:
            Either 'lat' or 'lon'

        value:
            The offending value, as supplied by the caller

        minimum:
            The lower bound for the axis

        maximum:
            The upper bound for the axis
    """

    def __init__(self, axis: str, value: Any, minimum: float, maximum: float):
        self.axis = axis
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f'{axis} out of range [{minimum}, {maximum}]: {value!r}')


class InvalidFormatError(DeciPinError):
    """A string did not match the DeciPin grammar"""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f'Invalid DeciPin: {code!r}')
