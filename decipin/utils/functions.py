"""Module for fixed-point and character arithmetic shared by the encoder and decoder"""

__all__ = [
    'decimal_places', 'rebase_digit', 'to_decimal',
    'to_fixed_digits', 'unrebase_letter',
]

from decimal import Decimal, ROUND_DOWN
from typing import Union

_ZERO = ord('0')

Number = Union[float, int, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """
    Converts a number to a Decimal using its shortest decimal representation,
    so that e.g. 0.29 becomes Decimal('0.29') rather than the nearest binary
    double 0.28999999999999998002...
    """
    if isinstance(value, Decimal):
        return value

    if isinstance(value, str):
        return Decimal(value.strip())

    return Decimal(repr(float(value)))


def decimal_places(value: Number) -> int:
    """Number of significant fractional digits in a value's decimal representation"""
    exponent = to_decimal(value).normalize().as_tuple().exponent
    return max(0, -int(exponent))


def to_fixed_digits(value: Number, precision: int, width: int) -> str:
    """
    Renders a non-negative value as a zero-padded fixed-point digit string.

    The value is scaled by 10**precision and truncated toward zero, then
    padded on the left to `width` digits (and cut to `width` if longer).

    Args:
        value:
            The value to render, e.g. 12.34567

        precision:
            Number of fractional digits to keep

        width:
            Total number of digits in the output

    Returns:
        str, e.g. '123456' for to_fixed_digits(12.34567, 4, 6)
    """
    # quantize truncates exactly, scaleb rounds to the context precision
    scaled = to_decimal(value).quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN).scaleb(precision)
    return str(int(scaled)).zfill(width)[:width]


def rebase_digit(digit: str, anchor: str) -> str:
    """Maps a decimal digit character onto the 10-letter run starting at anchor"""
    return chr(ord(digit) - _ZERO + ord(anchor))


def unrebase_letter(letter: str, anchor: str) -> str:
    """Inverse of rebase_digit"""
    return chr(ord(letter) - ord(anchor) + _ZERO)
