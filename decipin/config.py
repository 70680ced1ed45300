"""
Configuration for the DeciPin codec: anchor letters, coordinate bounds and separators
"""

__all__ = ['DEFAULT_CONFIG', 'DeciPinConfig']

from functools import cached_property
import re
from typing import Pattern, Sequence, Tuple

from decipin._const import (
    DECIPIN_BOUNDS, DECIPIN_SEPARATORS, DECIPIN_START_HI, DECIPIN_START_LO
)

# Largest value the 2 integer digits of a field can carry
_FIELD_LIMIT = 100


def _validate_anchor(name: str, anchor: str) -> str:
    if not (isinstance(anchor, str) and len(anchor) == 1 and 'A' <= anchor <= 'Z'):
        raise ValueError(f'{name} must be a single upper-case letter, got {anchor!r}')

    if ord(anchor) + 9 > ord('Z'):
        raise ValueError(f'{name} {anchor!r} leaves fewer than 10 letters before Z')

    return anchor


class DeciPinConfig:
    """
    Immutable settings shared by the DeciPin encoder and decoder.

    Args:
        start_hi: (Default 'A')
            Anchor letter for the first two fractional latitude digits

        start_lo: (Default 'Q')
            Anchor letter for the last two fractional latitude digits

        min_lat, max_lat, min_lon, max_lon:
            Inclusive coordinate bounds accepted by the encoder

        separators: (Default ('.', '/'))
            The characters inserted after the 4th and 8th significant characters

        include_separators: (Default True)
            Whether the encoder emits separators when the caller doesn't say
    """

    def __init__(
        self,
        start_hi: str = DECIPIN_START_HI,
        start_lo: str = DECIPIN_START_LO,
        min_lat: float = DECIPIN_BOUNDS['min_lat'],
        max_lat: float = DECIPIN_BOUNDS['max_lat'],
        min_lon: float = DECIPIN_BOUNDS['min_lon'],
        max_lon: float = DECIPIN_BOUNDS['max_lon'],
        separators: Sequence[str] = DECIPIN_SEPARATORS,
        include_separators: bool = True,
    ):
        self.start_hi = _validate_anchor('start_hi', start_hi)
        self.start_lo = _validate_anchor('start_lo', start_lo)
        if abs(ord(self.start_hi) - ord(self.start_lo)) < 10:
            raise ValueError(
                f'Anchor ranges overlap: {self.start_hi!r} and {self.start_lo!r} '
                'must be at least 10 letters apart'
            )

        for axis, lower, upper in (('lat', min_lat, max_lat), ('lon', min_lon, max_lon)):
            if not 0 <= lower <= upper < _FIELD_LIMIT:
                raise ValueError(
                    f'{axis} bounds must satisfy 0 <= min <= max < {_FIELD_LIMIT}, '
                    f'got [{lower}, {upper}]'
                )

        self.min_lat, self.max_lat = float(min_lat), float(max_lat)
        self.min_lon, self.max_lon = float(min_lon), float(max_lon)

        separators = tuple(separators)
        if len(separators) != 2 or any(
            not isinstance(sep, str) or len(sep) != 1 or sep.isalnum() or sep.isspace()
            for sep in separators
        ):
            raise ValueError(
                f'separators must be two single non-alphanumeric characters, got {separators!r}'
            )
        self.separators: Tuple[str, str] = separators  # type: ignore

        self.include_separators = include_separators

    def _key(self) -> tuple:
        return (
            self.start_hi, self.start_lo,
            self.min_lat, self.max_lat, self.min_lon, self.max_lon,
            self.separators, self.include_separators,
        )

    def __eq__(self, other):
        if not isinstance(other, DeciPinConfig):
            return False

        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f'<DeciPinConfig({self.start_hi}-{chr(ord(self.start_hi) + 9)}, '
            f'{self.start_lo}-{chr(ord(self.start_lo) + 9)}, '
            f'lat=[{self.min_lat}, {self.max_lat}], lon=[{self.min_lon}, {self.max_lon}], '
            f'separators={"".join(self.separators)!r})>'
        )

    @cached_property
    def pattern(self) -> Pattern:
        """
        The DeciPin grammar. Matches upper-case codes only; callers upper-case
        their input first. Groups are the five significant runs of the code:
        integer digits, anchor-1 letters, longitude digits, anchor-2 letters,
        longitude digits.
        """
        sep_1, sep_2 = (re.escape(x) for x in self.separators)
        hi_range = f'{self.start_hi}-{chr(ord(self.start_hi) + 9)}'
        lo_range = f'{self.start_lo}-{chr(ord(self.start_lo) + 9)}'
        return re.compile(
            rf'^([0-9]{{4}}){sep_1}?([{hi_range}]{{2}})([0-9]{{2}})'
            rf'{sep_2}?([{lo_range}]{{2}})([0-9]{{2}})$'
        )


DEFAULT_CONFIG = DeciPinConfig()
