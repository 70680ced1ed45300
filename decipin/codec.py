"""
Module for encoding coordinates to DeciPins and decoding them back
"""

__all__ = [
    'DeciPinCodec',
    'cell_bounds', 'decode', 'encode', 'is_valid',
]

from decimal import Decimal
from functools import lru_cache
from typing import Any, Optional, Tuple

from decipin._const import (
    CELL_CENTER_DIGIT, FIELD_WIDTH, GRID_PRECISION
)
from decipin.config import DEFAULT_CONFIG, DeciPinConfig
from decipin.coordinates import CellBounds, LatLon
from decipin.exceptions import InvalidFormatError, OutOfRangeError
from decipin.utils.functions import (
    Number, decimal_places, rebase_digit, to_fixed_digits, unrebase_letter
)
from decipin.utils.logging import LoggingMixin


class DeciPinCodec(LoggingMixin):
    """
    Converts (lat, lon) pairs to DeciPins and back under a single configuration.

    A DeciPin packs each axis into 6 fixed-point digits (2 integer, 4 fractional)
    and interleaves them as:

        [lat int][lon int] . [lat frac 1-2 as letters][lon frac 1-2] / [lat frac 3-4 as letters][lon frac 3-4]

    e.g. (12.3456, 65.4321) -> '1265.DE43/VW21'

    Args:
        config: (Default DEFAULT_CONFIG)
            The anchors, bounds and separators to use
    """

    def __init__(self, config: DeciPinConfig = DEFAULT_CONFIG):
        super().__init__()
        self.config = config

    def __repr__(self):
        return f'<DeciPinCodec({self.config!r})>'

    def _check_bounds(self, axis: str, value: Number) -> float:
        lower, upper = (
            (self.config.min_lat, self.config.max_lat) if axis == 'lat'
            else (self.config.min_lon, self.config.max_lon)
        )
        try:
            _value = float(value)
        except (TypeError, ValueError) as e:
            raise OutOfRangeError(axis, value, lower, upper) from e

        if not lower <= _value <= upper:
            raise OutOfRangeError(axis, value, lower, upper)

        return _value

    def encode(self, lat: Number, lon: Number, include_separators: Optional[bool] = None) -> str:
        """
        Encode a coordinate as a DeciPin. Precision beyond 0.0001 degrees is
        truncated, not rounded.

        Args:
            lat:
                Latitude, within the configured bounds

            lon:
                Longitude, within the configured bounds

            include_separators: (Default None)
                Whether to insert the separator characters. If not specified,
                falls back to the configuration's default.

        Returns:
            str of length 14 with separators, 12 without
        """
        self._check_bounds('lat', lat)
        self._check_bounds('lon', lon)

        if include_separators is None:
            include_separators = self.config.include_separators

        if max(decimal_places(lat), decimal_places(lon)) > GRID_PRECISION:
            self.warn_once(
                'Coordinates carry more than %d decimal places; DeciPin truncates '
                'to the containing 0.0001 degree cell. (this warning will not repeat)',
                GRID_PRECISION
            )

        lat_str = to_fixed_digits(lat, GRID_PRECISION, FIELD_WIDTH)
        lon_str = to_fixed_digits(lon, GRID_PRECISION, FIELD_WIDTH)
        hi, lo = self.config.start_hi, self.config.start_lo
        sep_1, sep_2 = self.config.separators if include_separators else ('', '')

        return ''.join((
            lat_str[:2], lon_str[:2],
            sep_1,
            rebase_digit(lat_str[2], hi), rebase_digit(lat_str[3], hi),
            lon_str[2:4],
            sep_2,
            rebase_digit(lat_str[4], lo), rebase_digit(lat_str[5], lo),
            lon_str[4:6],
        ))

    def _parse(self, code: Any) -> Tuple[str, str]:
        """
        Validate a DeciPin and recover the fixed-point digit strings of
        each axis (lat, lon).
        """
        if not isinstance(code, str):
            raise InvalidFormatError(code)

        if not code.isascii():
            raise InvalidFormatError(code)

        code = code.upper()
        match = self.config.pattern.fullmatch(code)
        if match is None:
            raise InvalidFormatError(code)

        ints, hi_letters, lon_frac_1, lo_letters, lon_frac_2 = match.groups()
        hi, lo = self.config.start_hi, self.config.start_lo
        lat_str = (
            ints[:2] +
            ''.join(unrebase_letter(x, hi) for x in hi_letters) +
            ''.join(unrebase_letter(x, lo) for x in lo_letters)
        )
        lon_str = ints[2:] + lon_frac_1 + lon_frac_2
        return lat_str, lon_str

    @staticmethod
    def _cell_center(digits: str) -> str:
        return f'{digits[:2]}.{digits[2:]}{CELL_CENTER_DIGIT}'

    def decode(self, code: str, as_str: bool = False) -> LatLon:
        """
        Decode a DeciPin (case-insensitive, separators optional) to the center
        of the cell it addresses.

        Args:
            code:
                A DeciPin, e.g. '1265.DE43/VW21'

            as_str: (Default False)
                If True, return the coordinates as exact decimal strings
                (e.g. '12.34565') instead of floats

        Returns:
            LatLon
        """
        lat_str, lon_str = self._parse(code)
        lat, lon = self._cell_center(lat_str), self._cell_center(lon_str)
        if as_str:
            return LatLon(lat, lon)

        return LatLon(float(lat), float(lon))

    def is_valid(self, code: Any) -> bool:
        """Test whether a string is a well-formed DeciPin"""
        try:
            self._parse(code)
        except InvalidFormatError:
            return False

        return True

    def cell_bounds(self, code: str) -> CellBounds:
        """
        Returns the bounds of the 0.0001 x 0.0001 degree cell a DeciPin addresses.

        Args:
            code:
                A DeciPin

        Returns:
            CellBounds
        """
        lat_str, lon_str = self._parse(code)
        cell = Decimal(1).scaleb(-GRID_PRECISION)
        min_lat = Decimal(lat_str).scaleb(-GRID_PRECISION)
        min_lon = Decimal(lon_str).scaleb(-GRID_PRECISION)
        return CellBounds(
            float(min_lat),
            float(min_lon),
            float(min_lat + cell),
            float(min_lon + cell),
        )


@lru_cache(maxsize=32)
def _get_codec(config: Optional[DeciPinConfig]) -> DeciPinCodec:
    return DeciPinCodec(config or DEFAULT_CONFIG)


def encode(
    lat: Number,
    lon: Number,
    include_separators: Optional[bool] = None,
    config: Optional[DeciPinConfig] = None
) -> str:
    """
    Encode a (lat, lon) pair as a DeciPin. See DeciPinCodec.encode

    Args:
        lat:
            Latitude, within [0, 99.9999] under the default configuration

        lon:
            Longitude, within [0, 99.9999] under the default configuration

        include_separators: (Default None)
            Whether to emit separators; the configuration decides if not specified

        config: (Default None)
            A DeciPinConfig; DEFAULT_CONFIG if not specified

    Returns:
        str
    """
    return _get_codec(config).encode(lat, lon, include_separators)


def decode(code: str, as_str: bool = False, config: Optional[DeciPinConfig] = None) -> LatLon:
    """Decode a DeciPin to the center of its cell. See DeciPinCodec.decode"""
    return _get_codec(config).decode(code, as_str)


def is_valid(code: Any, config: Optional[DeciPinConfig] = None) -> bool:
    return _get_codec(config).is_valid(code)


def cell_bounds(code: str, config: Optional[DeciPinConfig] = None) -> CellBounds:
    return _get_codec(config).cell_bounds(code)
