from decipin._version import __version__  # noqa: F401
from decipin.utils.logging import LOGGER
from decipin.config import DEFAULT_CONFIG, DeciPinConfig
from decipin.coordinates import CellBounds, LatLon
from decipin.exceptions import DeciPinError, InvalidFormatError, OutOfRangeError
from decipin.codec import DeciPinCodec, cell_bounds, decode, encode, is_valid
from decipin.verification import RoundTripFailure, verify_round_trip

__all__ = [
    'CellBounds',
    'DEFAULT_CONFIG',
    'DeciPinCodec',
    'DeciPinConfig',
    'DeciPinError',
    'InvalidFormatError',
    'LatLon',
    'OutOfRangeError',
    'RoundTripFailure',
    'cell_bounds',
    'decode',
    'encode',
    'is_valid',
    'verify_round_trip',
    'LOGGER',
]
