"""
Randomized self-check of the encode/decode round trip
"""

__all__ = ['RoundTripFailure', 'verify_round_trip']

from typing import List, NamedTuple, Optional

import numpy as np

from decipin._const import CELL_SIZE, CODE_LENGTH
from decipin.codec import DeciPinCodec
from decipin.config import DEFAULT_CONFIG, DeciPinConfig
from decipin.utils.logging import LOGGER

# Half a cell, plus slack for the float parse of the decoded center
ERROR_TOLERANCE = CELL_SIZE / 2 + 1e-9


class RoundTripFailure(NamedTuple):
    lat: float
    lon: float
    code: str
    reason: str


def _check(codec: DeciPinCodec, lat: float, lon: float, include_separators: bool) -> Optional[RoundTripFailure]:
    code = codec.encode(lat, lon, include_separators)
    expected_length = CODE_LENGTH + (2 if include_separators else 0)
    if len(code) != expected_length:
        return RoundTripFailure(lat, lon, code, f'length {len(code)} != {expected_length}')

    if not codec.is_valid(code):
        return RoundTripFailure(lat, lon, code, 'does not match the DeciPin grammar')

    decoded = codec.decode(code)
    error = max(abs(decoded.lat - lat), abs(decoded.lon - lon))
    if error > ERROR_TOLERANCE:
        return RoundTripFailure(lat, lon, code, f'decoded error {error} exceeds {ERROR_TOLERANCE}')

    return None


def verify_round_trip(
    iterations: int = 10_000,
    seed: Optional[int] = None,
    config: DeciPinConfig = DEFAULT_CONFIG,
) -> List[RoundTripFailure]:
    """
    Encodes and decodes uniformly random coordinates drawn from the configured
    bounds, checking code length, grammar and decode tolerance for each, with
    and without separators.

    Args:
        iterations: (Default 10,000)
            The number of random coordinates to test

        seed: (Default None)
            Seed for the random number generator, for reproducible runs

        config: (Default DEFAULT_CONFIG)
            The codec configuration under test

    Returns:
        A list of RoundTripFailures; empty if every coordinate passed
    """
    if iterations < 0:
        raise ValueError(f'iterations must be non-negative, got {iterations}')

    codec = DeciPinCodec(config)
    rng = np.random.default_rng(seed)
    lats = rng.uniform(config.min_lat, config.max_lat, iterations)
    lons = rng.uniform(config.min_lon, config.max_lon, iterations)

    failures = []
    for lat, lon in zip(lats.tolist(), lons.tolist()):
        for include_separators in (True, False):
            failure = _check(codec, lat, lon, include_separators)
            if failure is not None:
                LOGGER.debug('Round trip failed: %s', failure)
                failures.append(failure)

    if failures:
        LOGGER.warning('%d of %d DeciPin round trips failed', len(failures), 2 * iterations)
    else:
        LOGGER.info('All %d DeciPin round trips passed', 2 * iterations)

    return failures
