"""
Coordinate containers returned by the DeciPin decoder
"""

__all__ = ['CellBounds', 'LatLon']

from typing import NamedTuple, Union


class LatLon(NamedTuple):
    """A decoded (latitude, longitude) pair, as floats or decimal strings"""
    lat: Union[float, str]
    lon: Union[float, str]


class CellBounds(NamedTuple):
    """
    The grid cell addressed by a DeciPin. Cells are half-open: the minimum
    edges belong to the cell, the maximum edges belong to the next one.
    """
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def center(self) -> LatLon:
        return LatLon(
            (self.min_lat + self.max_lat) / 2,
            (self.min_lon + self.max_lon) / 2,
        )

    def contains(self, lat: float, lon: float) -> bool:
        """Test whether a point falls within this cell"""
        return (
            self.min_lat <= lat < self.max_lat and
            self.min_lon <= lon < self.max_lon
        )
