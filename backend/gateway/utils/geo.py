"""Geographic helpers."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """An open longitude/latitude rectangle.

    Points on the edges are outside the box.
    """

    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float

    def contains(self, lon: float, lat: float) -> bool:
        return self.min_lon < lon < self.max_lon and self.min_lat < lat < self.max_lat


def is_coordinate(value: object) -> bool:
    """True for a ``[lon, lat, ...]`` list/tuple with finite numbers first."""
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        return False
    return all(is_finite_number(v) for v in value[:2])


def is_finite_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if not isinstance(value, float):
        return False
    return math.isfinite(value)
