"""Privacy redaction for travel lines.

Two passes over ``line.coordinates``, in order:

1. Geofence substitution: a point inside a protected zone is moved to that
   zone's decoy point. Zones are tested in order and the first hit wins.
2. Stationary-point removal: the first point is kept; every later point is
   kept only if both its longitude and its latitude differ from the point
   right before it in the substituted sequence.

Coordinates are ``[lon, lat, ...]`` arrays. Anything after the latitude is
carried through untouched.
"""

from dataclasses import dataclass
from typing import Any

from gateway.utils.geo import BoundingBox, is_coordinate


@dataclass(frozen=True)
class ProtectedZone:
    name: str
    box: BoundingBox
    decoy: tuple[float, float]


PROTECTED_ZONES: tuple[ProtectedZone, ...] = (
    ProtectedZone(
        name="austin",
        box=BoundingBox(
            min_lon=-97.92835235595705,
            max_lon=-97.58090972900392,
            min_lat=30.1457209625174,
            max_lat=30.427361303226743,
        ),
        decoy=(-97.74053500, 30.27418300),
    ),
    ProtectedZone(
        name="tulsa",
        box=BoundingBox(
            min_lon=-96.0071182,
            max_lon=-95.7616425,
            min_lat=35.9557765,
            max_lat=36.1655966,
        ),
        decoy=(-95.99151600, 36.15685900),
    ),
)


def substitute_point(point: Any) -> Any:
    """Return ``point`` moved to a decoy if it lies in a protected zone."""
    if not is_coordinate(point):
        return point
    lon, lat = point[0], point[1]
    for zone in PROTECTED_ZONES:
        if zone.box.contains(lon, lat):
            return [zone.decoy[0], zone.decoy[1], *point[2:]]
    return list(point)


def _is_stationary(point: Any, previous: Any) -> bool:
    if not (is_coordinate(point) and is_coordinate(previous)):
        return False
    return point[0] == previous[0] or point[1] == previous[1]


def remove_stationary(points: list) -> list:
    """Drop points that did not move on both axes since the previous one."""
    return [
        point
        for index, point in enumerate(points)
        if index == 0 or not _is_stationary(point, points[index - 1])
    ]


def redact_coordinates(points: list) -> list:
    """Apply geofence substitution then stationary-point removal.

    Returns a new list; ``points`` is not modified.
    """
    if not points:
        return list(points or [])
    return remove_stationary([substitute_point(point) for point in points])


def redact_payload(payload: Any) -> Any:
    """Redact ``payload["line"]["coordinates"]`` if there is one.

    Returns the payload with a new ``line`` object; payloads without a
    non-empty coordinate list come back unchanged.
    """
    if not isinstance(payload, dict):
        return payload
    line = payload.get("line")
    if not isinstance(line, dict):
        return payload
    coordinates = line.get("coordinates")
    if not isinstance(coordinates, list) or not coordinates:
        return payload

    return {**payload, "line": {**line, "coordinates": redact_coordinates(coordinates)}}
