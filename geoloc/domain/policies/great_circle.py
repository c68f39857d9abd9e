"""Great-circle math — distance, initial bearing and midpoint on a spherical Earth."""

from __future__ import annotations

import math
from typing import Any

from geoloc.domain.policies.coordinate_validation import (
    MAX_LONGITUDE,
    MIN_LONGITUDE,
    ensure_valid,
)
from geoloc.domain.value_objects.coordinates import Coordinates, DistanceResult

KM_TO_MILES = 0.621371

INVALID_FIRST = "Invalid first coordinate"
INVALID_SECOND = "Invalid second coordinate"


def _validate_pair(start: Any, end: Any) -> tuple[Coordinates, Coordinates]:
    """First argument is checked before the second."""
    return ensure_valid(start, INVALID_FIRST), ensure_valid(end, INVALID_SECOND)


def calculate_distance(start: Any, end: Any) -> DistanceResult:
    """Haversine distance between two points in kilometers, miles and meters.

    Kilometers and miles are rounded to 3 decimals, meters to a whole number.

    Raises:
        InvalidInputError: if either point is invalid.
    """
    a, b = _validate_pair(start, end)
    km = a.haversine_km(b)

    return DistanceResult(
        kilometers=round(km, 3),
        miles=round(km * KM_TO_MILES, 3),
        meters=round(km * 1000),
    )


def calculate_bearing(start: Any, end: Any) -> float:
    """Initial compass bearing from ``start`` to ``end``.

    Returns degrees in [0, 360) rounded to 2 decimals, 0 = north, clockwise.

    Raises:
        InvalidInputError: if either point is invalid.
    """
    a, b = _validate_pair(start, end)

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    bearing = (math.degrees(math.atan2(y, x)) + 360) % 360
    # 359.996 rounds to 360.0, which is north again
    return round(bearing, 2) % 360


def find_midpoint(start: Any, end: Any) -> Coordinates:
    """Great-circle midpoint between two points, rounded to 6 decimals.

    Unlike the raw ``lon1 + atan2(...)`` formula, the longitude is shifted by
    360° when it lands outside [-180, 180]: (0, 179.5) and (0, -178.5) give
    -179.5, not 180.5. Values already in range (including ±180) are kept.

    Raises:
        InvalidInputError: if either point is invalid.
    """
    a, b = _validate_pair(start, end)

    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    bx = math.cos(lat2) * math.cos(dlon)
    by = math.cos(lat2) * math.sin(dlon)

    lat3 = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by**2),
    )
    lon3 = lon1 + math.atan2(by, math.cos(lat1) + bx)

    longitude = math.degrees(lon3)
    if longitude > MAX_LONGITUDE:
        longitude -= 360
    elif longitude < MIN_LONGITUDE:
        longitude += 360

    return Coordinates(
        latitude=round(math.degrees(lat3), 6),
        longitude=round(longitude, 6),
    )
