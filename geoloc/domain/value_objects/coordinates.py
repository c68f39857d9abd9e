"""Coordinate value objects — immutable (lat, lon) pair and derived results."""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def haversine_km(self, other: "Coordinates") -> float:
        """Calculate distance in km between two points using the Haversine formula.

        The result is not rounded. ``h`` is clamped to [0, 1] before the square roots.
        """
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        h = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        h = min(max(h, 0.0), 1.0)
        c = 2 * math.atan2(math.sqrt(h), math.sqrt(max(1 - h, 0.0)))

        return EARTH_RADIUS_KM * c


@dataclass(frozen=True)
class DistanceResult:
    """The same great-circle distance expressed in three units."""

    kilometers: float
    miles: float
    meters: int


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned lat/lon rectangle. Does not wrap across ±180° or the poles."""

    north_east: Coordinates
    south_west: Coordinates
