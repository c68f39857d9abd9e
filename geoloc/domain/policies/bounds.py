"""Bounding-box containment on a flat lat/lon rectangle."""

from __future__ import annotations

from typing import Any

from geoloc.domain.policies.coordinate_validation import ensure_valid
from geoloc.domain.value_objects.coordinates import BoundingBox

INVALID_COORDINATES = "Invalid coordinates"


def is_within_bounds(coords: Any, north_east: Any, south_west: Any) -> bool:
    """Return True if ``coords`` lies inside the box, edges and corners included.

    The box is a plain rectangle: a ``north_east`` longitude smaller than the
    ``south_west`` one does not wrap across the antimeridian, it simply
    matches nothing.

    Raises:
        InvalidInputError: if any of the three points is invalid.
    """
    point = ensure_valid(coords, INVALID_COORDINATES)
    ne = ensure_valid(north_east, INVALID_COORDINATES)
    sw = ensure_valid(south_west, INVALID_COORDINATES)

    return (
        sw.latitude <= point.latitude <= ne.latitude
        and sw.longitude <= point.longitude <= ne.longitude
    )


def is_within_box(coords: Any, box: BoundingBox) -> bool:
    """Same as :func:`is_within_bounds` for a BoundingBox value object."""
    return is_within_bounds(coords, box.north_east, box.south_west)
