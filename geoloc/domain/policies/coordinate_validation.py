"""Coordinate validation — range and type checks shared by every operation."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from geoloc.domain.errors import InvalidInputError
from geoloc.domain.value_objects.coordinates import Coordinates

logger = logging.getLogger(__name__)

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def _read_field(coords: Any, name: str) -> Any:
    if isinstance(coords, Mapping):
        return coords.get(name)
    return getattr(coords, name, None)


def _is_real_number(value: Any) -> bool:
    # bool is an int subclass but is never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints and Fractions too large for a float
        return False


def is_valid_coordinates(coords: Any) -> bool:
    """Return True if ``coords`` holds a latitude/longitude pair in range.

    ``coords`` may be a Coordinates, any object with ``latitude`` and
    ``longitude`` attributes, or a mapping with those keys. Missing fields,
    non-numeric values, NaN and infinities are all invalid. Range bounds are
    inclusive. Never raises.
    """
    if coords is None:
        return False

    latitude = _read_field(coords, "latitude")
    longitude = _read_field(coords, "longitude")
    if not (_is_real_number(latitude) and _is_real_number(longitude)):
        return False

    return (
        MIN_LATITUDE <= latitude <= MAX_LATITUDE
        and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE
    )


def ensure_valid(coords: Any, message: str) -> Coordinates:
    """Validate ``coords`` and return it as a Coordinates value object.

    Raises:
        InvalidInputError: with ``message`` if the coordinates are invalid.
    """
    if not is_valid_coordinates(coords):
        logger.debug("Rejected coordinates %r: %s", coords, message)
        raise InvalidInputError(message)
    if isinstance(coords, Coordinates):
        return coords
    return Coordinates(
        latitude=_read_field(coords, "latitude"),
        longitude=_read_field(coords, "longitude"),
    )
