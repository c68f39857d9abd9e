"""Coordinate formatting — decimal degrees or degrees/minutes/seconds."""

from __future__ import annotations

import math
from typing import Any

from geoloc.domain.errors import InvalidInputError
from geoloc.domain.policies.coordinate_validation import ensure_valid
from geoloc.domain.value_objects.enums import CoordinateFormat


def _resolve_format(fmt: CoordinateFormat | str) -> CoordinateFormat:
    try:
        return CoordinateFormat(fmt)
    except ValueError:
        raise InvalidInputError(f"Unsupported coordinate format: {fmt!r}") from None


def _format_seconds(seconds: float) -> str:
    """Render rounded seconds without trailing zeros: 0, 1.5, 46.08."""
    return f"{seconds:.2f}".rstrip("0").rstrip(".")


def _to_dms(value: float) -> tuple[int, int, float]:
    absolute = abs(value)
    degrees = math.floor(absolute)
    minutes = math.floor((absolute - degrees) * 60)
    seconds = round(((absolute - degrees) * 60 - minutes) * 60, 2)
    return degrees, minutes, seconds


def format_coordinates(
    coords: Any, fmt: CoordinateFormat | str = CoordinateFormat.DECIMAL
) -> str:
    """Format a coordinate pair as human-readable text.

    decimal: ``"40.712800, -74.006000"``
    dms:     ``"40°42'46.08\\"N 74°0'21.6\\"W"``

    Raises:
        InvalidInputError: if the coordinates are invalid or the format is unknown.
    """
    point = ensure_valid(coords, "Invalid coordinates")
    mode = _resolve_format(fmt)

    if mode is CoordinateFormat.DECIMAL:
        # + 0.0 turns -0.0 into 0.0
        return f"{point.latitude + 0.0:.6f}, {point.longitude + 0.0:.6f}"

    lat_dir = "N" if point.latitude >= 0 else "S"
    lon_dir = "E" if point.longitude >= 0 else "W"
    lat_deg, lat_min, lat_sec = _to_dms(point.latitude)
    lon_deg, lon_min, lon_sec = _to_dms(point.longitude)

    return (
        f"{lat_deg}°{lat_min}'{_format_seconds(lat_sec)}\"{lat_dir} "
        f"{lon_deg}°{lon_min}'{_format_seconds(lon_sec)}\"{lon_dir}"
    )
