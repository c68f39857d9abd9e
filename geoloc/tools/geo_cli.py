"""Command-line front end for the coordinate utilities.

Usage:
    python -m geoloc.tools.geo_cli distance 40.7128 -74.0060 34.0522 -118.2437
    python -m geoloc.tools.geo_cli bearing 0 0 10 0
    python -m geoloc.tools.geo_cli format 40.7128 -74.0060 --format dms
    python -m geoloc.tools.geo_cli --json midpoint 51.5074 -0.1278 48.8566 2.3522
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any

from geoloc.config import settings
from geoloc.domain.errors import InvalidInputError
from geoloc.domain.policies.bounds import is_within_bounds
from geoloc.domain.policies.coordinate_format import format_coordinates
from geoloc.domain.policies.coordinate_validation import is_valid_coordinates
from geoloc.domain.policies.great_circle import (
    calculate_bearing,
    calculate_distance,
    find_midpoint,
)
from geoloc.domain.value_objects.coordinates import Coordinates
from geoloc.domain.value_objects.enums import CoordinateFormat

logger = logging.getLogger(__name__)


def _point(lat: float, lon: float) -> Coordinates:
    return Coordinates(latitude=lat, longitude=lon)


def _add_point(parser: argparse.ArgumentParser, prefix: str = "") -> None:
    name = f"{prefix}_" if prefix else ""
    parser.add_argument(f"{name}lat", type=float, metavar=f"{name.upper()}LAT")
    parser.add_argument(f"{name}lon", type=float, metavar=f"{name.upper()}LON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geographic coordinate utilities")
    parser.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check that a coordinate is in range")
    _add_point(validate)

    for command, help_text in (
        ("distance", "Great-circle distance in km, miles and meters"),
        ("bearing", "Initial compass bearing in degrees"),
        ("midpoint", "Great-circle midpoint"),
    ):
        pair = sub.add_parser(command, help=help_text)
        _add_point(pair, "from")
        _add_point(pair, "to")

    fmt = sub.add_parser("format", help="Format a coordinate as text")
    _add_point(fmt)
    fmt.add_argument(
        "--format", dest="fmt", choices=[f.value for f in CoordinateFormat],
        default=None,
        help=f"Output style (default: {settings.default_coordinate_format.value})",
    )

    bounds = sub.add_parser("bounds", help="Check a coordinate against a bounding box")
    _add_point(bounds)
    _add_point(bounds, "ne")
    _add_point(bounds, "sw")

    return parser


def run(args: argparse.Namespace) -> Any:
    """Dispatch a parsed command and return its result."""
    if args.command == "validate":
        return is_valid_coordinates(_point(args.lat, args.lon))

    if args.command in ("distance", "bearing", "midpoint"):
        start = _point(args.from_lat, args.from_lon)
        end = _point(args.to_lat, args.to_lon)
        if args.command == "distance":
            return calculate_distance(start, end)
        if args.command == "bearing":
            return calculate_bearing(start, end)
        return find_midpoint(start, end)

    if args.command == "format":
        fmt = args.fmt or settings.default_coordinate_format
        return format_coordinates(_point(args.lat, args.lon), fmt)

    return is_within_bounds(
        _point(args.lat, args.lon),
        _point(args.ne_lat, args.ne_lon),
        _point(args.sw_lat, args.sw_lon),
    )


def _render(result: Any, as_json: bool) -> str:
    if dataclasses.is_dataclass(result):
        if as_json:
            return json.dumps(dataclasses.asdict(result))
        return ", ".join(f"{k}={v}" for k, v in dataclasses.asdict(result).items())
    if as_json:
        return json.dumps(result, ensure_ascii=False)
    return str(result)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(levelname)s | %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        result = run(args)
    except InvalidInputError as e:
        logger.error("%s: %s", args.command, e)
        return 1

    print(_render(result, args.json))
    if args.command == "validate" and not result:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
