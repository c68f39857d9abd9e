"""Tests for coordinate validation."""

from fractions import Fraction
from types import SimpleNamespace

import pytest

from geoloc.domain.errors import InvalidInputError
from geoloc.domain.policies.coordinate_validation import ensure_valid, is_valid_coordinates
from geoloc.domain.policies.great_circle import calculate_distance
from geoloc.domain.value_objects.coordinates import Coordinates

# ─── is_valid_coordinates ────────────────────────────────────────────


@pytest.mark.parametrize(
    "lat, lon",
    [(0, 0), (45.5, -122.6), (-33.8688, 151.2093)],
)
def test_valid_coordinates(lat, lon):
    assert is_valid_coordinates(Coordinates(latitude=lat, longitude=lon)) is True


@pytest.mark.parametrize(
    "lat, lon",
    [(90, 180), (-90, -180), (90, -180), (-90, 180)],
)
def test_boundary_values_are_valid(lat, lon):
    assert is_valid_coordinates(Coordinates(latitude=lat, longitude=lon)) is True


@pytest.mark.parametrize(
    "lat, lon",
    [(91, 0), (-91, 0), (100, 0), (0, 181), (0, -181), (0, 200)],
)
def test_out_of_range(lat, lon):
    assert is_valid_coordinates(Coordinates(latitude=lat, longitude=lon)) is False


@pytest.mark.parametrize(
    "lat, lon",
    [(float("nan"), 0), (0, float("nan")), (float("nan"), float("nan"))],
)
def test_nan_is_invalid(lat, lon):
    assert is_valid_coordinates(Coordinates(latitude=lat, longitude=lon)) is False


def test_infinity_is_invalid():
    assert is_valid_coordinates(Coordinates(latitude=float("inf"), longitude=0)) is False


def test_none_is_invalid():
    assert is_valid_coordinates(None) is False


def test_non_numeric_fields():
    assert is_valid_coordinates(Coordinates(latitude="invalid", longitude=0)) is False
    assert is_valid_coordinates(Coordinates(latitude=0, longitude="invalid")) is False
    assert is_valid_coordinates(Coordinates(latitude=True, longitude=0)) is False


def test_missing_fields():
    assert is_valid_coordinates({}) is False
    assert is_valid_coordinates({"latitude": 10}) is False
    assert is_valid_coordinates(object()) is False


def test_mapping_input():
    assert is_valid_coordinates({"latitude": 10, "longitude": 20}) is True
    assert is_valid_coordinates({"latitude": 10, "longitude": 200}) is False


def test_attribute_object_input():
    assert is_valid_coordinates(SimpleNamespace(latitude=-10.0, longitude=20.0)) is True


# ─── ensure_valid ────────────────────────────────────────────────────


def test_ensure_valid_returns_same_instance():
    p = Coordinates(latitude=1.0, longitude=2.0)
    assert ensure_valid(p, "boom") is p


def test_ensure_valid_converts_mapping():
    result = ensure_valid({"latitude": 1.0, "longitude": 2.0}, "boom")
    assert result == Coordinates(latitude=1.0, longitude=2.0)


def test_ensure_valid_raises_with_message():
    with pytest.raises(InvalidInputError, match="Invalid second coordinate"):
        ensure_valid({"latitude": 0, "longitude": 200}, "Invalid second coordinate")


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        ensure_valid(None, "nope")


# ─── oversized numbers ───────────────────────────────────────────────


def test_int_too_large_for_float_is_invalid():
    assert is_valid_coordinates({"latitude": 10**400, "longitude": 0}) is False
    assert is_valid_coordinates({"latitude": 0, "longitude": -(10**400)}) is False


def test_fraction_too_large_for_float_is_invalid():
    assert is_valid_coordinates({"latitude": Fraction(10**400, 3), "longitude": 0}) is False


def test_int_too_large_for_float_raises_invalid_input():
    with pytest.raises(InvalidInputError, match="Invalid first coordinate"):
        calculate_distance({"latitude": 10**400, "longitude": 0}, Coordinates(latitude=0, longitude=0))
