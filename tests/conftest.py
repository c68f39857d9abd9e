"""Pytest configuration and shared fixtures."""

import pytest

from geoloc.domain.value_objects.coordinates import Coordinates


@pytest.fixture
def new_york():
    return Coordinates(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def los_angeles():
    return Coordinates(latitude=34.0522, longitude=-118.2437)


@pytest.fixture
def london():
    return Coordinates(latitude=51.5074, longitude=-0.1278)


@pytest.fixture
def paris():
    return Coordinates(latitude=48.8566, longitude=2.3522)


@pytest.fixture
def sydney():
    return Coordinates(latitude=-33.8688, longitude=151.2093)
