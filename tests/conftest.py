"""Root pytest configuration for all tests.

Provides shared fixtures: reference link endpoints, a fresh tower registry,
and a settings cache that is cleared around every test so environment
overrides never leak between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from domain.geodesy.value_objects import GeoPoint
from domain.network.registry import TowerRegistry
from shared.reference_links import DELHI_5GHZ
from src.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Clear the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def delhi_a() -> GeoPoint:
    lat, lon = DELHI_5GHZ.point_a
    return GeoPoint(latitude=lat, longitude=lon)


@pytest.fixture
def delhi_b() -> GeoPoint:
    lat, lon = DELHI_5GHZ.point_b
    return GeoPoint(latitude=lat, longitude=lon)


@pytest.fixture
def registry() -> TowerRegistry:
    return TowerRegistry()
