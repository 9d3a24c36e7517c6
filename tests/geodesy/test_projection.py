"""Tests for the Web Mercator projector (project / unproject)."""

from __future__ import annotations

import math

import pytest
from pyproj import Transformer

from domain.geodesy.errors import GeometryError, OutOfDomainError
from domain.geodesy.services import WEB_MERCATOR_RADIUS_M, project, unproject
from domain.geodesy.value_objects import GeoPoint, PlanarPoint

HALF_WORLD_M = math.pi * WEB_MERCATOR_RADIUS_M  # 20037508.342789244


# ===========================================================================
# Forward projection
# ===========================================================================
def test_project_origin():
    planar = project(GeoPoint(latitude=0.0, longitude=0.0))

    assert planar.x == pytest.approx(0.0, abs=1e-9)
    assert planar.y == pytest.approx(0.0, abs=1e-9)


def test_project_antimeridian_is_half_world():
    planar = project(GeoPoint(latitude=0.0, longitude=180.0))

    assert planar.x == pytest.approx(HALF_WORLD_M, abs=1e-6)


def test_project_web_mercator_square_corner():
    """The tile-pyramid latitude limit maps y onto pi * R."""
    planar = project(GeoPoint(latitude=85.0511287798066, longitude=-180.0))

    assert planar.x == pytest.approx(-HALF_WORLD_M, abs=1e-6)
    assert planar.y == pytest.approx(HALF_WORLD_M, abs=0.01)


@pytest.mark.parametrize(
    "latitude, longitude",
    [(28.6139, 77.2090), (-33.8688, 151.2093), (51.5074, -0.1278), (-80.0, -170.0)],
)
def test_project_matches_pyproj_epsg_3857(latitude, longitude):
    transformer = Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True)
    expected_x, expected_y = transformer.transform(longitude, latitude)

    planar = project(GeoPoint(latitude=latitude, longitude=longitude))

    assert planar.x == pytest.approx(expected_x, abs=1e-3)
    assert planar.y == pytest.approx(expected_y, abs=1e-3)


@pytest.mark.parametrize("latitude", [90.0, -90.0])
def test_project_rejects_poles(latitude):
    with pytest.raises(OutOfDomainError) as exc_info:
        project(GeoPoint(latitude=latitude, longitude=0.0))

    assert exc_info.value.latitude == latitude
    assert isinstance(exc_info.value, GeometryError)


def test_project_allows_high_latitude_below_pole():
    """[85, 90) is accepted; y is large but finite."""
    planar = project(GeoPoint(latitude=89.9, longitude=0.0))

    assert math.isfinite(planar.y)
    assert planar.y > HALF_WORLD_M


# ===========================================================================
# Inverse projection
# ===========================================================================
@pytest.mark.parametrize("latitude", [-84.99, -60.0, -28.5, -1e-7, 0.0, 12.3456789, 45.0, 84.99])
@pytest.mark.parametrize("longitude", [-180.0, -122.4194, 0.0, 77.209, 179.999999])
def test_round_trip_within_nanodegree(latitude, longitude):
    point = GeoPoint(latitude=latitude, longitude=longitude)

    back = unproject(project(point))

    assert back.latitude == pytest.approx(latitude, abs=1e-9)
    assert back.longitude == pytest.approx(longitude, abs=1e-9)


def test_unproject_origin():
    point = unproject(PlanarPoint(x=0.0, y=0.0))

    assert point.latitude == pytest.approx(0.0, abs=1e-12)
    assert point.longitude == pytest.approx(0.0, abs=1e-12)


def test_unproject_clamps_float_noise_at_antimeridian():
    point = unproject(PlanarPoint(x=HALF_WORLD_M, y=0.0))

    assert point.longitude == pytest.approx(180.0, abs=1e-9)
    assert point.longitude <= 180.0


@pytest.mark.parametrize(
    "x, expected_longitude",
    [
        (HALF_WORLD_M + 1000.0, -180.0 + math.degrees(1000.0 / WEB_MERCATOR_RADIUS_M)),
        (-HALF_WORLD_M - 1000.0, 180.0 - math.degrees(1000.0 / WEB_MERCATOR_RADIUS_M)),
        (2 * HALF_WORLD_M + 1000.0, math.degrees(1000.0 / WEB_MERCATOR_RADIUS_M)),
    ],
)
def test_unproject_wraps_longitude_past_antimeridian(x, expected_longitude):
    point = unproject(PlanarPoint(x=x, y=0.0))

    assert point.longitude == pytest.approx(expected_longitude, abs=1e-9)
    assert point.latitude == pytest.approx(0.0, abs=1e-12)


def test_unproject_wrap_matches_same_place_on_other_side():
    """180.000002 degrees east is -179.999998 degrees."""
    offset_m = 0.25
    east = unproject(PlanarPoint(x=HALF_WORLD_M + offset_m, y=1_000_000.0))
    west = unproject(PlanarPoint(x=-HALF_WORLD_M + offset_m, y=1_000_000.0))

    assert east.longitude == pytest.approx(west.longitude, abs=1e-9)
    assert east.latitude == west.latitude


def test_unproject_rejects_overflowing_y():
    with pytest.raises(OutOfDomainError):
        unproject(PlanarPoint(x=0.0, y=1e10))


def test_unproject_far_south_stays_in_range():
    point = unproject(PlanarPoint(x=0.0, y=-1e9))

    assert -90.0 <= point.latitude < -89.0
