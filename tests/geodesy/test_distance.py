"""Tests for great-circle and geodesic distance services.

Haversine values are checked against hand-derived results on the
6,371,000 m sphere; geodesic values come from pyproj's WGS84 ellipsoid.
"""

from __future__ import annotations

import math

import pytest

from domain.geodesy.services import (
    EARTH_MEAN_RADIUS_M,
    geodesic_distance,
    haversine_distance,
    interpolate_geodesic_path,
)
from domain.geodesy.value_objects import GeoPoint

SAMPLE_POINTS = [
    GeoPoint(latitude=0.0, longitude=0.0),
    GeoPoint(latitude=28.6139, longitude=77.2090),
    GeoPoint(latitude=-33.8688, longitude=151.2093),
    GeoPoint(latitude=51.5074, longitude=-0.1278),
    GeoPoint(latitude=-20.0, longitude=-45.0),
    GeoPoint(latitude=84.9, longitude=179.9),
]


# ===========================================================================
# Haversine
# ===========================================================================
@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_haversine_identical_points_is_zero(point):
    assert haversine_distance(point, point) == 0.0


@pytest.mark.parametrize("first", SAMPLE_POINTS)
@pytest.mark.parametrize("second", SAMPLE_POINTS)
def test_haversine_is_symmetric(first, second):
    assert haversine_distance(first, second) == pytest.approx(
        haversine_distance(second, first), rel=1e-12
    )


def test_haversine_one_degree_of_longitude_on_equator():
    start = GeoPoint(latitude=0.0, longitude=0.0)
    end = GeoPoint(latitude=0.0, longitude=1.0)

    expected = EARTH_MEAN_RADIUS_M * math.pi / 180
    assert haversine_distance(start, end) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize(
    "start, end",
    [
        ((0.0, 0.0), (0.0, 180.0)),
        ((90.0, 0.0), (-90.0, 0.0)),
        ((45.0, 10.0), (-45.0, -170.0)),
    ],
)
def test_haversine_antipodal_points_is_half_circumference(start, end):
    """Antipodes give pi * R without NaN from float overshoot."""
    a = GeoPoint(latitude=start[0], longitude=start[1])
    b = GeoPoint(latitude=end[0], longitude=end[1])

    distance = haversine_distance(a, b)

    assert math.isfinite(distance)
    assert distance == pytest.approx(math.pi * EARTH_MEAN_RADIUS_M, rel=1e-9)


def test_haversine_delhi_link(delhi_a, delhi_b):
    assert haversine_distance(delhi_a, delhi_b) == pytest.approx(14442.26, abs=0.5)


# ===========================================================================
# Geodesic (WGS84 reference)
# ===========================================================================
def test_geodesic_distance_close_to_haversine(delhi_a, delhi_b):
    """Sphere vs ellipsoid differ by well under 0.5% on a short link."""
    geodesic = geodesic_distance(delhi_a, delhi_b)
    haversine = haversine_distance(delhi_a, delhi_b)

    assert geodesic > 0
    assert abs(geodesic - haversine) / geodesic < 0.005


def test_geodesic_distance_is_positive_in_both_directions(delhi_a, delhi_b):
    assert geodesic_distance(delhi_b, delhi_a) == pytest.approx(
        geodesic_distance(delhi_a, delhi_b), abs=1e-6
    )


# ===========================================================================
# Geodesic path interpolation
# ===========================================================================
def test_interpolate_path_includes_endpoints(delhi_a, delhi_b):
    path = interpolate_geodesic_path(delhi_a, delhi_b, 3)

    assert len(path) == 5
    assert path[0] == delhi_a
    assert path[-1] == delhi_b


def test_interpolate_path_without_intermediate_points(delhi_a, delhi_b):
    assert interpolate_geodesic_path(delhi_a, delhi_b, 0) == [delhi_a, delhi_b]


def test_interpolate_path_points_are_evenly_spaced(delhi_a, delhi_b):
    path = interpolate_geodesic_path(delhi_a, delhi_b, 9)
    total = geodesic_distance(delhi_a, delhi_b)

    for i, point in enumerate(path):
        assert geodesic_distance(delhi_a, point) == pytest.approx(
            total * i / 10, abs=0.01
        )
