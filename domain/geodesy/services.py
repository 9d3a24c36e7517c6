"""Geodesy Bounded Context - Domain Services.

Pure functions: great-circle distance, Web Mercator projection and geodesic
path interpolation. NO I/O and no shared mutable state; everything here is
safe to call concurrently.

Numeric note: two Earth radii coexist on purpose. Haversine uses the mean
sphere (6,371,000 m) while Web Mercator uses the WGS84 semi-major axis
(6,378,137 m). Distances and planar lengths therefore differ slightly for the
same link; the Fresnel radius is always derived from the haversine distance.
"""

from __future__ import annotations

import math

from pyproj import Geod

from domain.geodesy.errors import OutOfDomainError
from domain.geodesy.value_objects import GeoPoint, PlanarPoint

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EARTH_MEAN_RADIUS_M = 6_371_000.0  # Haversine sphere
WEB_MERCATOR_RADIUS_M = 6_378_137.0  # WGS84 semi-major axis (EPSG:3857 sphere)

# Round-trip precision is only guaranteed below this latitude
MERCATOR_PRECISE_LATITUDE = 85.0

# Slack for float noise when unprojecting x = +/- pi * R back to +/- 180 degrees
_LONGITUDE_SLACK_DEG = 1e-9

# WGS84 ellipsoid for reference geodesic calculations
_geod = Geod(ellps="WGS84")


# ---------------------------------------------------------------------------
# Great-circle Distance
# ---------------------------------------------------------------------------
def haversine_distance(start: GeoPoint, end: GeoPoint) -> float:
    """Great-circle distance between two points in meters (haversine).

    Args:
        start: First geographic point
        end: Second geographic point

    Returns:
        Distance in meters on a sphere of radius EARTH_MEAN_RADIUS_M.
        Exactly 0.0 for identical points, ~pi * R for antipodes.
    """
    lat1 = math.radians(start.latitude)
    lat2 = math.radians(end.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(end.longitude - start.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # Float overshoot near antipodes can push a past 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_MEAN_RADIUS_M * c


def geodesic_distance(start: GeoPoint, end: GeoPoint) -> float:
    """Calculate geodesic distance between two points in meters.

    Uses the WGS84 ellipsoid for millimeter-level precision. This is the
    accuracy reference for haversine_distance, not a replacement for it.

    Returns:
        Distance in meters (always positive)
    """
    _, _, distance = _geod.inv(
        start.longitude, start.latitude, end.longitude, end.latitude
    )
    return float(abs(distance))


# ---------------------------------------------------------------------------
# Geodesic Path Interpolation
# ---------------------------------------------------------------------------
def interpolate_geodesic_path(
    start: GeoPoint, end: GeoPoint, num_intermediate: int
) -> list[GeoPoint]:
    """Interpolate points along the geodesic between start and end.

    Uses pyproj.Geod.npts for true geodesic interpolation (not linear in lat/lon).

    Args:
        start: Starting point
        end: Ending point
        num_intermediate: Number of points BETWEEN start and end

    Returns:
        List of all points: [start, ...intermediate..., end]
    """
    if num_intermediate <= 0:
        return [start, end]

    # npts returns intermediate points (excludes endpoints)
    intermediate = _geod.npts(
        start.longitude, start.latitude, end.longitude, end.latitude, num_intermediate
    )

    result = [start]
    for lon, lat in intermediate:
        result.append(GeoPoint(latitude=lat, longitude=lon))
    result.append(end)

    return result


# ---------------------------------------------------------------------------
# Web Mercator Projection
# ---------------------------------------------------------------------------
def project(point: GeoPoint) -> PlanarPoint:
    """Project a geographic point to Web Mercator meters.

    ``x = R * lon``, ``y = R * ln(tan(pi/4 + lat/2))`` with R = WEB_MERCATOR_RADIUS_M.

    Latitudes in [85, 90) are accepted but y grows without bound there;
    the inverse is only precise to 1e-9 degrees below MERCATOR_PRECISE_LATITUDE.

    Raises:
        OutOfDomainError: |latitude| >= 90 (y diverges)
    """
    if abs(point.latitude) >= 90:
        raise OutOfDomainError(
            f"Web Mercator is undefined at latitude {point.latitude}",
            latitude=point.latitude,
        )

    lat_rad = math.radians(point.latitude)
    lon_rad = math.radians(point.longitude)
    x = WEB_MERCATOR_RADIUS_M * lon_rad
    y = WEB_MERCATOR_RADIUS_M * math.log(math.tan(math.pi / 4 + lat_rad / 2))
    return PlanarPoint(x=x, y=y)


def unproject(point: PlanarPoint) -> GeoPoint:
    """Inverse of project: Web Mercator meters back to a geographic point.

    ``lon = x / R``, ``lat = 2 * atan(e^(y/R)) - pi/2`` (both converted to degrees).

    Longitudes past the antimeridian wrap into [-180, 180].

    Raises:
        OutOfDomainError: y so large that e^(y/R) overflows
    """
    longitude = _wrap_longitude(math.degrees(point.x / WEB_MERCATOR_RADIUS_M))

    try:
        growth = math.exp(point.y / WEB_MERCATOR_RADIUS_M)
    except OverflowError as e:
        raise OutOfDomainError(f"Planar y={point.y:.3f} is beyond the pole") from e
    latitude = math.degrees(2 * math.atan(growth) - math.pi / 2)

    return GeoPoint(latitude=latitude, longitude=longitude)


def _wrap_longitude(longitude: float) -> float:
    """Fold a longitude into [-180, 180]; float noise at +/-180 is clamped."""
    if abs(longitude) <= 180 + _LONGITUDE_SLACK_DEG:
        return max(-180.0, min(180.0, longitude))
    wrapped = (longitude + 180.0) % 360.0 - 180.0
    if wrapped == -180.0 and longitude > 0:
        return 180.0
    return wrapped
