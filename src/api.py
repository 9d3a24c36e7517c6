"""Function-level API for the map presentation layer.

Thin wrappers over the domain services that accept either value objects or
plain pairs (``(lat, lon)`` in degrees, ``(x, y)`` in meters) and report bad
input with the geometry error types instead of returning NaN. The
``create_*`` factories wire settings into the registry and elevation layer.

Usage:
    >>> from src.api import compute_fresnel_zone
    >>> zone = compute_fresnel_zone((28.6139, 77.2090), (28.7041, 77.1025), 5.0)
    >>> zone.radius_m, len(zone.polygon)
"""

from __future__ import annotations

import logging

import httpx

from domain.geodesy.services import haversine_distance, project, unproject
from domain.geodesy.value_objects import (
    GeoPoint,
    GeoPointLike,
    PlanarPoint,
    PlanarPointLike,
    to_geo_point,
    to_planar_point,
)
from domain.network.registry import TowerRegistry
from domain.radio import services as radio
from domain.radio.value_objects import FresnelResult
from src.config import PlannerSettings, get_settings
from src.infrastructure.elevation import ElevationEnricher, OpenElevationAdapter

__all__ = [
    "compute_distance",
    "compute_fresnel_zone",
    "create_elevation_enricher",
    "create_registry",
    "project_to_plane",
    "unproject_from_plane",
]

logger = logging.getLogger(__name__)


def compute_distance(point_a: GeoPointLike, point_b: GeoPointLike) -> float:
    """Great-circle (haversine) distance in meters.

    Raises:
        InvalidInputError: Non-finite or malformed coordinates
        OutOfDomainError: |latitude| > 90
    """
    return haversine_distance(to_geo_point(point_a), to_geo_point(point_b))


def project_to_plane(point: GeoPointLike) -> PlanarPoint:
    """Web Mercator projection; fails with OutOfDomainError at |latitude| >= 90."""
    return project(to_geo_point(point))


def unproject_from_plane(point: PlanarPointLike) -> GeoPoint:
    """Inverse Web Mercator projection."""
    return unproject(to_planar_point(point))


def compute_fresnel_zone(
    point_a: GeoPointLike,
    point_b: GeoPointLike,
    frequency_ghz: float,
    segments: int | None = None,
) -> FresnelResult:
    """First Fresnel zone of a link; segments defaults to settings.ellipse_segments.

    Raises:
        InvalidInputError: Bad coordinates, frequency <= 0, or segments < 3
        OutOfDomainError: An endpoint at |latitude| >= 90
    """
    if segments is None:
        segments = get_settings().ellipse_segments
    return radio.compute_fresnel_zone(
        to_geo_point(point_a),
        to_geo_point(point_b),
        frequency_ghz,
        segments=segments,
    )


def create_registry(settings: PlannerSettings | None = None) -> TowerRegistry:
    """Empty tower registry whose new towers default to settings.default_frequency_ghz."""
    settings = settings or get_settings()
    return TowerRegistry(default_frequency_ghz=settings.default_frequency_ghz)


def create_elevation_enricher(
    settings: PlannerSettings | None = None,
    client: httpx.Client | None = None,
) -> ElevationEnricher | None:
    """Background elevation enricher wired to the configured Open-Elevation service.

    Returns None when ``elevation_enabled`` is off; callers then skip terrain
    profiles entirely. ``client`` is handed to the adapter (tests inject a
    MockTransport-backed one).
    """
    settings = settings or get_settings()
    if not settings.elevation_enabled:
        logger.info("Elevation enrichment disabled by settings")
        return None

    adapter = OpenElevationAdapter(
        base_url=settings.elevation_base_url,
        timeout_seconds=settings.elevation_timeout_seconds,
        client=client,
    )
    logger.debug(
        "Elevation enrichment: %d samples per link, %.1fs timeout",
        settings.elevation_samples,
        settings.elevation_timeout_seconds,
    )
    return ElevationEnricher(adapter, num_samples=settings.elevation_samples)
