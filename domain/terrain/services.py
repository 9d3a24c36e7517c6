"""Terrain Bounded Context - Domain Services.

Pure helpers for elevation enrichment. NO I/O - lookups are performed by
infrastructure adapters implementing ElevationRepository.
"""

from __future__ import annotations

from collections.abc import Sequence

from domain.geodesy.services import geodesic_distance, interpolate_geodesic_path
from domain.geodesy.value_objects import GeoPoint
from domain.terrain.errors import InvalidProfileError
from domain.terrain.value_objects import ElevationProfile, ElevationSample

DEFAULT_PATH_SAMPLES = 11


def sample_link_path(
    start: GeoPoint, end: GeoPoint, num_samples: int = DEFAULT_PATH_SAMPLES
) -> list[GeoPoint]:
    """Evenly spaced points along the geodesic from start to end, endpoints included.

    Raises:
        InvalidProfileError: start equals end, or num_samples < 2
    """
    if start == end:
        raise InvalidProfileError("Start equals end")
    if num_samples < 2:
        raise InvalidProfileError(f"num_samples must be >= 2, got {num_samples}")
    return interpolate_geodesic_path(start, end, num_samples - 2)


def build_elevation_profile(
    points: Sequence[GeoPoint], elevations: Sequence[float | None]
) -> ElevationProfile:
    """Pair sampled path points with looked-up elevations.

    Distances are geodesic from the first point, which is monotonic because
    the points come from sample_link_path.

    Raises:
        InvalidProfileError: Lengths differ or fewer than 2 points
    """
    if len(points) != len(elevations):
        raise InvalidProfileError(
            f"Got {len(elevations)} elevations for {len(points)} points"
        )
    if len(points) < 2:
        raise InvalidProfileError("Profile needs at least 2 points")

    start = points[0]
    samples = tuple(
        ElevationSample(
            point=point,
            distance_m=0.0 if i == 0 else geodesic_distance(start, point),
            elevation_m=elevation,
        )
        for i, (point, elevation) in enumerate(zip(points, elevations))
    )
    return ElevationProfile(start=start, end=points[-1], samples=samples)
