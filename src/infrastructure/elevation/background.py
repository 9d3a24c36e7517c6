"""Fire-and-forget elevation enrichment.

Runs elevation lookups on a worker thread and hands back a
``concurrent.futures.Future``. Geometry is computed independently and never
waits on, or changes because of, these lookups.

Failure policy: any TerrainError (or malformed input) is logged and the
future resolves to None. Cancelling a pending future skips the lookup.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType

from pydantic import ValidationError

from domain.geodesy.value_objects import GeoPoint
from domain.terrain.errors import TerrainError
from domain.terrain.repositories import ElevationRepository
from domain.terrain.services import (
    DEFAULT_PATH_SAMPLES,
    build_elevation_profile,
    sample_link_path,
)
from domain.terrain.value_objects import ElevationProfile

logger = logging.getLogger(__name__)


class ElevationEnricher:
    """Schedules elevation lookups for link paths in the background.

    Parameters
    ----------
    repository: ElevationRepository
        Source of elevations (e.g., OpenElevationAdapter).
    num_samples: int
        Points sampled along each link, endpoints included.
    max_workers: int
        Size of the worker pool.
    """

    def __init__(
        self,
        repository: ElevationRepository,
        num_samples: int = DEFAULT_PATH_SAMPLES,
        max_workers: int = 1,
    ) -> None:
        self.repository = repository
        self.num_samples = num_samples
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="elevation"
        )

    def submit(self, start: GeoPoint, end: GeoPoint) -> Future[ElevationProfile | None]:
        """Schedule a lookup; the future yields a profile, or None on failure."""
        return self._executor.submit(self._enrich, start, end)

    def profile(self, start: GeoPoint, end: GeoPoint) -> ElevationProfile:
        """Synchronous lookup. Errors propagate to the caller."""
        points = sample_link_path(start, end, self.num_samples)
        elevations = self.repository.lookup(points)
        return build_elevation_profile(points, elevations)

    def _enrich(self, start: GeoPoint, end: GeoPoint) -> ElevationProfile | None:
        try:
            return self.profile(start, end)
        except (TerrainError, ValidationError) as e:
            logger.warning(
                "Elevation enrichment for (%.6f, %.6f) -> (%.6f, %.6f) failed: %s",
                start.latitude,
                start.longitude,
                end.latitude,
                end.longitude,
                e,
            )
            return None

    def shutdown(self, wait: bool = True, cancel_pending: bool = False) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=cancel_pending)

    def __enter__(self) -> "ElevationEnricher":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown(wait=True, cancel_pending=exc_type is not None)
