"""Terrain Bounded Context - Value Objects.

Immutable elevation samples along a link path. All validation occurs at
construction time via Pydantic.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.geodesy.value_objects import GeoPoint


# ---------------------------------------------------------------------------
# ElevationSample
# ---------------------------------------------------------------------------
class ElevationSample(BaseModel):
    """Single elevation reading along a path (Value Object).

    Invariants:
        distance_m >= 0
        elevation_m is finite or None (None = service had no data)
    """

    point: GeoPoint
    distance_m: float = Field(ge=0)  # Cumulative distance from start in meters
    elevation_m: float | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_elevation(self) -> "ElevationSample":
        if self.elevation_m is not None and not math.isfinite(self.elevation_m):
            raise ValueError("elevation_m must be finite or None")
        return self


# ---------------------------------------------------------------------------
# ElevationProfile
# ---------------------------------------------------------------------------
class ElevationProfile(BaseModel):
    """Elevation readings between two points (Value Object).

    Invariants:
        len(samples) >= 2
        samples[0].distance_m == 0
        samples strictly ordered by distance_m
        samples[0].point == start, samples[-1].point == end
    """

    start: GeoPoint
    end: GeoPoint
    samples: tuple[ElevationSample, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_profile(self) -> "ElevationProfile":
        if len(self.samples) < 2:
            raise ValueError(f"Profile must have >= 2 samples, got {len(self.samples)}")

        if self.samples[0].distance_m != 0:
            raise ValueError(
                f"First sample must be at distance 0, got {self.samples[0].distance_m}"
            )

        for i in range(1, len(self.samples)):
            if self.samples[i].distance_m <= self.samples[i - 1].distance_m:
                raise ValueError("Samples must be strictly ordered by distance")

        if self.samples[0].point != self.start:
            raise ValueError("First sample point must equal start")
        if self.samples[-1].point != self.end:
            raise ValueError("Last sample point must equal end")

        return self

    @property
    def total_distance_m(self) -> float:
        return self.samples[-1].distance_m

    @property
    def has_gaps(self) -> bool:
        """True if any sample has no elevation."""
        return any(s.elevation_m is None for s in self.samples)

    def elevations(self) -> tuple[float | None, ...]:
        return tuple(s.elevation_m for s in self.samples)

    def distances(self) -> tuple[float, ...]:
        return tuple(s.distance_m for s in self.samples)
