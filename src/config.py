"""Application settings (Pydantic).

Defaults live on the model. Environment variables prefixed with
``TOWER_PLANNER_`` override them, e.g.::

    TOWER_PLANNER_ELLIPSE_SEGMENTS=64
    TOWER_PLANNER_ELEVATION_ENABLED=false
    TOWER_PLANNER_LOG_LEVEL=DEBUG

Geometry functions never read settings; only the application layer does.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from domain.network.entities import DEFAULT_FREQUENCY_GHZ
from domain.radio.services import DEFAULT_SEGMENTS, MIN_SEGMENTS
from domain.terrain.services import DEFAULT_PATH_SAMPLES

ENV_PREFIX = "TOWER_PLANNER_"


class PlannerSettings(BaseModel):
    ellipse_segments: int = Field(default=DEFAULT_SEGMENTS, ge=MIN_SEGMENTS)
    default_frequency_ghz: float = Field(default=DEFAULT_FREQUENCY_GHZ, gt=0)
    elevation_enabled: bool = True
    elevation_base_url: str = "https://api.open-elevation.com"
    elevation_timeout_seconds: float = Field(default=10.0, gt=0)
    elevation_samples: int = Field(default=DEFAULT_PATH_SAMPLES, ge=2)
    log_level: str = "INFO"

    model_config = ConfigDict(frozen=True)


def _env_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect ``TOWER_PLANNER_<FIELD>`` variables matching known settings fields."""
    overrides: dict[str, str] = {}
    for field_name in PlannerSettings.model_fields:
        value = environ.get(ENV_PREFIX + field_name.upper())
        if value is not None and value.strip() != "":
            overrides[field_name] = value.strip()
    return overrides


def load_settings(environ: Mapping[str, str] | None = None) -> PlannerSettings:
    """Build settings from defaults plus environment overrides.

    Raises:
        pydantic.ValidationError: An override cannot be parsed or violates a bound
    """
    env = os.environ if environ is None else environ
    return PlannerSettings.model_validate(_env_overrides(env))


@lru_cache(maxsize=1)
def get_settings() -> PlannerSettings:
    """Cached process-wide settings. Call ``get_settings.cache_clear()`` in tests."""
    return load_settings()
