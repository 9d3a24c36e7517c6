"""Geodesy Bounded Context - Value Objects.

Immutable coordinate types. All validation occurs at construction time via
Pydantic; the coercion helpers translate loose caller input (plain pairs)
into value objects and report problems with the geometry error types.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from domain.geodesy.errors import InvalidInputError, OutOfDomainError


# ---------------------------------------------------------------------------
# GeoPoint
# ---------------------------------------------------------------------------
class GeoPoint(BaseModel):
    """Geographic coordinate in WGS84 (Value Object).

    Represents a single point on the Earth's surface using latitude and longitude
    in degrees.

    Invariants:
        latitude in [-90, 90]
        longitude in [-180, 180]
        both finite (NaN/Inf fail the range constraints)

    Note on __eq__ and __hash__: Pydantic frozen models compare by value automatically.
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)

    def as_pair(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)``."""
        return (self.latitude, self.longitude)


# ---------------------------------------------------------------------------
# PlanarPoint
# ---------------------------------------------------------------------------
class PlanarPoint(BaseModel):
    """Point in Web Mercator planar space, in meters (Value Object).

    Only meaningful relative to the projection that produced it. The projection
    is stateless, so any two PlanarPoints from this package are comparable.
    """

    x: float
    y: float

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    def as_pair(self) -> tuple[float, float]:
        return (self.x, self.y)


GeoPointLike = Union[GeoPoint, Sequence[float]]
PlanarPointLike = Union[PlanarPoint, Sequence[float]]


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------
def _unpack_pair(value: Sequence[float], kind: str) -> tuple[float, float]:
    try:
        first, second = value
        return float(first), float(second)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Expected a {kind} pair, got {value!r}") from e


def to_geo_point(value: GeoPointLike) -> GeoPoint:
    """Coerce a GeoPoint or a ``(lat, lon)`` pair into a GeoPoint.

    Raises:
        InvalidInputError: Non-finite values, malformed pair, longitude outside
            [-180, 180]
        OutOfDomainError: |latitude| > 90
    """
    if isinstance(value, GeoPoint):
        return value

    latitude, longitude = _unpack_pair(value, "(latitude, longitude)")
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidInputError(
            f"Coordinates must be finite, got ({latitude}, {longitude})"
        )
    if abs(latitude) > 90:
        raise OutOfDomainError(
            f"Latitude {latitude} outside [-90, 90]", latitude=latitude
        )
    if abs(longitude) > 180:
        raise InvalidInputError(f"Longitude {longitude} outside [-180, 180]")
    return GeoPoint(latitude=latitude, longitude=longitude)


def to_planar_point(value: PlanarPointLike) -> PlanarPoint:
    """Coerce a PlanarPoint or an ``(x, y)`` pair into a PlanarPoint.

    Raises:
        InvalidInputError: Non-finite values or malformed pair
    """
    if isinstance(value, PlanarPoint):
        return value

    x, y = _unpack_pair(value, "(x, y)")
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidInputError(f"Planar coordinates must be finite, got ({x}, {y})")
    return PlanarPoint(x=x, y=y)
