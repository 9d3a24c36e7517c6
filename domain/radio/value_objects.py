"""Radio Bounded Context - Value Objects.

Immutable descriptions of a radio link and of the Fresnel zone computed for it.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.geodesy.value_objects import GeoPoint

GHZ = 1e9


class RadioLink(BaseModel):
    """Point-to-point link between two antennas (Value Object).

    Not persisted anywhere; tower identity lives in the network context.
    """

    point_a: GeoPoint
    point_b: GeoPoint
    frequency_ghz: float = Field(gt=0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    @property
    def frequency_hz(self) -> float:
        return self.frequency_ghz * GHZ


class FresnelResult(BaseModel):
    """First Fresnel zone of a link, ready for overlay rendering (Value Object).

    The polygon is an open ring: the first vertex is not repeated at the end,
    consumers close it implicitly (last -> first).

    Invariants:
        radius_m and distance_m finite and >= 0
        polygon has at least 3 vertices
    """

    radius_m: float = Field(ge=0, allow_inf_nan=False)
    distance_m: float = Field(ge=0, allow_inf_nan=False)
    frequency_ghz: float = Field(gt=0, allow_inf_nan=False)
    polygon: tuple[GeoPoint, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_polygon(self) -> "FresnelResult":
        if len(self.polygon) < 3:
            raise ValueError(
                f"Polygon must have >= 3 vertices, got {len(self.polygon)}"
            )
        return self

    @property
    def segments(self) -> int:
        return len(self.polygon)

    def as_lat_lon_pairs(self) -> list[tuple[float, float]]:
        """Return vertices as ``(lat, lon)`` pairs, the order map widgets expect."""
        return [p.as_pair() for p in self.polygon]

    def to_geojson(self) -> dict[str, Any]:
        """Return a GeoJSON Feature with a closed Polygon ring in ``[lon, lat]`` order."""
        ring = [[p.longitude, p.latitude] for p in self.polygon]
        ring.append(ring[0])
        return {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [ring]},
            "properties": {
                "radius_m": self.radius_m,
                "distance_m": self.distance_m,
                "frequency_ghz": self.frequency_ghz,
            },
        }

