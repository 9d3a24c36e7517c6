"""Network Bounded Context - Entities and Value Objects.

Towers and links are identified by registry-assigned integer ids. They are
frozen Pydantic models; edits produce a new, re-validated instance.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.geodesy.value_objects import GeoPoint

DEFAULT_FREQUENCY_GHZ = 5.0


class Tower(BaseModel):
    """Radio tower placed on the map (Entity).

    Equality is by value; the registry guarantees id uniqueness.
    """

    id: int = Field(ge=1)
    name: str = Field(min_length=1, pattern=r"\S")  # not blank
    location: GeoPoint
    frequency_ghz: float = Field(default=DEFAULT_FREQUENCY_GHZ, gt=0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)


class TowerLink(BaseModel):
    """Undirected link between two towers (Entity)."""

    id: int = Field(ge=1)
    tower_a_id: int = Field(ge=1)
    tower_b_id: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_endpoints(self) -> "TowerLink":
        if self.tower_a_id == self.tower_b_id:
            raise ValueError(f"Link cannot join tower #{self.tower_a_id} to itself")
        return self

    def connects(self, tower_id: int) -> bool:
        return tower_id in (self.tower_a_id, self.tower_b_id)

    def joins(self, first_id: int, second_id: int) -> bool:
        """True if this link joins the two towers, in either order."""
        return {self.tower_a_id, self.tower_b_id} == {first_id, second_id}

    def other_end(self, tower_id: int) -> int:
        """Return the id at the opposite end from ``tower_id``."""
        if tower_id == self.tower_a_id:
            return self.tower_b_id
        if tower_id == self.tower_b_id:
            return self.tower_a_id
        raise ValueError(f"Tower #{tower_id} is not an endpoint of link #{self.id}")


class TowerStats(BaseModel):
    """Per-tower summary shown next to each marker (Value Object)."""

    link_count: int = Field(ge=0)
    connected_frequencies: frozenset[float] = frozenset()

    model_config = ConfigDict(frozen=True)
