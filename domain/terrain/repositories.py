"""Domain Port(s) for Elevation I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from domain.geodesy.value_objects import GeoPoint


class ElevationRepository(Protocol):
    """Port for looking up ground elevation at a batch of points.

    Implementations live in infrastructure (e.g., Open-Elevation adapter).
    """

    def lookup(self, points: Sequence[GeoPoint]) -> tuple[float | None, ...]:
        """Return one elevation in meters per point, None where unknown."""
        ...
