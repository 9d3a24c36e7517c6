"""Network Bounded Context - In-memory Tower Registry.

Owns tower and link identity so the geometry functions can stay stateless.
Ids are incrementing integers starting at 1 and are never reused, even after
removal.

Business rules enforced here (not in the geometry core):
- only towers sharing the identical frequency may be linked
- a pair of towers is linked at most once, regardless of direction
- removing a tower removes every link touching it
"""

from __future__ import annotations

import logging
import threading

from domain.geodesy.services import haversine_distance
from domain.geodesy.value_objects import GeoPoint
from domain.network.entities import DEFAULT_FREQUENCY_GHZ, Tower, TowerLink, TowerStats
from domain.network.errors import (
    DuplicateLinkError,
    FrequencyMismatchError,
    SelfLinkError,
    UnknownLinkError,
    UnknownTowerError,
)
from domain.radio.services import DEFAULT_SEGMENTS, compute_fresnel_zone
from domain.radio.value_objects import FresnelResult

logger = logging.getLogger(__name__)


class TowerRegistry:
    """Thread-safe in-memory store of towers and the links between them.

    Parameters
    ----------
    default_frequency_ghz: float
        Frequency assigned to towers added without an explicit one.
    """

    def __init__(self, default_frequency_ghz: float = DEFAULT_FREQUENCY_GHZ) -> None:
        self.default_frequency_ghz = default_frequency_ghz
        self._towers: dict[int, Tower] = {}
        self._links: dict[int, TowerLink] = {}
        self._next_tower_id = 1
        self._next_link_id = 1
        self._lock = threading.Lock()

    # -----------------------------------------------------------------------
    # Towers
    # -----------------------------------------------------------------------
    def add_tower(
        self,
        location: GeoPoint,
        frequency_ghz: float | None = None,
        name: str | None = None,
    ) -> Tower:
        """Register a tower at ``location``; defaults to "Tower {id}"."""
        with self._lock:
            tower_id = self._next_tower_id
            tower = Tower(
                id=tower_id,
                name=name if name else f"Tower {tower_id}",
                location=location,
                frequency_ghz=(
                    self.default_frequency_ghz if frequency_ghz is None else frequency_ghz
                ),
            )
            self._next_tower_id += 1
            self._towers[tower_id] = tower
        logger.info(
            "Added %s (#%d) at (%.6f, %.6f), %s GHz",
            tower.name,
            tower.id,
            location.latitude,
            location.longitude,
            tower.frequency_ghz,
        )
        return tower

    def get_tower(self, tower_id: int) -> Tower:
        with self._lock:
            return self._get_tower(tower_id)

    def towers(self) -> tuple[Tower, ...]:
        """All towers in insertion order."""
        with self._lock:
            return tuple(self._towers.values())

    def update_tower(
        self,
        tower_id: int,
        *,
        name: str | None = None,
        frequency_ghz: float | None = None,
    ) -> Tower:
        """Rename and/or retune a tower. Existing links are kept as they are.

        Raises:
            UnknownTowerError: The tower is not registered
            pydantic.ValidationError: Blank name or non-positive frequency
        """
        with self._lock:
            tower = self._get_tower(tower_id)
            changes: dict[str, object] = {}
            if name is not None:
                changes["name"] = name
            if frequency_ghz is not None:
                changes["frequency_ghz"] = frequency_ghz
            # model_copy skips validation; rebuild to keep the Field constraints
            updated = Tower.model_validate({**tower.model_dump(), **changes})
            self._towers[tower_id] = updated
        logger.debug("Updated tower #%d: %s", tower_id, sorted(changes))
        return updated

    def remove_tower(self, tower_id: int) -> tuple[TowerLink, ...]:
        """Remove a tower and its links; returns the links that were dropped."""
        with self._lock:
            self._get_tower(tower_id)
            del self._towers[tower_id]
            dropped = tuple(link for link in self._links.values() if link.connects(tower_id))
            for link in dropped:
                del self._links[link.id]
        logger.info("Removed tower #%d and %d link(s)", tower_id, len(dropped))
        return dropped

    # -----------------------------------------------------------------------
    # Links
    # -----------------------------------------------------------------------
    def link_towers(self, tower_a_id: int, tower_b_id: int) -> TowerLink:
        """Link two towers that share a frequency.

        Raises:
            SelfLinkError: Both ids name the same tower
            UnknownTowerError: Either tower is not registered
            FrequencyMismatchError: The towers are on different frequencies
            DuplicateLinkError: The towers are already linked
        """
        if tower_a_id == tower_b_id:
            raise SelfLinkError(f"Tower #{tower_a_id} cannot be linked to itself")

        with self._lock:
            tower_a = self._get_tower(tower_a_id)
            tower_b = self._get_tower(tower_b_id)
            if tower_a.frequency_ghz != tower_b.frequency_ghz:
                raise FrequencyMismatchError(tower_a.frequency_ghz, tower_b.frequency_ghz)
            if any(link.joins(tower_a_id, tower_b_id) for link in self._links.values()):
                raise DuplicateLinkError(
                    f"Towers #{tower_a_id} and #{tower_b_id} are already linked"
                )

            link = TowerLink(
                id=self._next_link_id, tower_a_id=tower_a_id, tower_b_id=tower_b_id
            )
            self._next_link_id += 1
            self._links[link.id] = link

        logger.info("Linked tower #%d <-> #%d (link #%d)", tower_a_id, tower_b_id, link.id)
        return link

    def get_link(self, link_id: int) -> TowerLink:
        with self._lock:
            return self._get_link(link_id)

    def links(self) -> tuple[TowerLink, ...]:
        with self._lock:
            return tuple(self._links.values())

    def links_for(self, tower_id: int) -> tuple[TowerLink, ...]:
        with self._lock:
            self._get_tower(tower_id)
            return tuple(link for link in self._links.values() if link.connects(tower_id))

    def remove_link(self, link_id: int) -> TowerLink:
        with self._lock:
            link = self._get_link(link_id)
            del self._links[link_id]
        logger.info("Removed link #%d", link_id)
        return link

    # -----------------------------------------------------------------------
    # Derived views
    # -----------------------------------------------------------------------
    def tower_stats(self, tower_id: int) -> TowerStats:
        """Link count and the set of frequencies of linked neighbours."""
        with self._lock:
            self._get_tower(tower_id)
            links = [link for link in self._links.values() if link.connects(tower_id)]
            frequencies = frozenset(
                self._towers[link.other_end(tower_id)].frequency_ghz for link in links
            )
        return TowerStats(link_count=len(links), connected_frequencies=frequencies)

    def link_distance_m(self, link_id: int) -> float:
        """Haversine length of a link in meters."""
        tower_a, tower_b = self._endpoints(link_id)
        return haversine_distance(tower_a.location, tower_b.location)

    def fresnel_zone(
        self, link_id: int, segments: int = DEFAULT_SEGMENTS
    ) -> FresnelResult:
        """First Fresnel zone of a link, at tower A's frequency."""
        tower_a, tower_b = self._endpoints(link_id)
        return compute_fresnel_zone(
            tower_a.location, tower_b.location, tower_a.frequency_ghz, segments=segments
        )

    # -----------------------------------------------------------------------
    # Internals (caller holds the lock)
    # -----------------------------------------------------------------------
    def _get_tower(self, tower_id: int) -> Tower:
        try:
            return self._towers[tower_id]
        except KeyError:
            raise UnknownTowerError(tower_id) from None

    def _get_link(self, link_id: int) -> TowerLink:
        try:
            return self._links[link_id]
        except KeyError:
            raise UnknownLinkError(link_id) from None

    def _endpoints(self, link_id: int) -> tuple[Tower, Tower]:
        with self._lock:
            link = self._get_link(link_id)
            return self._towers[link.tower_a_id], self._towers[link.tower_b_id]
