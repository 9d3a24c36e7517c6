"""Network Bounded Context - Error Hierarchy.

Custom exceptions for tower registry operations.
"""

from __future__ import annotations


class NetworkError(Exception):
    """Base error for tower/link operations."""


class UnknownTowerError(NetworkError, KeyError):
    """No tower is registered under the given id."""

    def __init__(self, tower_id: int) -> None:
        self.tower_id = tower_id
        super().__init__(f"Unknown tower #{tower_id}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownLinkError(NetworkError, KeyError):
    """No link is registered under the given id."""

    def __init__(self, link_id: int) -> None:
        self.link_id = link_id
        super().__init__(f"Unknown link #{link_id}")

    def __str__(self) -> str:
        return self.args[0]


class SelfLinkError(NetworkError):
    """A tower cannot be linked to itself."""


class FrequencyMismatchError(NetworkError):
    """Towers on different frequencies cannot be linked.

    Attributes:
        frequency_a_ghz: Frequency of the first tower
        frequency_b_ghz: Frequency of the second tower
    """

    def __init__(self, frequency_a_ghz: float, frequency_b_ghz: float) -> None:
        self.frequency_a_ghz = frequency_a_ghz
        self.frequency_b_ghz = frequency_b_ghz
        super().__init__(
            f"Cannot connect towers with different frequencies "
            f"({frequency_a_ghz} GHz vs {frequency_b_ghz} GHz)"
        )


class DuplicateLinkError(NetworkError):
    """The two towers are already linked (in either direction)."""

    pass
