"""Terrain Bounded Context - Error Hierarchy.

Custom exceptions for elevation operations. None of these ever reach the
geometry core; the background enricher logs and discards them.
"""

from __future__ import annotations


class TerrainError(Exception):
    """Base error for terrain operations."""


class ElevationLookupError(TerrainError):
    """Elevation service unreachable, returned an error, or sent a malformed body."""


class InvalidProfileError(TerrainError):
    """Profile parameters are invalid."""

    pass
