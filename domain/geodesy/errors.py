"""Geodesy Bounded Context - Error Hierarchy.

Custom exceptions for coordinate and geometry operations. The radio context
reuses these, since every Fresnel computation is geometry underneath.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base error for geometry operations."""


class InvalidInputError(GeometryError):
    """Non-finite coordinates, non-positive frequency, negative leg distances."""


class OutOfDomainError(GeometryError):
    """Coordinate lies outside the domain of the projection.

    Attributes:
        latitude: The offending latitude in degrees (None if the problem is
            a longitude overflow on unprojection)
    """

    def __init__(self, message: str, latitude: float | None = None) -> None:
        self.latitude = latitude
        super().__init__(message)
