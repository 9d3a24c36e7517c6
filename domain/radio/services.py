"""Radio Bounded Context - Domain Services.

Pure Fresnel-zone geometry. NO I/O - elevation lookups live in the terrain
context and infrastructure, and never feed into anything computed here.

Known simplifications, kept deliberately:
- c is taken as 3e8 m/s rather than 299,792,458 m/s.
- The ellipse uses the midpoint (maximum) radius as a uniform semi-minor
  axis. The true zone tapers to zero at both antennas, so the polygon
  overstates the width near the endpoints.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from domain.geodesy.errors import InvalidInputError
from domain.geodesy.services import haversine_distance, project, unproject
from domain.geodesy.value_objects import GeoPoint, PlanarPoint
from domain.radio.value_objects import GHZ, FresnelResult, RadioLink

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
SPEED_OF_LIGHT_M_S = 3.0e8
DEFAULT_SEGMENTS = 120
MIN_SEGMENTS = 3


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------
def _require_positive_frequency(value: float, unit: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"Frequency must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"Frequency must be finite and > 0 {unit}, got {value}")
    return float(value)


def _require_segments(segments: int) -> int:
    if isinstance(segments, bool) or not isinstance(segments, int):
        raise InvalidInputError(f"segments must be an int, got {segments!r}")
    if segments < MIN_SEGMENTS:
        raise InvalidInputError(f"segments must be >= {MIN_SEGMENTS}, got {segments}")
    return segments


# ---------------------------------------------------------------------------
# Fresnel radius
# ---------------------------------------------------------------------------
def wavelength_m(frequency_hz: float) -> float:
    """Wavelength in meters for a frequency in Hz (lambda = c / f)."""
    frequency_hz = _require_positive_frequency(frequency_hz, "Hz")
    return SPEED_OF_LIGHT_M_S / frequency_hz


def first_fresnel_radius(d1: float, d2: float, frequency_hz: float) -> float:
    """First Fresnel-zone radius at a point splitting the path into d1 and d2.

    ``r = sqrt(lambda * d1 * d2 / (d1 + d2))``

    Args:
        d1: Distance from antenna A to the point, meters (>= 0)
        d2: Distance from the point to antenna B, meters (>= 0)
        frequency_hz: Carrier frequency in Hz (> 0)

    Returns:
        Radius in meters

    Raises:
        InvalidInputError: Non-positive frequency, negative or non-finite leg,
            or d1 + d2 == 0
    """
    lam = wavelength_m(frequency_hz)
    if not (math.isfinite(d1) and math.isfinite(d2)):
        raise InvalidInputError(f"Leg distances must be finite, got ({d1}, {d2})")
    if d1 < 0 or d2 < 0:
        raise InvalidInputError(f"Leg distances must be >= 0, got ({d1}, {d2})")
    total = d1 + d2
    if total <= 0:
        raise InvalidInputError("Total path length d1 + d2 must be > 0")
    return math.sqrt(lam * d1 * d2 / total)


def midpoint_fresnel_radius(distance_m: float, frequency_hz: float) -> float:
    """Maximum first Fresnel radius of a link, reached at its midpoint.

    A zero-length link returns 0.0, the limit of sqrt(lambda * d / 4) as d -> 0.
    """
    if distance_m == 0:
        wavelength_m(frequency_hz)  # still reject a bad frequency
        return 0.0
    half = distance_m / 2
    return first_fresnel_radius(half, half, frequency_hz)


# ---------------------------------------------------------------------------
# Ellipse construction
# ---------------------------------------------------------------------------
def fresnel_ellipse(
    point_a: GeoPoint,
    point_b: GeoPoint,
    semi_minor_m: float,
    segments: int = DEFAULT_SEGMENTS,
) -> tuple[GeoPoint, ...]:
    """Build an ellipse polygon around the link axis in geographic coordinates.

    The ellipse is laid out in Web Mercator space: centered on the planar
    midpoint of A and B, semi-major axis |B - A| / 2 along the link, semi-minor
    axis ``semi_minor_m`` across it. Vertex i sits at parametric angle
    ``2 * pi * i / segments``, so the ring runs counter-clockwise in planar
    space and starts at the B end of the major axis.

    If A and B coincide the ellipse collapses to a circle of radius
    ``semi_minor_m``.

    Raises:
        InvalidInputError: segments < 3, or negative / non-finite semi_minor_m
        OutOfDomainError: An endpoint at |latitude| >= 90
    """
    segments = _require_segments(segments)
    if not math.isfinite(semi_minor_m) or semi_minor_m < 0:
        raise InvalidInputError(
            f"semi_minor_m must be finite and >= 0, got {semi_minor_m}"
        )

    a = np.array(project(point_a).as_pair())
    b = np.array(project(point_b).as_pair())

    midpoint = (a + b) / 2
    dx, dy = b - a
    axis_angle = math.atan2(dy, dx)
    semi_major = math.hypot(dx, dy) / 2
    if semi_major == 0:
        semi_major = semi_minor_m

    theta = 2 * np.pi * np.arange(segments) / segments
    local = np.column_stack((semi_major * np.cos(theta), semi_minor_m * np.sin(theta)))

    cos_t, sin_t = math.cos(axis_angle), math.sin(axis_angle)
    rotation = np.array([[cos_t, -sin_t], [sin_t, cos_t]])
    world = local @ rotation.T + midpoint

    return tuple(unproject(PlanarPoint(x=float(x), y=float(y))) for x, y in world)


def compute_fresnel_zone(
    point_a: GeoPoint,
    point_b: GeoPoint,
    frequency_ghz: float,
    segments: int = DEFAULT_SEGMENTS,
) -> FresnelResult:
    """Compute the first Fresnel zone of a link as a renderable polygon.

    Args:
        point_a: First antenna location
        point_b: Second antenna location
        frequency_ghz: Carrier frequency in GHz (> 0)
        segments: Number of polygon vertices

    Returns:
        FresnelResult with the midpoint radius, haversine link length and
        the ellipse polygon

    Raises:
        InvalidInputError: Non-positive frequency or too few segments
        OutOfDomainError: An endpoint at |latitude| >= 90

    Example:
        >>> a = GeoPoint(latitude=28.6139, longitude=77.2090)
        >>> b = GeoPoint(latitude=28.7041, longitude=77.1025)
        >>> zone = compute_fresnel_zone(a, b, frequency_ghz=5.0, segments=64)
        >>> print(f"{zone.radius_m:.2f} m over {zone.distance_m:.0f} m")
    """
    frequency_ghz = _require_positive_frequency(frequency_ghz, "GHz")
    segments = _require_segments(segments)

    distance = haversine_distance(point_a, point_b)
    radius = midpoint_fresnel_radius(distance, frequency_ghz * GHZ)
    polygon = fresnel_ellipse(point_a, point_b, radius, segments)

    logger.debug(
        "Fresnel zone: %.1f m link at %.3f GHz -> radius %.2f m (%d vertices)",
        distance,
        frequency_ghz,
        radius,
        segments,
    )
    return FresnelResult(
        radius_m=radius,
        distance_m=distance,
        frequency_ghz=frequency_ghz,
        polygon=polygon,
    )


def fresnel_zone_for_link(
    link: RadioLink, segments: int = DEFAULT_SEGMENTS
) -> FresnelResult:
    """compute_fresnel_zone for a RadioLink value object."""
    return compute_fresnel_zone(
        link.point_a, link.point_b, link.frequency_ghz, segments=segments
    )
