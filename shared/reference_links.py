"""Reference links with hand-checked expected values.

Used by:
- scripts/fresnel_report.py (--reference demo)
- tests/radio/test_fresnel_zone.py (scenario checks)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

Expected values were derived independently from the haversine and Fresnel
formulas (R = 6,371,000 m, c = 3e8 m/s). Coordinates are (latitude, longitude).
"""

from __future__ import annotations

from typing import NamedTuple


class ReferenceLink(NamedTuple):
    name: str
    point_a: tuple[float, float]
    point_b: tuple[float, float]
    frequency_ghz: float
    distance_m: float
    midpoint_radius_m: float


# New Delhi (Connaught Place) to the north-west suburbs, ~14.4 km
DELHI_5GHZ = ReferenceLink(
    name="delhi-5ghz",
    point_a=(28.6139, 77.2090),
    point_b=(28.7041, 77.1025),
    frequency_ghz=5.0,
    distance_m=14442.26,
    midpoint_radius_m=14.7185,
)

# Same path at 10 GHz: radius shrinks by sqrt(2)
DELHI_10GHZ = DELHI_5GHZ._replace(
    name="delhi-10ghz", frequency_ghz=10.0, midpoint_radius_m=10.4075
)

REFERENCE_LINKS: tuple[ReferenceLink, ...] = (DELHI_5GHZ, DELHI_10GHZ)
