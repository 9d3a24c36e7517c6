"""Tower Link Planner Domain Layer.

This package contains the core business logic organized by bounded contexts:
- geodesy: Coordinates, great-circle distance, Web Mercator projection
- radio: Fresnel-zone radius and ellipse geometry
- network: Tower/link identity and frequency-gated linking
- terrain: Optional elevation enrichment of link paths
"""

# Imports alphabetized per project style (isort)
from domain import geodesy, network, radio, terrain

__all__ = ["geodesy", "network", "radio", "terrain"]
