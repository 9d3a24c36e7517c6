"""Infrastructure adapters for the terrain bounded context.

This module provides the infrastructure layer implementations for elevation
enrichment: the Open-Elevation HTTP adapter and the background enricher.
"""

from .background import ElevationEnricher
from .open_elevation_adapter import OpenElevationAdapter

__all__ = ["ElevationEnricher", "OpenElevationAdapter"]
