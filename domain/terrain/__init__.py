"""Terrain Bounded Context.

Responsible for optional elevation enrichment of a link path:
- Value Objects: ElevationSample, ElevationProfile
- Ports: ElevationRepository
- Services: sample_link_path, build_elevation_profile
"""
