"""Geodesy Bounded Context.

Responsible for coordinates and the math that moves between them:
- Value Objects: GeoPoint, PlanarPoint
- Services: haversine_distance, geodesic_distance, project, unproject
"""
