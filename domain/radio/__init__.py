"""Radio Bounded Context.

Responsible for RF link physics and its geometric footprint:
- Value Objects: RadioLink, FresnelResult
- Services: first_fresnel_radius, fresnel_ellipse, compute_fresnel_zone
"""
