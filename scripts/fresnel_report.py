#!/usr/bin/env python3
"""Print the first Fresnel zone of a link.

Usage:
    python scripts/fresnel_report.py --a 28.6139,77.2090 --b 28.7041,77.1025 --frequency-ghz 5
    python scripts/fresnel_report.py --reference delhi-5ghz --geojson

    Southern or western coordinates need the = form: --a=-33.86,151.21

Output:
    A short summary (distance, wavelength, midpoint radius), or the zone as a
    GeoJSON Feature with --geojson.

Exit codes:
    0 on success, 2 on invalid input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from domain.geodesy.errors import GeometryError
from domain.radio.services import wavelength_m
from shared.reference_links import REFERENCE_LINKS
from src.api import compute_fresnel_zone
from src.logging_config import configure_logging

logger = logging.getLogger(__name__)

REFERENCES = {link.name: link for link in REFERENCE_LINKS}


def parse_point(text: str) -> tuple[float, float]:
    """Parse ``"LAT,LON"`` into a pair of floats."""
    try:
        lat_text, lon_text = text.split(",")
        return float(lat_text), float(lon_text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected LAT,LON, got {text!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--a", type=parse_point, help="first tower as LAT,LON")
    parser.add_argument("--b", type=parse_point, help="second tower as LAT,LON")
    parser.add_argument("--frequency-ghz", type=float, help="carrier frequency in GHz")
    parser.add_argument("--segments", type=int, default=None, help="polygon vertices")
    parser.add_argument(
        "--reference", choices=sorted(REFERENCES), help="use a built-in reference link"
    )
    parser.add_argument("--geojson", action="store_true", help="print GeoJSON")
    parser.add_argument("--log-level", default=None, help="override settings.log_level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the report.

    Returns:
        0 on success, 2 on invalid input
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.reference:
        ref = REFERENCES[args.reference]
        point_a, point_b, frequency_ghz = ref.point_a, ref.point_b, ref.frequency_ghz
    elif args.a is None or args.b is None or args.frequency_ghz is None:
        parser.print_usage(sys.stderr)
        print("ERROR: --a, --b and --frequency-ghz are required", file=sys.stderr)
        return 2
    else:
        point_a, point_b, frequency_ghz = args.a, args.b, args.frequency_ghz

    try:
        zone = compute_fresnel_zone(point_a, point_b, frequency_ghz, args.segments)
    except (GeometryError, ValidationError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.geojson:
        print(json.dumps(zone.to_geojson(), indent=2))
        return 0

    print(f"Link:        {point_a} -> {point_b}")
    print(f"Frequency:   {zone.frequency_ghz} GHz")
    print(f"Wavelength:  {wavelength_m(zone.frequency_ghz * 1e9):.4f} m")
    print(f"Distance:    {zone.distance_m / 1000:.2f} km")
    print(f"Radius:      {zone.radius_m:.2f} m (first Fresnel zone, midpoint)")
    print(f"Polygon:     {zone.segments} vertices")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
