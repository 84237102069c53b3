#!/usr/bin/env python3
"""
OptiMap Export — Command line
================================
Export a computed route to navigation device files.

The input is a JSON file holding the directions legs plus the stop
addresses and optional labels:

    {"legs": [...], "addresses": ["A", "B", "C"], "labels": [null, "Home", null]}

Usage:
    optimap-export route.json out.itn               # TomTom ITN
    optimap-export route.json out.gpx out.wp.gpx    # Garmin route + waypoints
    optimap-export --info route.json                # Show totals only
    optimap-export --info --miles route.json        # Totals in miles
    optimap-export --formats                        # List all formats
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from .formats import FORMAT_REGISTRY, SOFT_FULL_NAME, build_document, get_format
from .models import Route
from .summary import summarize
from .textutil import rtrim

logger = logging.getLogger(__name__)


def load_route(filepath: str):
    """Read a route JSON file. Returns (route, addresses, labels)."""
    with open(filepath, "r", encoding="utf-8-sig") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Route file must hold a JSON object")
    route = Route.from_directions(data)
    addresses = data.get("addresses") or []
    labels = data.get("labels")
    logger.debug("Loaded %d legs and %d addresses from %s", len(route), len(addresses), filepath)
    return route, addresses, labels


def show_info(route: Route, addresses, imperial: bool = False, filepath: str = ""):
    """Display stop count and totals of a route."""
    if filepath:
        print(f"\n📁 File: {filepath}")
    summary = summarize(route, imperial=imperial)
    print(f"   Legs: {len(route)}")
    print(f"   Stops: {route.stop_count}")
    print(f"   Duration: {rtrim(summary.duration)}")
    print(f"   Distance: {rtrim(summary.distance)}")
    if addresses:
        print(f"   Start: {addresses[0]}")
        if len(addresses) > 1:
            print(f"   End:   {addresses[-1]}")


def list_formats():
    """Display all export formats."""
    print(f"\n{SOFT_FULL_NAME}")
    print("=" * 45)
    print(f"{'Extension':<12} {'Format Name':<30}")
    print("-" * 45)
    for fmt in sorted(FORMAT_REGISTRY, key=lambda f: f.extension):
        print(f"  .{fmt.extension:<10} {fmt.name:<30}")
    print("-" * 45)
    print(f"  Total: {len(FORMAT_REGISTRY)} formats\n")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="optimap-export",
        description=f"{SOFT_FULL_NAME} — Route Exporter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s route.json out.itn            Export to TomTom ITN
  %(prog)s route.json out.gpx            Export a Garmin GPX route
  %(prog)s route.json out.wp.gpx         Export Garmin GPX waypoints
  %(prog)s --info route.json             Show route totals
  %(prog)s --formats                     List all export formats
        """)

    parser.add_argument("input", nargs="?", help="Route JSON file")
    parser.add_argument("outputs", nargs="*", help="Output file(s)")
    parser.add_argument("--formats", action="store_true", help="List export formats")
    parser.add_argument("--info", action="store_true", help="Show route totals")
    parser.add_argument("--miles", action="store_true", help="Show distances in miles")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.formats:
        list_formats()
        return 0

    if not args.input:
        parser.print_help()
        return 1

    try:
        route, addresses, labels = load_route(args.input)
    except (OSError, ValueError) as e:
        print(f"❌ Error reading {args.input}: {e}", file=sys.stderr)
        return 1

    if args.verbose or args.info:
        show_info(route, addresses, imperial=args.miles, filepath=args.input)

    if not args.outputs:
        if not args.info:
            print(f"✅ Read {len(route)} legs from {args.input}")
            print("   (specify output file(s) to export, or use --info for details)")
        return 0

    if not route:
        print(f"❌ No route legs in {args.input}, nothing to export", file=sys.stderr)
        return 1

    for output_path in args.outputs:
        try:
            document = build_document(Path(output_path).name, route, addresses, labels)
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(document)
        except (OSError, ValueError) as e:
            print(f"❌ Error writing {output_path}: {e}", file=sys.stderr)
            return 1
        fmt = get_format(Path(output_path).name)
        print(f"✅ Exported → {output_path} ({fmt.name}, {route.stop_count} stops)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
