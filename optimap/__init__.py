"""
OptiMap Export — Route Planner Export Engine
==========================================
Turn a computed multi-stop route into navigation device files and
display totals. Standard library only.

Quick start:
    optimap-export route.json route.itn route.gpx route.wp.gpx

Library:
    from optimap import Route, build_itn
    itn = build_itn(route, addresses, labels)
"""

from .models import GeoPoint, Leg, Route, ResolvedStop
from .formats import (
    extract_stops, to_fixed_point_degrees,
    build_itn, build_gpx_route, build_gpx_waypoints,
    build_tomtom_descriptor, build_document,
    get_format, supported_formats, FORMAT_REGISTRY,
)
from .summary import (
    format_duration, format_distance_metric, format_distance_imperial,
    total_duration, total_distance, summarize, RouteSummary,
)
from .reorder import to_permutation
from .params import Location, parse_locations, parse_center
from .textutil import trim, ltrim, rtrim, zero_padded

__version__ = "1.0.0"
__all__ = [
    "GeoPoint", "Leg", "Route", "ResolvedStop",
    "extract_stops", "to_fixed_point_degrees",
    "build_itn", "build_gpx_route", "build_gpx_waypoints",
    "build_tomtom_descriptor", "build_document",
    "get_format", "supported_formats", "FORMAT_REGISTRY",
    "format_duration", "format_distance_metric", "format_distance_imperial",
    "total_duration", "total_distance", "summarize", "RouteSummary",
    "to_permutation", "Location", "parse_locations", "parse_center",
    "trim", "ltrim", "rtrim", "zero_padded",
]
