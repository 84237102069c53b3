"""
OptiMap Export — Navigation Device Formats

Builds ready-to-write documents from a computed route:
  ITN     TomTom itinerary (plain text)
  GPX     Garmin route (<rte>/<rtept>)
  WP.GPX  Garmin standalone waypoints (<wpt>)

Every builder returns None for a route without legs; callers skip the
download in that case.
"""

from __future__ import annotations
import logging
import math
import xml.etree.ElementTree as ET
from xml.dom import minidom
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence

from .models import GeoPoint, ResolvedStop, Route, label_at
from .textutil import zero_padded

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────

SOFT_NAME = "OptiMap"
SOFT_VERSION = "1.0"
SOFT_FULL_NAME = f"{SOFT_NAME} v{SOFT_VERSION}"

Labels = Optional[Sequence[Optional[str]]]


def _xml_prettify(root: ET.Element) -> str:
    rough = ET.tostring(root, encoding="unicode")
    body = minidom.parseString(rough).documentElement.toprettyxml(indent="  ")
    return '<?xml version="1.0"?>\n' + body


def _format_coordinate(value: float) -> str:
    """Shortest decimal form of a float, without exponent or trailing ``.0``."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


# ─────────────────────────────────────────────────────────────
# Stops
# ─────────────────────────────────────────────────────────────

def extract_stops(route: Route, addresses: Sequence[Optional[str]],
                  labels: Labels = None) -> List[ResolvedStop]:
    """
    Derive the ordered stops of a route: the start of the first leg, then
    the end of every leg. A present label always wins over the address.
    """
    if not route:
        return []

    points: List[GeoPoint] = [route.legs[0].start]
    points.extend(leg.end for leg in route)

    stops = []
    for i, point in enumerate(points):
        address = label_at(addresses, i)
        label = label_at(labels, i)
        if label is None:
            label = address if address is not None else ""
        stops.append(ResolvedStop(point, label, i, address or ""))
    return stops


# ─────────────────────────────────────────────────────────────
# ITN (TomTom Itinerary) - .itn
# ─────────────────────────────────────────────────────────────

ITN_FACTOR = 100000
TT_DEPARTURE = 4
TT_DESTINATION = 2
ITN_NEWLINE = "\n"


def to_fixed_point_degrees(decimal_degrees: float) -> int:
    """Encode decimal degrees as ITN integer degrees (1e-5 resolution)."""
    return int(math.floor(decimal_degrees * ITN_FACTOR + 0.5))


def build_itn(route: Route, addresses: Sequence[Optional[str]],
              labels: Labels = None) -> Optional[str]:
    """Build a TomTom .itn itinerary."""
    stops = extract_stops(route, addresses, labels)
    if not stops:
        logger.debug("ITN export skipped: route has no legs")
        return None

    lines = []
    for stop in stops:
        flag = TT_DEPARTURE if stop.is_start else TT_DESTINATION
        lng = to_fixed_point_degrees(stop.point.lng)
        lat = to_fixed_point_degrees(stop.point.lat)
        lines.append(f"{lng}|{lat}|{stop.label}|{flag}|{ITN_NEWLINE}")

    logger.debug("Built ITN with %d stops", len(stops))
    return "".join(lines)


# ─────────────────────────────────────────────────────────────
# GPX (GPS Exchange Format) - .gpx / .wp.gpx
# ─────────────────────────────────────────────────────────────

GPX_NS = "http://www.topografix.com/GPX/1/1"
GPX_CREATOR = SOFT_NAME
GPX_ROUTE_NAME = "OptiMap route"
WAYPOINT_PREFIX = "OptiMap "
WAYPOINT_START = "OptiMap Start"
GPX_START_SYMBOL = "Start"


def _gpx_root() -> ET.Element:
    root = ET.Element("gpx")
    root.set("version", "1.1")
    root.set("creator", GPX_CREATOR)
    root.set("xmlns:xsi", "http://www.w3.org/2001/XMLSchema-instance")
    root.set("xmlns", GPX_NS)
    root.set("xsi:schemaLocation", f"{GPX_NS} {GPX_NS}/gpx.xsd")
    return root


def _gpx_point(parent: ET.Element, tag: str, point: GeoPoint, name: str) -> ET.Element:
    elem = ET.SubElement(parent, tag)
    elem.set("lat", _format_coordinate(point.lat))
    elem.set("lon", _format_coordinate(point.lng))
    ET.SubElement(elem, "name").text = name
    return elem


def build_gpx_route(route: Route, addresses: Sequence[Optional[str]],
                    labels: Labels = None) -> Optional[str]:
    """Build a Garmin GPX document with a single route."""
    stops = extract_stops(route, addresses, labels)
    if not stops:
        logger.debug("GPX route export skipped: route has no legs")
        return None

    root = _gpx_root()
    rte = ET.SubElement(root, "rte")
    ET.SubElement(rte, "name").text = GPX_ROUTE_NAME
    for stop in stops:
        rtept = _gpx_point(rte, "rtept", stop.point, stop.label)
        if stop.is_start:
            ET.SubElement(rtept, "sym").text = GPX_START_SYMBOL

    logger.debug("Built GPX route with %d points", len(stops))
    return _xml_prettify(root)


def waypoint_name(stop: ResolvedStop) -> str:
    # Waypoint names always quote the address, even when a label exists
    if stop.is_start:
        return f"{WAYPOINT_START}({stop.address})"
    return f"{WAYPOINT_PREFIX}{zero_padded(stop.ordinal, 3)} ({stop.address})"


def build_gpx_waypoints(route: Route, addresses: Sequence[Optional[str]],
                        labels: Labels = None) -> Optional[str]:
    """Build a Garmin GPX document of standalone waypoints."""
    stops = extract_stops(route, addresses, labels)
    if not stops:
        logger.debug("GPX waypoint export skipped: route has no legs")
        return None

    root = _gpx_root()
    for stop in stops:
        _gpx_point(root, "wpt", stop.point, waypoint_name(stop))

    logger.debug("Built GPX waypoints with %d points", len(stops))
    return _xml_prettify(root)


# ─────────────────────────────────────────────────────────────
# TomTom itinerary descriptor (.itn.xml)
# ─────────────────────────────────────────────────────────────

TOMTOM_BASE_URL = "http://www.gebweb.net/optimap/"


def build_tomtom_descriptor(itn: str, fname: str, date_token: str, rnd_token: str,
                            sub_dir: str = "", base_url: str = TOMTOM_BASE_URL) -> str:
    """
    Metadata document published next to an ITN file so TomTom HOME can
    pick it up. ``fname`` is the ITN path relative to ``base_url``; the
    advertised download is its zipped copy.
    """
    idstr = f"{SOFT_NAME} {date_token}{rnd_token}"
    size = len(itn.encode("utf-8"))
    download_url = f"{base_url}{sub_dir}{fname}.zip"

    return (
        "<?xml version='1.0' encoding='utf-8' ?>\n"
        "<item>\n"
        f"<itinerary idstr='{idstr}' version='1'>\n"
        "<start>Home</start>\n"
        "<finish>Home</finish>\n"
        "<distance km='0' />\n"
        "<title mimetype='text/plain'>OptiMap route</title>\n"
        "<description mimetype='text/plain'>Route generated by OptiMap</description>\n"
        f"<size>{size}</size>\n"
        "<download>\n"
        f"<url location='{download_url}' content='main' />\n"
        "</download>\n"
        "<targetdevice models='all' />\n"
        "<price free='true' />\n"
        "<supplier>\n"
        "<name>gebweb.net</name>\n"
        "</supplier>\n"
        "</itinerary>\n"
        "</item>\n"
    )


# ─────────────────────────────────────────────────────────────
# Format Registry
# ─────────────────────────────────────────────────────────────

Builder = Callable[[Route, Sequence[Optional[str]], Labels], Optional[str]]


@dataclass
class FormatDesc:
    extension: str
    name: str
    builder: Builder


FORMAT_REGISTRY: List[FormatDesc] = [
    FormatDesc("itn",    "TomTom Itinerary",  build_itn),
    FormatDesc("gpx",    "Garmin GPX Route",  build_gpx_route),
    FormatDesc("wp.gpx", "Garmin GPX Waypoints", build_gpx_waypoints),
]

_FORMAT_BY_EXT: Dict[str, FormatDesc] = {fmt.extension: fmt for fmt in FORMAT_REGISTRY}


def get_format(name: str) -> Optional[FormatDesc]:
    """Format descriptor for an extension or file name (longest suffix wins)."""
    name = name.lower().lstrip(".")
    if name in _FORMAT_BY_EXT:
        return _FORMAT_BY_EXT[name]
    for ext in sorted(_FORMAT_BY_EXT, key=len, reverse=True):
        if name.endswith("." + ext):
            return _FORMAT_BY_EXT[ext]
    return None


def supported_formats() -> List[str]:
    return sorted(_FORMAT_BY_EXT.keys())


def build_document(name: str, route: Route, addresses: Sequence[Optional[str]],
                   labels: Labels = None) -> Optional[str]:
    """Build the document for an extension or file name."""
    fmt = get_format(name)
    if not fmt:
        raise ValueError(f"Unsupported export format: {name}\n"
                         f"Supported: {', '.join(supported_formats())}")
    return fmt.builder(route, addresses, labels)
