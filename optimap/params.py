"""
OptiMap Export — Planner parameters

Parses the query parameters a planner link carries: the stop list
(``loc0``, ``name0``, ``loc1``, ...) and the initial map center.
"""

from __future__ import annotations
import re
from typing import List, Mapping, NamedTuple, Optional, Tuple


class Location(NamedTuple):
    addr: str
    name: str = ""


_NUMBER = r"-?(?:[0-9]+|[0-9]*\.[0-9]+)"
_CENTER_RE = re.compile(rf"\(\s*({_NUMBER}),\s*({_NUMBER})\)")


def parse_locations(params: Mapping[str, str]) -> List[Location]:
    """Read ``loc<N>``/``name<N>`` pairs, stopping at the first missing or empty location."""
    locations = []
    num = 0
    while True:
        loc = params.get(f"loc{num}")
        if not loc:
            break
        locations.append(Location(loc, params.get(f"name{num}", "")))
        num += 1
    return locations


def parse_center(params: Mapping[str, str]) -> Optional[Tuple[str, str]]:
    """``"(lat, lng)"`` → ``("lat", "lng")``; None when absent or malformed."""
    loc = params.get("center")
    if loc is None:
        return None
    m = _CENTER_RE.search(loc)
    if not m:
        return None
    return m.group(1), m.group(2)
