"""
OptiMap Export — Route Totals

Sums leg durations/distances and renders them the way the planner shows
them. The exact spacing of these strings is what the page displays, so
trailing spaces are part of the output.
"""

from __future__ import annotations
from typing import NamedTuple

from .models import Route

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
METERS_PER_KM = 1000
MILES_PER_KM = 0.621371192

# Above this many kilometers the meters part is dropped
KM_DETAIL_LIMIT = 10


def format_duration(total_seconds: int) -> str:
    """
    Render seconds as ``"<d> days <h> hrs <m> min <s> sec"``, dropping
    leading zero units. Seconds are only shown for durations under an hour.

    >>> format_duration(60)
    '1 min 0 sec'
    >>> format_duration(3661)
    '1 hrs 1 min '
    """
    total_seconds = int(total_seconds)
    days, rest = divmod(total_seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)

    out = ""
    if days > 0:
        out += f"{days} days "
    if days > 0 or hours > 0:
        out += f"{hours} hrs "
    if days > 0 or hours > 0 or minutes > 0:
        out += f"{minutes} min "
    if days == 0 and hours == 0:
        out += f"{seconds} sec"
    return out


def format_distance_metric(total_meters: float) -> str:
    """
    >>> format_distance_metric(9999)
    '9 km 999 m'
    >>> format_distance_metric(10000)
    '10 km '
    """
    km = int(total_meters // METERS_PER_KM)
    meters = int(total_meters % METERS_PER_KM)

    out = ""
    if km > 0:
        out += f"{km} km "
    if km < KM_DETAIL_LIMIT:
        out += f"{meters} m"
    return out


def format_distance_imperial(meters: float) -> str:
    # Tenths are not zero-padded; 1609.344 m renders as "0.10 miles"
    scaled = meters * MILES_PER_KM
    miles = int(scaled / METERS_PER_KM)
    tenths = int((scaled - miles * METERS_PER_KM + 50) / 100)
    return f"{miles}.{tenths} miles"


def total_duration(route: Route) -> int:
    return sum(leg.duration_seconds for leg in route)


def total_distance(route: Route) -> float:
    return sum(leg.distance_meters for leg in route)


class RouteSummary(NamedTuple):
    duration_seconds: int
    distance_meters: float
    duration: str
    distance: str


def summarize(route: Route, imperial: bool = False) -> RouteSummary:
    """Totals of a route with their display strings."""
    seconds = total_duration(route)
    meters = total_distance(route)
    if imperial:
        distance = format_distance_imperial(meters)
    else:
        distance = format_distance_metric(meters)
    return RouteSummary(seconds, meters, format_duration(seconds), distance)
