"""
OptiMap Export — Route Planner Export Engine
Data models: GeoPoint, Leg, Route, ResolvedStop
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True)
class GeoPoint:
    """A coordinate in decimal degrees."""
    lat: float = 0.0
    lng: float = 0.0

    def __post_init__(self):
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"Non-finite coordinate: ({self.lat}, {self.lng})")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GeoPoint:
        try:
            return cls(float(data["lat"]), float(data["lng"]))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid location: {data!r}") from e


@dataclass(frozen=True)
class Leg:
    """One directed segment between two consecutive stops."""
    start: GeoPoint
    end: GeoPoint
    duration_seconds: int = 0
    distance_meters: float = 0.0

    def __post_init__(self):
        if self.duration_seconds < 0:
            raise ValueError(f"Negative leg duration: {self.duration_seconds}")
        if self.distance_meters < 0:
            raise ValueError(f"Negative leg distance: {self.distance_meters}")


@dataclass(frozen=True)
class Route:
    """Ordered legs of a computed route. An empty route means "no route yet"."""
    legs: Tuple[Leg, ...] = ()

    def __post_init__(self):
        # Accept any iterable of legs but always store a tuple
        object.__setattr__(self, "legs", tuple(self.legs))

    def __len__(self) -> int:
        return len(self.legs)

    def __iter__(self) -> Iterator[Leg]:
        return iter(self.legs)

    def __bool__(self) -> bool:
        return len(self.legs) > 0

    @property
    def stop_count(self) -> int:
        return len(self.legs) + 1 if self.legs else 0

    @classmethod
    def from_directions(cls, data: Mapping[str, Any]) -> Route:
        """
        Build a route from a directions-provider mapping:

            {"legs": [{"start_location": {"lat": .., "lng": ..},
                       "end_location": {...},
                       "duration": {"value": seconds},
                       "distance": {"value": meters}}, ...]}

        ``duration`` and ``distance`` are optional and default to zero.
        """
        legs_data = data.get("legs") or []
        if not isinstance(legs_data, (list, tuple)):
            raise ValueError(f"Legs must be a list, got {type(legs_data).__name__}")
        legs = []
        for i, raw in enumerate(legs_data):
            if not isinstance(raw, Mapping):
                raise ValueError(f"Leg {i} must be an object, got {raw!r}")
            try:
                start = GeoPoint.from_mapping(raw["start_location"])
                end = GeoPoint.from_mapping(raw["end_location"])
            except KeyError as e:
                raise ValueError(f"Leg {i} is missing {e.args[0]}") from e
            duration = _leg_value(raw, "duration", i)
            distance = _leg_value(raw, "distance", i)
            try:
                legs.append(Leg(start, end, int(duration), float(distance)))
            except TypeError as e:
                raise ValueError(f"Leg {i} has a non-numeric duration or distance") from e
        return cls(tuple(legs))


def _leg_value(raw: Mapping[str, Any], key: str, index: int) -> Any:
    """``raw[key]["value"]``, zero when the entry is absent."""
    entry = raw.get(key)
    if entry is None:
        return 0
    if not isinstance(entry, Mapping):
        raise ValueError(f"Leg {index} {key} must be an object with a value, got {entry!r}")
    return entry.get("value", 0)


@dataclass(frozen=True)
class ResolvedStop:
    """A stop with its display label resolved. Lives for one export call."""
    point: GeoPoint
    label: str
    ordinal: int
    address: str = ""

    @property
    def is_start(self) -> bool:
        return self.ordinal == 0


def label_at(values: Optional[Any], index: int) -> Optional[str]:
    """Entry ``index`` of an address/label list, or None when absent."""
    if values is None or index >= len(values):
        return None
    return values[index]
