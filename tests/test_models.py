import math

import pytest

from optimap.models import GeoPoint, Leg, Route

from conftest import make_route


def test_route_stop_count_is_legs_plus_one():
    route = make_route((0, 0), (1, 1), (2, 2), (3, 3))
    assert len(route) == 3
    assert route.stop_count == 4


def test_empty_route_is_falsy_and_has_no_stops():
    route = Route()
    assert not route
    assert route.stop_count == 0


def test_route_stores_legs_as_tuple():
    a, b = GeoPoint(1, 2), GeoPoint(3, 4)
    route = Route([Leg(a, b)])
    assert isinstance(route.legs, tuple)
    assert list(route) == [Leg(a, b)]


@pytest.mark.parametrize("lat,lng", [(math.nan, 0.0), (0.0, math.inf)])
def test_geopoint_rejects_non_finite(lat, lng):
    with pytest.raises(ValueError):
        GeoPoint(lat, lng)


def test_leg_rejects_negative_values():
    a = GeoPoint(0, 0)
    with pytest.raises(ValueError):
        Leg(a, a, duration_seconds=-1)
    with pytest.raises(ValueError):
        Leg(a, a, distance_meters=-0.5)


def test_from_directions_reads_legs():
    data = {
        "legs": [
            {
                "start_location": {"lat": 52.5, "lng": 13.4},
                "end_location": {"lat": 48.1, "lng": 11.6},
                "duration": {"value": 20000},
                "distance": {"value": 585000},
            },
            {
                "start_location": {"lat": 48.1, "lng": 11.6},
                "end_location": {"lat": 50.1, "lng": 8.7},
            },
        ]
    }
    route = Route.from_directions(data)
    assert len(route) == 2
    assert route.legs[0].start == GeoPoint(52.5, 13.4)
    assert route.legs[0].duration_seconds == 20000
    assert route.legs[0].distance_meters == 585000
    assert route.legs[1].duration_seconds == 0
    assert route.legs[1].end == GeoPoint(50.1, 8.7)


def test_from_directions_without_legs_is_empty():
    assert not Route.from_directions({})
    assert not Route.from_directions({"legs": []})


def test_from_directions_rejects_missing_location():
    with pytest.raises(ValueError, match="end_location"):
        Route.from_directions({"legs": [{"start_location": {"lat": 1, "lng": 2}}]})


def test_from_directions_rejects_incomplete_point():
    with pytest.raises(ValueError):
        Route.from_directions({"legs": [{
            "start_location": {"lat": 1},
            "end_location": {"lat": 1, "lng": 2},
        }]})


@pytest.mark.parametrize("data", [
    {"legs": [None]},
    {"legs": {"a": 1}},
    {"legs": "abc"},
    {"legs": [{
        "start_location": {"lat": 1, "lng": 2},
        "end_location": {"lat": 3, "lng": 4},
        "duration": 300,
    }]},
    {"legs": [{
        "start_location": {"lat": 1, "lng": 2},
        "end_location": {"lat": 3, "lng": 4},
        "distance": {"value": None},
    }]},
    {"legs": [{"start_location": None, "end_location": {"lat": 3, "lng": 4}}]},
])
def test_from_directions_rejects_malformed_mapping(data):
    with pytest.raises(ValueError):
        Route.from_directions(data)
