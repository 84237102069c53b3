import pytest

from optimap.models import GeoPoint, Leg, Route


def make_route(*points, duration=0, distance=0):
    """Route visiting ``points`` (lat, lng) in order."""
    geo = [GeoPoint(lat, lng) for lat, lng in points]
    return Route(tuple(Leg(a, b, duration, distance) for a, b in zip(geo, geo[1:])))


@pytest.fixture
def route2():
    # A -> B -> C
    return make_route((1.0, 2.0), (3.0, 4.0), (5.0, 6.0))


@pytest.fixture
def addresses():
    return ["Start", "Middle", "End"]


@pytest.fixture
def labels_named():
    return ["LabelA", "LabelB", "LabelC"]


@pytest.fixture
def labels_null():
    return [None, None, None]
