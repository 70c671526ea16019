"""Tests for Coordinate value object and haversine distance."""

import math

import pytest

from distributor.domain.value_objects.coordinate import (
    EARTH_RADIUS_KM,
    Coordinate,
    distance_km,
)

LONDON = Coordinate(latitude=51.5074, longitude=-0.1278)
PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
TOKYO = Coordinate(latitude=35.6895, longitude=139.6917)
SAN_FRANCISCO = Coordinate(latitude=37.7749, longitude=-122.4194)
SYDNEY = Coordinate(latitude=-33.8688, longitude=151.2093)
MELBOURNE = Coordinate(latitude=-37.8136, longitude=144.9631)
MOSCOW = Coordinate(latitude=55.7558, longitude=37.6176)
ST_PETERSBURG = Coordinate(latitude=59.9343, longitude=30.3351)


@pytest.mark.parametrize(
    "a, b, low, high",
    [
        (LONDON, PARIS, 333, 353),
        (TOKYO, SAN_FRANCISCO, 8260, 8280),
        (SYDNEY, MELBOURNE, 703, 723),
        (MOSCOW, ST_PETERSBURG, 624, 644),
    ],
)
def test_known_city_pairs(a, b, low, high):
    assert low <= distance_km(a, b) <= high


def test_distance_same_point():
    """Distance from a point to itself should be 0."""
    p = Coordinate(latitude=43.238949, longitude=76.945465)
    assert distance_km(p, p) == 0.0


@pytest.mark.parametrize("a, b", [(LONDON, TOKYO), (SYDNEY, MOSCOW), (PARIS, SAN_FRANCISCO)])
def test_distance_is_symmetric(a, b):
    assert distance_km(a, b) == pytest.approx(distance_km(b, a))


def test_antipodal_points_give_half_circumference():
    a = Coordinate(latitude=10.0, longitude=20.0)
    b = Coordinate(latitude=-10.0, longitude=-160.0)
    assert distance_km(a, b) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


def test_method_matches_function():
    assert LONDON.haversine_km(PARIS) == distance_km(LONDON, PARIS)


def test_coordinate_is_frozen():
    """Coordinate should be immutable."""
    p = Coordinate(latitude=43.0, longitude=76.0)
    with pytest.raises(AttributeError):
        p.latitude = 50.0
