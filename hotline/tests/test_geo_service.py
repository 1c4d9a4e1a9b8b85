"""Tests for geolocation service."""

import pytest

from hotline.domain import Coordinate
from hotline.services.geo_service import GeoService


def test_haversine_distance():
    """Test distance calculation between two points."""
    geo = GeoService()

    # RMP control room to the divisional fire station
    distance = geo.haversine_distance(24.3686, 88.6300, 24.3828, 88.6019)

    # Should be approximately 3.3 km
    assert 2.5 < distance < 4.0


def test_haversine_same_location():
    """Test distance between same point is zero."""
    geo = GeoService()

    assert geo.haversine_distance(24.3686, 88.6300, 24.3686, 88.6300) == 0


@pytest.mark.parametrize(
    "a, b",
    [
        (Coordinate(24.3686, 88.6300), Coordinate(24.3725, 88.6045)),
        (Coordinate(24.3615, 88.5830), Coordinate(24.3752, 88.6278)),
        (Coordinate(-33.8688, 151.2093), Coordinate(51.5074, -0.1278)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert GeoService.distance(a, b) == pytest.approx(GeoService.distance(b, a))
    assert GeoService.distance(a, b) > 0


def test_distance_one_degree_of_latitude():
    """One degree of latitude on a 6371 km sphere is about 111.19 km."""
    distance = GeoService.distance(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))

    assert distance == pytest.approx(111.195, abs=0.01)
