"""Tests for great-circle distance"""

import pytest

from wherewhen.domain import Location
from wherewhen.shared.utils import distance_km

from tests.factories import BARCELONA, MADRID


@pytest.mark.parametrize(
    "lat, lon",
    [(0.0, 0.0), (40.4168, -3.7038), (-33.8688, 151.2093), (89.9, 179.9)],
)
def test_distance_to_same_point_is_zero(lat, lon):
    assert distance_km(lat, lon, lat, lon) == 0.0


def test_distance_is_symmetric():
    forward = distance_km(40.4168, -3.7038, 41.3874, 2.1686)
    backward = distance_km(41.3874, 2.1686, 40.4168, -3.7038)
    assert forward == pytest.approx(backward)


def test_madrid_to_barcelona():
    """Known great-circle distance of roughly 505 km"""
    assert distance_km(40.4168, -3.7038, 41.3874, 2.1686) == pytest.approx(505, abs=5)


def test_one_degree_of_latitude():
    assert distance_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.01)


def test_location_distance_requires_coordinates():
    address_only = Location(address="Calle Mayor 1", city="Madrid")

    assert MADRID.distance_to(address_only) is None
    assert address_only.distance_to(MADRID) is None
    assert MADRID.distance_to(BARCELONA) == pytest.approx(505, abs=5)
