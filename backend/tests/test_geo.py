import math

import pytest

from models.schemas.records import GeoPoint
from services.geo import EARTH_RADIUS_KM, distance_km


def test_same_point_is_zero():
    p = GeoPoint(lat=40.7128, lng=-74.0060)
    assert distance_km(p, p) == 0.0


def test_one_degree_of_longitude_at_equator():
    a = GeoPoint(lat=0.0, lng=0.0)
    b = GeoPoint(lat=0.0, lng=1.0)
    assert distance_km(a, b) == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-9)


def test_symmetric():
    a = GeoPoint(lat=40.0, lng=-74.0)
    b = GeoPoint(lat=40.01, lng=-74.01)
    assert distance_km(a, b) == pytest.approx(distance_km(b, a))


def test_nearby_points():
    a = GeoPoint(lat=40.0, lng=-74.0)
    b = GeoPoint(lat=40.01, lng=-74.01)
    assert distance_km(a, b) == pytest.approx(1.4007, abs=1e-3)


def test_london_to_paris():
    london = GeoPoint(lat=51.5074, lng=-0.1278)
    paris = GeoPoint(lat=48.8566, lng=2.3522)
    assert distance_km(london, paris) == pytest.approx(343.5, abs=1.0)
