"""Great-circle distance between two points (Haversine)."""

import math

from models.schemas.records import GeoPoint

EARTH_RADIUS_KM = 6371.0


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in kilometres between two lat/lng points given in degrees.

    Callers must check both points are present; no validation happens here.
    """
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat))
        * math.sin(d_lng / 2) ** 2
    )
    h = min(1.0, h)  # rounding near antipodal points
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c
