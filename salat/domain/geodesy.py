from __future__ import annotations

import math

from .models import GeoPoint

EARTH_RADIUS_KM = 6371.0
KAABA = GeoPoint(lat=21.4225, lon=39.8262)


def compute_bearing(origin: GeoPoint, destination: GeoPoint) -> float:
    """Initial great-circle bearing in degrees, clockwise from true north, in [0, 360)."""
    d_lon = math.radians(destination.lon - origin.lon)
    phi1 = math.radians(origin.lat)
    phi2 = math.radians(destination.lat)
    x = math.sin(d_lon)
    y = math.cos(phi1) * math.tan(phi2) - math.sin(phi1) * math.cos(d_lon)
    bearing = math.degrees(math.atan2(x, y))
    if bearing < 0:
        bearing += 360.0
    # -0.0 + 360 or float rounding can land exactly on 360
    if bearing >= 360.0:
        bearing -= 360.0
    return bearing


def great_circle_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lon - a.lon)
    h = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    # Clamp rounding noise so sqrt(1 - h) stays real
    h = min(max(h, 0.0), 1.0)
    return 2.0 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))


def qibla_bearing(point: GeoPoint) -> float:
    return compute_bearing(point, KAABA)


def qibla_distance_km(point: GeoPoint) -> float:
    return great_circle_distance_km(point, KAABA)
