import math

import pytest

from salat.domain.geodesy import (
    EARTH_RADIUS_KM,
    KAABA,
    compute_bearing,
    great_circle_distance_km,
    qibla_bearing,
    qibla_distance_km,
)
from salat.domain.models import GeoPoint


def test_distance_zero_for_identical_points():
    for point in (GeoPoint(0, 0), GeoPoint(51.5, -0.12), GeoPoint(-33.9, 151.2), KAABA):
        assert great_circle_distance_km(point, point) == 0.0


def test_distance_quarter_and_half_circumference():
    quarter = great_circle_distance_km(GeoPoint(0, 0), GeoPoint(0, 90))
    half = great_circle_distance_km(GeoPoint(0, 0), GeoPoint(0, 180))
    assert quarter == pytest.approx(math.pi / 2 * EARTH_RADIUS_KM)
    assert half == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_distance_symmetric_and_monotonic():
    a = GeoPoint(21.0, 39.0)
    near = GeoPoint(22.0, 39.0)
    far = GeoPoint(30.0, 39.0)
    assert great_circle_distance_km(a, far) == pytest.approx(great_circle_distance_km(far, a))
    assert 0 < great_circle_distance_km(a, near) < great_circle_distance_km(a, far)


def test_bearing_cardinal_directions():
    origin = GeoPoint(0, 0)
    assert compute_bearing(origin, GeoPoint(10, 0)) == pytest.approx(0.0)
    assert compute_bearing(origin, GeoPoint(0, 90)) == pytest.approx(90.0)
    assert compute_bearing(GeoPoint(10, 0), origin) == pytest.approx(180.0)
    assert compute_bearing(origin, GeoPoint(0, -90)) == pytest.approx(270.0)


def test_bearing_always_in_range():
    lats = [-89.0, -45.5, 0.0, 21.4, 60.0, 89.0]
    lons = [-180.0, -120.0, -0.5, 0.0, 39.8, 179.9, 180.0]
    for lat1 in lats:
        for lon1 in lons:
            for lat2 in lats:
                for lon2 in lons:
                    bearing = compute_bearing(GeoPoint(lat1, lon1), GeoPoint(lat2, lon2))
                    assert 0.0 <= bearing < 360.0


def test_qibla_fixture_near_mecca():
    origin = GeoPoint(21.0, 39.0)
    assert qibla_bearing(origin) == pytest.approx(61.105, abs=0.01)
    assert qibla_distance_km(origin) == pytest.approx(97.684, abs=0.01)
    assert qibla_distance_km(origin) < 100


def test_qibla_from_london_points_south_east():
    london = GeoPoint(51.5074, -0.1278)
    assert qibla_bearing(london) == pytest.approx(119.0, abs=1.5)
    assert 4_700 < qibla_distance_km(london) < 4_850


def test_geopoint_validation():
    with pytest.raises(ValueError):
        GeoPoint(91.0, 0.0)
    with pytest.raises(ValueError):
        GeoPoint(0.0, -180.5)
    assert GeoPoint(21.0, 39.0).label() == "21.00, 39.00"
