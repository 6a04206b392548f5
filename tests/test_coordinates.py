from datetime import datetime, timedelta, timezone

import pytest
from pytest import approx

from glasscompass import GeoPoint, Location


def test_geopoint_init():
    p = GeoPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint('1.0', '0.0')
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint(1, 2)
    assert isinstance(p.latitude, float)

    with pytest.raises(ValueError):
        GeoPoint(float('nan'), 0.)

    with pytest.raises(ValueError):
        GeoPoint(0., float('inf'))


def test_geopoint_immutable():
    p = GeoPoint(1., 0.)
    with pytest.raises(AttributeError):
        p.latitude = 5.

    with pytest.raises(AttributeError):
        p.altitude = 5.


def test_geopoint_eq_hash():
    assert GeoPoint(0., 0.) == GeoPoint(0., 0.)
    assert GeoPoint(0., 0.) != GeoPoint(1., 0.)
    assert GeoPoint(0., 0.) != (0., 0.)
    assert len({GeoPoint(0., 0.), GeoPoint(0., 0.), GeoPoint(1., 1.)}) == 2


def test_geopoint_repr():
    assert repr(GeoPoint(1., 0.)) == '<GeoPoint(1.0, 0.0)>'


def test_geopoint_bearing_distance():
    origin, dest = GeoPoint(0., 0.), GeoPoint(0., 90.)
    assert origin.bearing_to(dest) == approx(90.)
    assert origin.distance_km(dest) == approx(10007.543, abs=1e-3)
    assert origin.distance_km(origin) == 0.


def test_location_init():
    ts = datetime(2020, 1, 1, tzinfo=timezone.utc)
    loc = Location(37.4, -122.1, 30., ts)
    assert loc.latitude == 37.4
    assert loc.longitude == -122.1
    assert loc.altitude == 30.
    assert loc.timestamp == ts
    assert loc.point == GeoPoint(37.4, -122.1)

    # Naive timestamps are assumed to be UTC
    loc = Location(37.4, -122.1, timestamp=datetime(2020, 1, 1))
    assert loc.timestamp == ts

    # Defaults to now
    loc = Location(37.4, -122.1)
    assert loc.altitude == 0.
    assert loc.timestamp.tzinfo is not None


def test_location_eq():
    ts = datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert Location(1., 2., 3., ts) == Location(1., 2., 3., ts)
    assert Location(1., 2., 3., ts) != Location(1., 2., 4., ts)
    assert Location(1., 2., 3., ts) != GeoPoint(1., 2.)
    assert GeoPoint(1., 2.) != Location(1., 2., 3., ts)


def test_location_age():
    ts = datetime(2020, 1, 1, tzinfo=timezone.utc)
    loc = Location(1., 2., timestamp=ts)
    assert loc.age(ts + timedelta(minutes=5)) == timedelta(minutes=5)
    assert loc.age(datetime(2020, 1, 1, 0, 10)) == timedelta(minutes=10)
