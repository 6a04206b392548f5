import math

import numpy as np
import pytest
from pytest import approx

from glasscompass._const import EARTH_RADIUS_KM
from glasscompass.calc import *


def test_mod():
    assert mod(-1, 5) == 4
    assert mod(-1, 360) == 359
    assert mod(361, 360) == 1
    assert mod(720, 360) == 0
    assert isinstance(mod(-1, 360), int)

    assert mod(-1., 360.) == 359.
    assert mod(-370.5, 360.) == approx(349.5)
    assert mod(359.5, 360.) == 359.5

    # Tiny negatives must not round up to the divisor
    assert mod(-1e-20, 360.) == 0.
    assert 0 <= mod(-1e-14, 360.) < 360.


def test_mod_range():
    for a in (-1000.25, -360., -0.5, 0., 12.75, 359.999, 360., 1e6 + 0.5):
        result = mod(a, 360.)
        assert 0 <= result < 360
        assert (a - result) / 360 == approx(round((a - result) / 360))

        # Idempotent once normalized
        assert mod(result, 360.) == result


def test_mod_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        mod(1, 0)

    with pytest.raises(ZeroDivisionError):
        mod(1., 0.)


def test_half_wind_index():
    assert half_wind_index(0) == 0
    assert half_wind_index(359.9) == 0
    assert half_wind_index(180) == 8
    assert half_wind_index(90) == 4
    assert half_wind_index(270) == 12

    # Boundaries fall into the higher sector
    assert half_wind_index(11.25) == 1
    assert half_wind_index(11.2499) == 0
    assert half_wind_index(348.75) == 0
    assert half_wind_index(348.7499) == 15

    # Periodic
    assert half_wind_index(-90) == 12
    assert half_wind_index(360 + 45) == half_wind_index(45) == 2


def test_half_wind_index_partitions_circle():
    indices = [half_wind_index(x / 4) for x in range(0, 360 * 4)]
    assert set(indices) == set(range(16))

    # Each sector spans 22.5 degrees
    for idx in range(16):
        assert indices.count(idx) == 90


def test_bearing_degrees():
    assert bearing_degrees(0., 0., 0., 90.) == approx(90.)
    assert bearing_degrees(0., 0., 10., 0.) == approx(0.)
    assert bearing_degrees(0., 0., -10., 0.) == approx(180.)
    assert bearing_degrees(0., 0., 0., -10.) == approx(270.)
    assert bearing_degrees(0., 0., 0.001, 0.001) == approx(45., abs=1e-3)

    # Antimeridian
    assert bearing_degrees(0., 179., 0., -179.) == approx(90.)


def test_bearing_degrees_identical_points():
    result = bearing_degrees(37.4, -122.1, 37.4, -122.1)
    assert 0 <= result < 360


def test_haversine_distance_km():
    assert haversine_distance_km(0., 0., 0., 90.) == approx(EARTH_RADIUS_KM * math.pi / 2)
    assert haversine_distance_km(0., 0., 0., 90.) == approx(10007.5, abs=0.1)

    # Antimeridian
    assert haversine_distance_km(0., 179., 0., -179.) == approx(222.39, abs=0.01)

    # Antipodal
    assert haversine_distance_km(0., 0., 0., 180.) == approx(EARTH_RADIUS_KM * math.pi)
    assert haversine_distance_km(45., 10., -45., -170.) == approx(EARTH_RADIUS_KM * math.pi)


def test_haversine_distance_km_properties():
    assert haversine_distance_km(37.4, -122.1, 37.4, -122.1) == 0.

    p1, p2 = (37.422, -122.084), (37.8199, -122.4783)
    assert haversine_distance_km(*p1, *p2) == approx(haversine_distance_km(*p2, *p1))
    assert haversine_distance_km(*p1, *p2) > 0


def test_vectorized_matches_scalar():
    lats = [0., 10., -33.856784, 37.8199]
    lons = [90., 0., 151.215297, -122.4783]

    distances = haversine_distances_km(37.422, -122.084, lats, lons)
    bearings = bearings_degrees(37.422, -122.084, lats, lons)
    assert isinstance(distances, np.ndarray)

    for lat, lon, dist, bearing in zip(lats, lons, distances, bearings):
        assert dist == approx(haversine_distance_km(37.422, -122.084, lat, lon))
        assert bearing == approx(bearing_degrees(37.422, -122.084, lat, lon))
        assert 0 <= bearing < 360


def test_true_north_heading():
    assert true_north_heading(100., None) == 100.
    assert true_north_heading(100.) == 100.
    assert true_north_heading(100., 13.5) == 113.5
    assert true_north_heading(355., 10.) == approx(5.)
    assert true_north_heading(5., -10.) == approx(355.)
    assert true_north_heading(-30.) == 330.


def test_shortest_angular_distance():
    assert shortest_angular_distance(350., 10.) == approx(20.)
    assert shortest_angular_distance(10., 350.) == approx(20.)
    assert shortest_angular_distance(0., 180.) == 180.
    assert shortest_angular_distance(90., 90.) == 0.
    assert shortest_angular_distance(-10., 10.) == approx(20.)


def test_select_animation_target_wraps_forward():
    assert select_animation_target(350., 10., 15.) == AnimationTarget(False, 370.)


def test_select_animation_target_wraps_backward():
    assert select_animation_target(10., 350., 15.) == AnimationTarget(False, -10.)


def test_select_animation_target_direct():
    assert select_animation_target(90., 180., 15.) == AnimationTarget(False, 180.)
    assert select_animation_target(180., 90., 15.) == AnimationTarget(False, 90.)

    # Exactly opposite goes the direct way
    assert select_animation_target(0., 180., 15.) == AnimationTarget(False, 180.)


def test_select_animation_target_snaps():
    # Uninitialized display
    assert select_animation_target(None, 200.) == AnimationTarget(True, 200.)
    assert select_animation_target(float('nan'), 200.) == AnimationTarget(True, 200.)

    # Below the threshold
    assert select_animation_target(100., 110.) == AnimationTarget(True, 110.)
    assert select_animation_target(355., 5.) == AnimationTarget(True, 5.)

    # Threshold is exclusive
    assert select_animation_target(100., 115.) == AnimationTarget(False, 115.)
    assert select_animation_target(100., 115., snap_threshold=16.) == AnimationTarget(True, 115.)


def test_select_animation_target_normalizes_new_heading():
    assert select_animation_target(None, -90.) == AnimationTarget(True, 270.)
    assert select_animation_target(0., 400.) == AnimationTarget(False, 40.)
