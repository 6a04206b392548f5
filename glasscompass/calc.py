""" Angle and great-circle calculations for headings, bearings and landmarks """

__all__ = [
    'AnimationTarget', 'bearing_degrees', 'bearings_degrees', 'half_wind_index',
    'haversine_distance_km', 'haversine_distances_km', 'mod', 'select_animation_target',
    'shortest_angular_distance', 'true_north_heading',
]

import math
from typing import NamedTuple, Optional, Sequence, Union

import numpy as np

from glasscompass._const import (
    EARTH_RADIUS_KM, HALF_WIND_WIDTH, MIN_DISTANCE_TO_ANIMATE, NUMBER_OF_HALF_WINDS
)


class AnimationTarget(NamedTuple):
    """
    The outcome of comparing a newly sensed heading against the displayed one.

    When `snap` is True the display should jump straight to `target`. Otherwise the
    display should be linearly interpolated toward `target`, which may lie outside of
    [0, 360) so that the interpolation sweeps the shorter arc.
    """
    snap: bool
    target: float


def mod(a: Union[int, float], b: Union[int, float]) -> Union[int, float]:
    """
    Calculates `a mod b` in a way that respects negative values (for example,
    mod(-1, 5) == 4, rather than -1). The result always carries the sign of the
    divisor.

    Args:
        a:
            The dividend

        b:
            The divisor. A zero divisor raises ZeroDivisionError.

    Returns:
        int if both arguments are ints, otherwise float
    """
    result = a % b

    # Tiny negative floats round up to the divisor itself, e.g. -1e-20 % 360.0
    if result == b:
        return result - b

    return result


def half_wind_index(heading: float) -> int:
    """
    Converts the specified heading angle into an index between 0-15 that can be used to
    retrieve the direction name for that heading (known as "boxing the compass", down to
    the half-wind level).

    Args:
        heading:
            The heading angle, in degrees. Need not be normalized.

    Returns:
        (int) the index of the direction name for the angle
    """
    displaced = mod(heading + HALF_WIND_WIDTH / 2, 360.0)
    return min(int(displaced // HALF_WIND_WIDTH), NUMBER_OF_HALF_WINDS - 1)


def bearing_degrees(
    latitude1: float, longitude1: float, latitude2: float, longitude2: float
) -> float:
    """
    Calculate the initial bearing (forward azimuth) from one geographical point to
    another, using spherical trigonometry.

    Args:
        latitude1:
            The latitude of the source point

        longitude1:
            The longitude of the source point

        latitude2:
            The latitude of the destination point

        longitude2:
            The longitude of the destination point

    Returns:
        (float) the bearing in degrees, guaranteed to fall in [0, 360)
    """
    lat1, lat2 = math.radians(latitude1), math.radians(latitude2)
    d_lon = math.radians(longitude2 - longitude1)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return mod(math.degrees(math.atan2(y, x)), 360.0)


def haversine_distance_km(
    latitude1: float, longitude1: float, latitude2: float, longitude2: float
) -> float:
    """
    Calculate the great circle distance in kilometers between two points using the
    Haversine formula.

    Args:
        latitude1:
            The latitude of the first point

        longitude1:
            The longitude of the first point

        latitude2:
            The latitude of the second point

        longitude2:
            The longitude of the second point

    Returns:
        (float) the distance in kilometers
    """
    lat1, lat2 = math.radians(latitude1), math.radians(latitude2)
    d_lat = math.radians(latitude2 - latitude1)
    d_lon = math.radians(longitude2 - longitude1)

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)
    # Float error can push `a` a hair past 1 for antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def haversine_distances_km(
    latitude: float,
    longitude: float,
    latitudes: Sequence[float],
    longitudes: Sequence[float],
) -> np.ndarray:
    """
    Vectorized Haversine distance from a single origin to many points.

    Args:
        latitude:
            The latitude of the origin

        longitude:
            The longitude of the origin

        latitudes:
            The latitudes of the destination points

        longitudes:
            The longitudes of the destination points

    Returns:
        (np.ndarray) distances in kilometers, one per destination
    """
    lat1 = np.radians(latitude)
    lat2 = np.radians(np.asarray(latitudes, dtype=float))
    d_lat = lat2 - lat1
    d_lon = np.radians(np.asarray(longitudes, dtype=float) - longitude)

    a = np.sin(d_lat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(d_lon / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def bearings_degrees(
    latitude: float,
    longitude: float,
    latitudes: Sequence[float],
    longitudes: Sequence[float],
) -> np.ndarray:
    """
    Vectorized initial bearing from a single origin to many points.

    Returns:
        (np.ndarray) bearings in degrees within [0, 360), one per destination
    """
    lat1 = np.radians(latitude)
    lat2 = np.radians(np.asarray(latitudes, dtype=float))
    d_lon = np.radians(np.asarray(longitudes, dtype=float) - longitude)

    y = np.sin(d_lon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(d_lon)

    result = np.mod(np.degrees(np.arctan2(y, x)), 360.0)
    return np.where(result >= 360.0, result - 360.0, result)


def true_north_heading(magnetic_heading: float, declination: Optional[float] = None) -> float:
    """
    Converts a heading relative to magnetic north into one relative to true
    (geographic) north.

    Args:
        magnetic_heading:
            The heading, in degrees, relative to magnetic north

        declination:
            The magnetic declination at the user's location, or None if no location
            fix is available yet (the heading is then only normalized)

    Returns:
        (float) the heading in degrees, within [0, 360)
    """
    if declination is None:
        return mod(float(magnetic_heading), 360.0)

    return mod(magnetic_heading + declination, 360.0)


def shortest_angular_distance(angle1: float, angle2: float) -> float:
    """
    The unsigned angular distance between two headings, taking the shorter way
    around the circle.

    Returns:
        (float) a distance in degrees within [0, 180]
    """
    distance = abs(mod(angle2, 360.0) - mod(angle1, 360.0))
    return min(distance, 360.0 - distance)


def select_animation_target(
    current: Optional[float],
    new_heading: float,
    snap_threshold: float = MIN_DISTANCE_TO_ANIMATE,
) -> AnimationTarget:
    """
    Decides whether the displayed heading should jump to a newly sensed heading or be
    animated toward it.

    Small changes (and the very first heading) are applied immediately. Larger jumps
    are animated along the shorter arc; since a linear interpolation between the raw
    angles may go the long way around, the target is shifted by 360 degrees when the
    shorter arc crosses 0/360.

    Args:
        current:
            The currently displayed heading, or None (or NaN) if nothing has been
            displayed yet

        new_heading:
            The newly sensed heading

        snap_threshold:
            Angular distances below this value are applied without animating

    Returns:
        AnimationTarget
    """
    end = mod(new_heading, 360.0)
    if current is None or math.isnan(current):
        return AnimationTarget(True, end)

    start = mod(current, 360.0)
    distance = abs(end - start)
    reverse_distance = 360.0 - distance

    if min(distance, reverse_distance) < snap_threshold:
        return AnimationTarget(True, end)

    if distance <= reverse_distance:
        return AnimationTarget(False, end)

    if end < start:
        return AnimationTarget(False, end + 360.0)

    return AnimationTarget(False, end - 360.0)
