"""
Representation of specific points on earth and of location fixes
"""

__all__ = ['GeoPoint', 'Location']

from datetime import datetime, timedelta, timezone
import math
from typing import Optional, Union

from pydantic import validate_call

from glasscompass.calc import bearing_degrees, haversine_distance_km
from glasscompass.utils.functions import default_to_zulu


class GeoPoint:
    """An immutable point on the globe (i.e., a lat/lon pair), in degrees"""

    __slots__ = ('_latitude', '_longitude')

    @validate_call
    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f'Coordinates must be finite, got ({lat}, {lon})')

        self._latitude = lat
        self._longitude = lon

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if type(other) is not type(self):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.latitude}, {self.longitude})>'

    def bearing_to(self, other: 'GeoPoint') -> float:
        """The initial bearing, in degrees, from this point to another"""
        return bearing_degrees(self.latitude, self.longitude, other.latitude, other.longitude)

    def distance_km(self, other: 'GeoPoint') -> float:
        """The great circle distance, in kilometers, from this point to another"""
        return haversine_distance_km(
            self.latitude, self.longitude, other.latitude, other.longitude
        )


class Location(GeoPoint):
    """
    A location fix as reported by a location provider. Snapshots are immutable; a new
    fix replaces the previous one rather than updating it.
    """

    __slots__ = ('_altitude', '_timestamp')

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        altitude: float = 0.0,
        timestamp: Optional[datetime] = None,
    ):
        super().__init__(latitude, longitude)
        self._altitude = altitude
        self._timestamp = (
            default_to_zulu(timestamp) if timestamp is not None
            else datetime.now(timezone.utc)
        )

    @property
    def altitude(self) -> float:
        return self._altitude

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    def __eq__(self, other):
        if not isinstance(other, Location):
            return False

        return (
            super().__eq__(other) and
            self.altitude == other.altitude and
            self.timestamp == other.timestamp
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude, self.timestamp))

    def __repr__(self):
        return (
            f'<Location({self.latitude}, {self.longitude}, {self.altitude}, '
            f'{self.timestamp.isoformat()})>'
        )

    @property
    def point(self) -> GeoPoint:
        """The fix as a plain GeoPoint"""
        return GeoPoint(self.latitude, self.longitude)

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """
        How old this fix is relative to `now` (defaults to the current time).

        Args:
            now:
                The reference time. Naive datetimes are assumed to be UTC.

        Returns:
            timedelta
        """
        now = default_to_zulu(now) if now is not None else datetime.now(timezone.utc)
        return now - self.timestamp
