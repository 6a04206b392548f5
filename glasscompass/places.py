"""
Points of interest and the catalog of landmarks shown on the compass
"""

__all__ = ['Landmarks', 'Place', 'PlaceBearing']

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Sequence, Union

from pydantic import validate_call

from glasscompass._const import MAX_NEARBY_DISTANCE_KM
from glasscompass.calc import bearings_degrees, haversine_distances_km
from glasscompass.coordinates import GeoPoint
from glasscompass.utils.logging import LOGGER
from glasscompass.utils.mixins import LoggingMixin

_DEFAULT_LANDMARKS = Path(__file__).with_name('data') / 'landmarks.json'


class Place:
    """A named, immutable point of interest"""

    __slots__ = ('_point', '_name')

    @validate_call
    def __init__(self, latitude: float, longitude: float, name: str):
        self._point = GeoPoint(latitude, longitude)
        self._name = name

    @property
    def latitude(self) -> float:
        return self._point.latitude

    @property
    def longitude(self) -> float:
        return self._point.longitude

    @property
    def name(self) -> str:
        return self._name

    @property
    def point(self) -> GeoPoint:
        return self._point

    def __eq__(self, other):
        if not isinstance(other, Place):
            return False

        return self.point == other.point and self.name == other.name

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.name))

    def __repr__(self):
        return f'<Place({self.name!r}, {self.latitude}, {self.longitude})>'


class PlaceBearing(NamedTuple):
    """Where a place lies relative to an observer"""
    place: Place
    bearing: float
    distance_km: float


def _to_coordinate(value: Any) -> Optional[float]:
    """
    Converts a JSON number or numeric string into a finite float, or None if it isn't
    one.
    """
    # bools are ints, but true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None

    try:
        value = float(value)
    except (OverflowError, ValueError):
        return None

    return value if math.isfinite(value) else None


def _record_to_place(record: Any) -> Optional[Place]:
    """
    Converts a JSON object representing a place into a Place. Returns None for records
    without a name or with missing/non-numeric/non-finite coordinates.
    """
    if not isinstance(record, dict):
        return None

    name = record.get('name')
    if not isinstance(name, str) or not name:
        return None

    latitude = _to_coordinate(record.get('latitude'))
    longitude = _to_coordinate(record.get('longitude'))
    if latitude is None or longitude is None:
        return None

    return Place(latitude, longitude, name)


class Landmarks(LoggingMixin):
    """
    A catalog of known places, loaded once and never mutated afterwards.

    Args:
        places:
            The places in the catalog, in display order
    """

    def __init__(self, places: Optional[Sequence[Place]] = None):
        super().__init__()
        self._places: List[Place] = list(places or [])

    def __bool__(self):
        return bool(self._places)

    def __contains__(self, item):
        return item in self._places

    def __iter__(self) -> Iterator[Place]:
        return iter(self._places)

    def __len__(self):
        return len(self._places)

    def __repr__(self):
        return f'<Landmarks with {len(self)} places>'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Landmarks':
        """
        Creates a catalog from an already-parsed landmarks document, i.e. a mapping with
        a "landmarks" property holding an array of {name, latitude, longitude} objects.
        Malformed entries are skipped.

        Args:
            data:
                The parsed landmarks document

        Returns:
            Landmarks
        """
        records = data.get('landmarks')
        if records is None:
            LOGGER.warning('Landmarks document has no "landmarks" property')
            return cls()

        if not isinstance(records, list):
            LOGGER.error('Landmarks "landmarks" property must be an array, not %s',
                         type(records).__name__)
            return cls()

        places = []
        for idx, record in enumerate(records):
            place = _record_to_place(record)
            if place is None:
                LOGGER.warning('Skipping malformed landmark at index %d: %r', idx, record)
                continue

            places.append(place)

        return cls(places)

    @classmethod
    def from_json(cls, json_str: str) -> 'Landmarks':
        """
        Creates a catalog from a JSON string. A string that cannot be parsed produces
        an empty catalog.

        Args:
            json_str:
                The landmarks document as a JSON string

        Returns:
            Landmarks
        """
        try:
            data = json.loads(json_str)
        except ValueError as exc:
            # JSONDecodeError, or an integer literal past the int conversion limit
            LOGGER.error('Could not parse landmarks JSON string: %s', exc)
            return cls()

        if not isinstance(data, dict):
            LOGGER.error('Landmarks JSON root must be an object, not %s', type(data).__name__)
            return cls()

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Landmarks':
        """
        Creates a catalog from a JSON file on disk.

        Args:
            path:
                The path to the landmarks file

        Returns:
            Landmarks
        """
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_json(f.read())

    @classmethod
    def load_default(cls) -> 'Landmarks':
        """Loads the landmarks bundled with the package"""
        return cls.from_file(_DEFAULT_LANDMARKS)

    def nearby(
        self,
        latitude: float,
        longitude: float,
        max_distance_km: float = MAX_NEARBY_DISTANCE_KM,
    ) -> List[Place]:
        """
        Gets the places that are within `max_distance_km` of the specified coordinates.
        Never returns None; if there are no places within that threshold then an empty
        list is returned.

        Args:
            latitude:
                The observer's latitude

            longitude:
                The observer's longitude

            max_distance_km:
                The inclusive search radius, in kilometers

        Returns:
            List[Place], in catalog order
        """
        if not self._places:
            return []

        distances = haversine_distances_km(
            latitude,
            longitude,
            [x.latitude for x in self._places],
            [x.longitude for x in self._places],
        )
        nearby = [
            place for place, dist in zip(self._places, distances)
            if dist <= max_distance_km
        ]
        self.logger.debug(
            'Found %d of %d landmarks within %s km of (%s, %s)',
            len(nearby), len(self._places), max_distance_km, latitude, longitude
        )
        return nearby

    def bearings_from(
        self,
        latitude: float,
        longitude: float,
        places: Optional[Sequence[Place]] = None,
    ) -> List[PlaceBearing]:
        """
        Computes the bearing and distance from an observer to each place.

        Args:
            latitude:
                The observer's latitude

            longitude:
                The observer's longitude

            places:
                The places to locate; defaults to the whole catalog

        Returns:
            List[PlaceBearing], in the order the places were given
        """
        places = list(self._places if places is None else places)
        if not places:
            return []

        lats = [x.latitude for x in places]
        lons = [x.longitude for x in places]
        bearings = bearings_degrees(latitude, longitude, lats, lons)
        distances = haversine_distances_km(latitude, longitude, lats, lons)

        return [
            PlaceBearing(place, float(bearing), float(dist))
            for place, bearing, dist in zip(places, bearings, distances)
        ]
