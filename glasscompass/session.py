"""
Ties orientation tracking, landmarks, heading animation and speech into the state a
compass display draws from.
"""

__all__ = ['CompassSession', 'PlacePin', 'Tip']

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from glasscompass.animation import HeadingAnimator
from glasscompass.config import CompassSettings
from glasscompass.directions import format_place_label
from glasscompass.orientation import OnChangedListener, OrientationManager
from glasscompass.places import Landmarks, Place
from glasscompass.speech import HeadingReader, SpeechSink
from glasscompass.utils.mixins import LoggingMixin


class Tip(Enum):
    """Messages shown when the heading can't be trusted, highest priority first"""
    MAGNETIC_INTERFERENCE = 'Magnetic interference'
    PITCH_TOO_STEEP = 'Head angle too steep'


class PlacePin(NamedTuple):
    """A nearby place as it should be pinned on the compass"""
    place: Place
    bearing: float
    distance_km: float
    label: str


class CompassSession(LoggingMixin, OnChangedListener):
    """
    Listens to an OrientationManager and keeps the displayed heading, the nearby
    places and the warning tip up to date.

    Args:
        manager:
            The source of heading, pitch, location and accuracy changes

        landmarks:
            The catalog to search for nearby places

        settings:
            Display and calibration tunables. If omitted, defaults are used along with
            the manager's own arm displacement.

        sink:
            Where `read_heading_aloud()` sends its text
    """

    def __init__(
        self,
        manager: OrientationManager,
        landmarks: Landmarks,
        settings: Optional[CompassSettings] = None,
        sink: Optional[SpeechSink] = None,
    ):
        super().__init__()
        self.manager = manager
        if settings is None:
            # keep whatever arm displacement the manager was built with
            settings = CompassSettings(arm_displacement=manager.arm_displacement)
        else:
            manager.arm_displacement = settings.arm_displacement
        self.settings = settings
        self.landmarks = landmarks
        self.animator = HeadingAnimator(
            self.settings.snap_threshold, self.settings.animation_duration_ms
        )
        self.reader = HeadingReader(sink) if sink is not None else None

        self._nearby_places: Tuple[Place, ...] = ()
        self._too_steep = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def open(self) -> None:
        """Registers with the manager and starts tracking"""
        self.manager.add_listener(self)
        self.manager.start()

    def close(self) -> None:
        """Stops tracking and unregisters from the manager"""
        self.manager.stop()
        self.manager.remove_listener(self)

    @property
    def nearby_places(self) -> Tuple[Place, ...]:
        return self._nearby_places

    @property
    def too_steep(self) -> bool:
        return self._too_steep

    @property
    def tip(self) -> Optional[Tip]:
        """The single warning to show, if any; interference outranks head pitch"""
        if self.manager.has_interference:
            return Tip.MAGNETIC_INTERFERENCE

        if self._too_steep:
            return Tip.PITCH_TOO_STEEP

        return None

    def on_orientation_changed(self, manager: OrientationManager) -> None:
        snapshot = manager.snapshot()
        self.animator.set_heading(snapshot.heading)

        too_steep = abs(snapshot.pitch) > self.settings.too_steep_pitch
        if too_steep != self._too_steep:
            self.logger.debug('Pitch too steep: %s', too_steep)
            self._too_steep = too_steep

    def on_location_changed(self, manager: OrientationManager) -> None:
        location = manager.location
        if location is None:
            return

        self._nearby_places = tuple(
            self.landmarks.nearby(
                location.latitude, location.longitude, self.settings.nearby_radius_km
            )
        )

    def on_accuracy_changed(self, manager: OrientationManager) -> None:
        self.logger.debug('Compass tip is now %s', self.tip)

    def place_pins(self) -> List[PlacePin]:
        """
        Locates the nearby places relative to the user's current location.

        Returns:
            List[PlacePin], empty if the location is unknown
        """
        location = self.manager.location
        places = self._nearby_places
        if location is None or not places:
            return []

        return [
            PlacePin(x.place, x.bearing, x.distance_km,
                     format_place_label(x.place.name, x.distance_km))
            for x in self.landmarks.bearings_from(location.latitude, location.longitude, places)
        ]

    def read_heading_aloud(self) -> str:
        """
        Speaks the current heading.

        Returns:
            The text that was spoken
        """
        if self.reader is None:
            raise RuntimeError('No speech sink was provided to this session')

        return self.reader.read_aloud(self.manager.heading)
