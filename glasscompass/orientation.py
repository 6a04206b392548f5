"""
Tracks the user's heading, head pitch, location and compass accuracy.

A platform layer feeds raw readings into an OrientationManager through the
`on_*_changed` methods (typically from a sensor callback thread), and the manager
notifies its listeners in the order they were added. Readings are stored as immutable
snapshots so a reader never observes a half-applied update.
"""

__all__ = ['OnChangedListener', 'OrientationManager', 'OrientationSnapshot']

from datetime import datetime, timedelta
import threading
from typing import Callable, Dict, List, NamedTuple, Optional

from pydantic import validate_call

from glasscompass._const import (
    ARM_DISPLACEMENT_DEGREES, MAX_LOCATION_AGE_SECONDS, SENSOR_ACCURACY_HIGH
)
from glasscompass.calc import mod, true_north_heading
from glasscompass.coordinates import Location
from glasscompass.utils.mixins import LoggingMixin

DeclinationSource = Callable[[Location], Optional[float]]


class OnChangedListener:
    """
    Base class for objects that want to be notified of changes in the user's location,
    orientation, or the accuracy of the compass. Override only what you need.
    """

    def on_orientation_changed(self, manager: 'OrientationManager') -> None:
        """Called when the user's orientation changes"""

    def on_location_changed(self, manager: 'OrientationManager') -> None:
        """Called when the user's location changes"""

    def on_accuracy_changed(self, manager: 'OrientationManager') -> None:
        """Called when the accuracy of the compass changes"""


class OrientationSnapshot(NamedTuple):
    """A consistent view of everything the manager knows at one instant"""
    heading: float
    pitch: float
    location: Optional[Location]
    declination: Optional[float]
    has_interference: bool


class OrientationManager(LoggingMixin):
    """
    Converts raw magnetic headings into true-north headings and fans out changes to
    registered listeners.

    Args:
        declination_source:
            Callable returning the magnetic declination (degrees) at a location, or
            None if unknown. Without one, headings stay relative to magnetic north.

        arm_displacement:
            Degrees subtracted from every true-north heading to account for how the
            sensor arm is mounted

        max_location_age:
            A last known location older than this is ignored by `start()`
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        declination_source: Optional[DeclinationSource] = None,
        arm_displacement: float = ARM_DISPLACEMENT_DEGREES,
        max_location_age: timedelta = timedelta(seconds=MAX_LOCATION_AGE_SECONDS),
    ):
        super().__init__()
        self.declination_source = declination_source
        self.arm_displacement = arm_displacement
        self.max_location_age = max_location_age

        # dicts keep insertion order, which is the notification order
        self._listeners: Dict[OnChangedListener, None] = {}
        self._lock = threading.RLock()
        self._tracking = False
        self._snapshot = OrientationSnapshot(0.0, 0.0, None, None, False)

    def add_listener(self, listener: OnChangedListener) -> None:
        """Adds a listener; adding one that is already registered does nothing"""
        with self._lock:
            self._listeners.setdefault(listener, None)

    def remove_listener(self, listener: OnChangedListener) -> None:
        """Removes a listener; removing one that isn't registered does nothing"""
        with self._lock:
            self._listeners.pop(listener, None)

    @property
    def listeners(self) -> List[OnChangedListener]:
        with self._lock:
            return list(self._listeners)

    @property
    def is_tracking(self) -> bool:
        return self._tracking

    def start(
        self,
        last_known_location: Optional[Location] = None,
        now: Optional[datetime] = None,
    ) -> None:
        """
        Starts tracking. Sensor and location readings are ignored until this is called.

        Args:
            last_known_location:
                A cached fix to use until a fresh one arrives. Discarded if it is older
                than `max_location_age`.

            now:
                The reference time for the age check (defaults to the current time)
        """
        with self._lock:
            if self._tracking:
                return

            if last_known_location is not None:
                if last_known_location.age(now) < self.max_location_age:
                    self._set_location(last_known_location)
                else:
                    self.logger.info('Ignoring stale last known location %r', last_known_location)

            self._tracking = True
            self.logger.debug('Started tracking')

    def stop(self) -> None:
        """Stops tracking; listeners will no longer be notified"""
        with self._lock:
            if self._tracking:
                self._tracking = False
                self.logger.debug('Stopped tracking')

    def snapshot(self) -> OrientationSnapshot:
        return self._snapshot

    @property
    def heading(self) -> float:
        """The user's heading relative to true north, in degrees within [0, 360)"""
        return self._snapshot.heading

    @property
    def pitch(self) -> float:
        """The user's head tilt angle, in degrees within [-90, 90]"""
        return self._snapshot.pitch

    @property
    def location(self) -> Optional[Location]:
        return self._snapshot.location

    @property
    def has_location(self) -> bool:
        return self._snapshot.location is not None

    @property
    def declination(self) -> Optional[float]:
        return self._snapshot.declination

    @property
    def has_interference(self) -> bool:
        """Whether magnetic interference makes the compass unreliable"""
        return self._snapshot.has_interference

    def on_sensor_changed(self, magnetic_heading: float, pitch: float) -> None:
        """
        Accepts a heading (relative to magnetic north) and pitch already resolved from
        the device's rotation vector.

        Args:
            magnetic_heading:
                The heading, in degrees, relative to magnetic north

            pitch:
                The head tilt, in degrees
        """
        with self._lock:
            if not self._tracking:
                return

            heading = mod(
                true_north_heading(magnetic_heading, self._snapshot.declination)
                - self.arm_displacement,
                360.0
            )
            self._snapshot = self._snapshot._replace(heading=heading, pitch=float(pitch))

        self._notify('on_orientation_changed')

    def on_accuracy_changed(self, accuracy: int) -> None:
        """
        Accepts a magnetometer accuracy level; anything below high accuracy is treated
        as interference.

        Args:
            accuracy:
                One of the SENSOR_ACCURACY_* levels (0-3)
        """
        with self._lock:
            if not self._tracking:
                return

            interference = accuracy < SENSOR_ACCURACY_HIGH
            if interference != self._snapshot.has_interference:
                self.logger.info('Magnetic interference %s',
                                 'detected' if interference else 'cleared')
            self._snapshot = self._snapshot._replace(has_interference=interference)

        self._notify('on_accuracy_changed')

    def on_location_changed(self, location: Location) -> None:
        """
        Accepts a new location fix and refreshes the magnetic declination for it.

        Args:
            location:
                The new fix
        """
        with self._lock:
            if not self._tracking:
                return

            self._set_location(location)

        self._notify('on_location_changed')

    def _set_location(self, location: Location) -> None:
        """Replaces the location and its declination together. Caller holds the lock."""
        declination = None
        if self.declination_source is not None:
            declination = self.declination_source(location)

        self._snapshot = self._snapshot._replace(location=location, declination=declination)

    def _notify(self, method: str) -> None:
        for listener in self.listeners:
            getattr(listener, method)(self)
