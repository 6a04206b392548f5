from glasscompass._version import __version__  # noqa: F401
from glasscompass.utils.logging import LOGGER
from glasscompass.animation import HeadingAnimator
from glasscompass.calc import (
    bearing_degrees, half_wind_index, haversine_distance_km, mod, select_animation_target,
    true_north_heading
)
from glasscompass.config import CompassSettings
from glasscompass.coordinates import GeoPoint, Location
from glasscompass.orientation import OnChangedListener, OrientationManager
from glasscompass.places import Landmarks, Place
from glasscompass.session import CompassSession, Tip
from glasscompass.speech import HeadingReader

__all__ = [
    'CompassSession',
    'CompassSettings',
    'GeoPoint',
    'HeadingAnimator',
    'HeadingReader',
    'Landmarks',
    'Location',
    'OnChangedListener',
    'OrientationManager',
    'Place',
    'Tip',
    'bearing_degrees',
    'half_wind_index',
    'haversine_distance_km',
    'mod',
    'select_animation_target',
    'true_north_heading',
    'LOGGER',
]
