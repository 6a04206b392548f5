"""
Constants declarations for glasscompass
"""

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_KM = 6371.0

# Boxing the compass down to the half-wind level
NUMBER_OF_HALF_WINDS = 16
HALF_WIND_WIDTH = 360.0 / NUMBER_OF_HALF_WINDS

# Headings closer than this to the displayed heading are drawn without animating
MIN_DISTANCE_TO_ANIMATE = 15.0
ANIMATION_DURATION_MS = 250.0

# The sensors sit in the movable arm, which displaces readings by 0-12 degrees
ARM_DISPLACEMENT_DEGREES = 6.0

# Absolute head pitch beyond which the heading is considered unreliable
TOO_STEEP_PITCH_DEGREES = 70.0

# Landmarks within this radius are shown on the compass
MAX_NEARBY_DISTANCE_KM = 10.0

# Last known locations older than this are not used at startup
MAX_LOCATION_AGE_SECONDS = 30 * 60

# Magnetometer accuracy levels, lowest to highest
SENSOR_ACCURACY_UNRELIABLE = 0
SENSOR_ACCURACY_LOW = 1
SENSOR_ACCURACY_MEDIUM = 2
SENSOR_ACCURACY_HIGH = 3
