"""Tunable settings for a compass session"""

__all__ = ['CompassSettings']

from pydantic import validate_call

from glasscompass._const import (
    ANIMATION_DURATION_MS, ARM_DISPLACEMENT_DEGREES, MAX_NEARBY_DISTANCE_KM,
    MIN_DISTANCE_TO_ANIMATE, TOO_STEEP_PITCH_DEGREES
)


class CompassSettings:
    """
    Groups the device calibration and display tunables of a compass session.

    Args:
        snap_threshold:
            Heading changes below this many degrees are drawn without animating

        animation_duration_ms:
            The length of a heading animation, in milliseconds

        arm_displacement:
            Degrees subtracted from each true-north heading for the sensor arm mounting

        too_steep_pitch:
            Absolute head pitch, in degrees, beyond which the heading is unreliable

        nearby_radius_km:
            Landmarks within this distance of the user are shown
    """

    @validate_call
    def __init__(
        self,
        snap_threshold: float = MIN_DISTANCE_TO_ANIMATE,
        animation_duration_ms: float = ANIMATION_DURATION_MS,
        arm_displacement: float = ARM_DISPLACEMENT_DEGREES,
        too_steep_pitch: float = TOO_STEEP_PITCH_DEGREES,
        nearby_radius_km: float = MAX_NEARBY_DISTANCE_KM,
    ):
        if snap_threshold < 0:
            raise ValueError(f'snap_threshold must not be negative, got {snap_threshold}')
        if animation_duration_ms <= 0:
            raise ValueError(
                f'animation_duration_ms must be positive, got {animation_duration_ms}'
            )
        if not 0 <= too_steep_pitch <= 90:
            raise ValueError(f'too_steep_pitch must be within [0, 90], got {too_steep_pitch}')
        if nearby_radius_km < 0:
            raise ValueError(f'nearby_radius_km must not be negative, got {nearby_radius_km}')

        self.snap_threshold = snap_threshold
        self.animation_duration_ms = animation_duration_ms
        self.arm_displacement = arm_displacement
        self.too_steep_pitch = too_steep_pitch
        self.nearby_radius_km = nearby_radius_km

    def __eq__(self, other):
        if not isinstance(other, CompassSettings):
            return False

        return vars(self) == vars(other)

    def __repr__(self):
        params = ', '.join(f'{k}={v!r}' for k, v in vars(self).items())
        return f'<CompassSettings({params})>'
