"""
Smooths the displayed compass heading.

The animator is a two-state machine. While Idle it shows a fixed angle; a new heading
close to that angle is applied immediately, while a distant one starts an Animation
that linearly sweeps the shorter arc over a fixed duration. Headings that arrive
mid-animation are held until the animation finishes, at which point the most recent
one is evaluated against the angle the animation ended on.

Time is supplied by the caller through `advance()`, so frame callbacks, timers and
tests all drive it the same way.
"""

__all__ = ['Animating', 'HeadingAnimator', 'Idle']

import threading
from typing import NamedTuple, Optional, Union

from pydantic import validate_call

from glasscompass._const import ANIMATION_DURATION_MS, MIN_DISTANCE_TO_ANIMATE
from glasscompass.calc import mod, select_animation_target
from glasscompass.utils.mixins import LoggingMixin


class Idle(NamedTuple):
    """Displaying a fixed angle; None before the first heading has arrived"""
    angle: Optional[float]


class Animating(NamedTuple):
    """Sweeping linearly from `start` to `goal` (which may lie outside [0, 360))"""
    start: float
    goal: float
    elapsed_ms: float
    duration_ms: float

    @property
    def progress(self) -> float:
        return min(self.elapsed_ms / self.duration_ms, 1.0)

    @property
    def angle(self) -> float:
        return mod(self.start + (self.goal - self.start) * self.progress, 360.0)


AnimationState = Union[Idle, Animating]


class HeadingAnimator(LoggingMixin):
    """
    Tracks the heading that should be drawn on the current frame, which may lag behind
    the most recently sensed heading while an animation is running.

    Args:
        snap_threshold:
            Heading changes smaller than this many degrees are applied without animating

        duration_ms:
            How long an animation takes, in milliseconds
    """

    @validate_call
    def __init__(
        self,
        snap_threshold: float = MIN_DISTANCE_TO_ANIMATE,
        duration_ms: float = ANIMATION_DURATION_MS,
    ):
        super().__init__()
        if snap_threshold < 0:
            raise ValueError(f'snap_threshold must not be negative, got {snap_threshold}')
        if duration_ms <= 0:
            raise ValueError(f'duration_ms must be positive, got {duration_ms}')

        self.snap_threshold = snap_threshold
        self.duration_ms = duration_ms
        self._heading: Optional[float] = None
        self._state: AnimationState = Idle(None)
        self._lock = threading.RLock()

    def __repr__(self):
        return f'<HeadingAnimator {self.state!r}>'

    @property
    def heading(self) -> Optional[float]:
        """The most recently requested heading"""
        with self._lock:
            return self._heading

    @property
    def displayed_heading(self) -> Optional[float]:
        """The heading to draw on the current frame, or None before the first heading"""
        with self._lock:
            return self._state.angle

    @property
    def state(self) -> AnimationState:
        with self._lock:
            return self._state

    @property
    def is_animating(self) -> bool:
        with self._lock:
            return isinstance(self._state, Animating)

    def set_heading(self, degrees: float) -> None:
        """
        Requests a new heading. If no animation is running the display either jumps to
        it or starts animating toward it; otherwise the request is held until the
        running animation completes.

        Args:
            degrees:
                The new heading. Values outside of [0, 360) are wrapped.
        """
        with self._lock:
            self._heading = mod(degrees, 360.0)
            if isinstance(self._state, Idle):
                self._animate_to(self._heading)

    def advance(self, elapsed_ms: float) -> Optional[float]:
        """
        Moves the animation forward in time.

        Args:
            elapsed_ms:
                Milliseconds since the previous call

        Returns:
            The heading to draw after advancing
        """
        if elapsed_ms < 0:
            raise ValueError(f'elapsed_ms must not be negative, got {elapsed_ms}')

        with self._lock:
            state = self._state
            if isinstance(state, Animating):
                state = state._replace(elapsed_ms=state.elapsed_ms + elapsed_ms)
                if state.elapsed_ms >= state.duration_ms:
                    self._state = Idle(mod(state.goal, 360.0))
                    self.logger.debug('Animation to %s finished', self._state.angle)
                    if self._heading is not None:
                        self._animate_to(self._heading)
                else:
                    self._state = state

            return self._state.angle

    def _animate_to(self, end: float) -> None:
        """Runs the snap-or-animate decision from an Idle state. Caller holds the lock."""
        start = self._state.angle
        decision = select_animation_target(start, end, self.snap_threshold)
        if decision.snap or start is None:
            self._state = Idle(decision.target)
            return

        self.logger.debug('Animating heading from %s to %s', start, decision.target)
        self._state = Animating(start, decision.target, 0.0, self.duration_ms)
