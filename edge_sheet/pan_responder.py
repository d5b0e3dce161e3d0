"""
Pan responder for sheet drags.
Turns raw pointer positions into GestureSamples and decides, move by move,
whether the sheet should take over the gesture.
"""

import logging
import math
import time
from typing import Optional, Tuple

from .gestures import should_capture_gesture
from .models import Edge, GestureSample


def _now_ms() -> float:
    return time.perf_counter() * 1000


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


class GestureTracker:
    """
    Tracks one pointer drag at a time.

    A drag is granted on the first move whose dominant axis matches the
    sheet's travel axis. Before that, moves return None so the gesture can
    fall through to whatever sits under the sheet (e.g. a vertical scroll under
    a left sheet). Samples must be fed in arrival order: velocity and direction
    come from the step between consecutive samples.
    """

    def __init__(self, edge, logger: Optional[logging.Logger] = None):
        self.edge = Edge(edge)
        self.logger = logger or logging.getLogger(__name__)
        self._reset()

    def _reset(self) -> None:
        self._pressed = False
        self._granted = False
        self._initial: Tuple[float, float] = (0.0, 0.0)
        self._current: Tuple[float, float] = (0.0, 0.0)
        self._last_time = 0.0
        self._velocity = 0.0
        self._direction: Tuple[float, float] = (0.0, 0.0)

    @property
    def is_active(self) -> bool:
        """True while a granted drag is in progress"""
        return self._pressed and self._granted

    def press(self, x: float, y: float, timestamp: Optional[float] = None) -> None:
        """Start tracking; a press alone never grants the gesture"""
        self._reset()
        self._pressed = True
        self._initial = (x, y)
        self._current = (x, y)
        self._last_time = _now_ms() if timestamp is None else timestamp

    def move(self, x: float, y: float, timestamp: Optional[float] = None) -> Optional[GestureSample]:
        """
        Feed a pointer move.

        Returns:
            GestureSample with pointer_down=True once the drag is granted,
            None otherwise
        """
        if not self._pressed:
            return None

        now = _now_ms() if timestamp is None else timestamp
        step_x = x - self._current[0]
        step_y = y - self._current[1]
        elapsed = now - self._last_time

        if elapsed > 0:
            self._velocity = math.hypot(step_x, step_y) / elapsed
        if step_x or step_y:
            self._direction = (_sign(step_x), _sign(step_y))

        self._current = (x, y)
        self._last_time = now

        if not self._granted:
            self._granted = should_capture_gesture(self._initial, self._current, self.edge)
            if not self._granted:
                return None
            self.logger.debug(f"Gesture granted for {self.edge} sheet at {self._current}")

        return self._sample(pointer_down=True)

    def release(self, timestamp: Optional[float] = None) -> Optional[GestureSample]:
        """
        End the drag.

        Returns:
            Final GestureSample with pointer_down=False, or None if the drag was
            never granted
        """
        granted = self.is_active
        sample = self._sample(pointer_down=False) if granted else None
        self._reset()
        return sample

    def terminate(self) -> Optional[GestureSample]:
        """Another handler took the gesture over; resolve it like a release"""
        return self.release()

    def cancel(self) -> None:
        """Drop the in-progress drag; its remaining samples are ignored"""
        if self.is_active:
            self.logger.debug("In-progress gesture cancelled")
        self._reset()

    def _sample(self, pointer_down: bool) -> GestureSample:
        return GestureSample(
            delta=(self._current[0] - self._initial[0], self._current[1] - self._initial[1]),
            velocity=self._velocity,
            direction=self._direction,
            pointer_down=pointer_down,
            initial=self._initial,
            current=self._current,
        )
