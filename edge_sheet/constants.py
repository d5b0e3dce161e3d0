from typing import Callable, NamedTuple, Tuple

from .models import Edge, GestureAxis, Offset, PanelExtent


# Overshoot past the open resting point is scaled by this factor when rendered
TAPER_FACTOR = 0.4

# px/ms; a release faster than this in the closing direction is a flick
FLICK_VELOCITY_THRESHOLD = 0.2

# Used for the closed position until the panel has been measured
DEFAULT_EXTENT = 400

# Opacity divides by the extent; never by less than this
MIN_OPACITY_EXTENT = 1.0

# Upper bound for the panel's travel-axis size (desktop layouts)
MAX_EXTENT = 400

ANIMATION_CONFIG = {
    "mass": 1.0,
    "tension": 185.0,
    "friction": 26.0,
}


class EdgeTravel(NamedTuple):
    """How a sheet anchored to one edge moves"""
    axis: int  # index into (x, y) pairs
    gesture_axis: GestureAxis
    closing_sign: int
    is_flick_closing: Callable[[Tuple[float, float]], bool]

    def component(self, pair: Tuple[float, float]) -> float:
        return pair[self.axis]

    def extent_of(self, extent: PanelExtent) -> float:
        return extent.width if self.axis == 0 else extent.height

    def offset(self, value: float) -> Offset:
        if self.axis == 0:
            return Offset(x=value, y=0.0)
        return Offset(x=0.0, y=value)

    def moves_toward_closed(self, value: float) -> bool:
        return value * self.closing_sign > 0


# The flick predicates differ per edge on purpose; keep them literal.
EDGE_TRAVEL = {
    Edge.LEFT: EdgeTravel(0, GestureAxis.HORIZONTAL, -1, lambda d: d[0] < 0),
    Edge.TOP: EdgeTravel(1, GestureAxis.VERTICAL, -1, lambda d: d[1] <= -1),
    Edge.RIGHT: EdgeTravel(0, GestureAxis.HORIZONTAL, 1, lambda d: d[0] >= 1),
    Edge.BOTTOM: EdgeTravel(1, GestureAxis.VERTICAL, 1, lambda d: d[1] > 0),
}
