"""
Gesture resolution engine.
Pure functions mapping a gesture sample and the current panel state to a target
offset, a close decision and an overlay opacity.

Nothing in here keeps state: callers thread PanelState through every call
(state in, (state, output) out).
"""

from typing import Iterable, List, Optional, Tuple

from msgspec.structs import replace

from .constants import (
    DEFAULT_EXTENT,
    EDGE_TRAVEL,
    FLICK_VELOCITY_THRESHOLD,
    MIN_OPACITY_EXTENT,
    TAPER_FACTOR,
    EdgeTravel,
)
from .models import (
    ClosedEvent,
    Edge,
    GestureAxis,
    GestureResolution,
    GestureSample,
    Offset,
    PanelExtent,
    PanelState,
)

Point = Tuple[float, float]


def _travel(edge) -> EdgeTravel:
    # Edge() raises ValueError for anything that is not a known edge
    return EDGE_TRAVEL[Edge(edge)]


# =============================================================================
# Render-time helpers
# =============================================================================

def taper(value: float, edge) -> float:
    """
    Add friction to motion past the open resting point.

    Motion toward closed passes through unchanged; overshoot is scaled by
    TAPER_FACTOR. Only ever applied to rendered values, never to targets.
    """
    if _travel(edge).closing_sign < 0:
        if value <= 0:
            return value
        return value * TAPER_FACTOR

    if value >= 0:
        return value
    return value * TAPER_FACTOR


def taper_offset(offset: Offset, edge) -> Offset:
    return Offset(x=taper(offset.x, edge), y=taper(offset.y, edge))


def default_offset(is_open: bool, edge, extent: Optional[PanelExtent] = None) -> Offset:
    """
    Resting offset for a fully open or fully closed sheet.

    Args:
        is_open: Whether the sheet should rest open
        edge: Edge the sheet is anchored to
        extent: Measured panel size; unmeasured sizes fall back to DEFAULT_EXTENT

    Returns:
        Offset with only the travel-axis component set
    """
    travel = _travel(edge)
    if is_open:
        return Offset()

    size = travel.extent_of(extent) if extent is not None else 0
    if size <= 0:
        size = DEFAULT_EXTENT
    return travel.offset(travel.closing_sign * size)


# =============================================================================
# Overlay opacity
# =============================================================================

def resolve_opacity(sample: GestureSample, extent: PanelExtent, is_open: bool, edge) -> float:
    """
    Overlay opacity for a gesture sample.

    Fades linearly toward 0 as the drag approaches full travel in the closing
    direction. Dragging the other way never brightens past 1.
    """
    if not is_open:
        return 0.0

    if not sample.pointer_down:
        return 1.0

    travel = _travel(edge)
    d = travel.component(sample.delta)
    if not travel.moves_toward_closed(d):
        return 1.0

    size = max(travel.extent_of(extent), MIN_OPACITY_EXTENT)
    return max(0.0, 1.0 - abs(d) / size)


# =============================================================================
# Axis classification
# =============================================================================

def get_direction(initial: Point, current: Point) -> Optional[GestureAxis]:
    """
    Dominant axis of a gesture, or None when both axes moved equally
    (which is what a plain click produces).
    """
    x_diff = abs(initial[0] - current[0])
    y_diff = abs(initial[1] - current[1])

    if x_diff == y_diff:
        return None

    if x_diff > y_diff:
        return GestureAxis.HORIZONTAL

    return GestureAxis.VERTICAL


def should_capture_gesture(initial: Point, current: Point, edge) -> bool:
    """Capture only gestures moving along the sheet's travel axis"""
    axis = get_direction(initial, current)
    return axis is not None and axis == _travel(edge).gesture_axis


# =============================================================================
# Position resolution
# =============================================================================

def resolve_position(sample: GestureSample, state: PanelState) -> Tuple[Offset, Optional[ClosedEvent]]:
    """
    Target offset for a gesture sample, and the close decision on release.

    While the pointer is down the sheet tracks the raw delta 1:1. On release a
    fast enough flick in the closing direction, or a drag past half the
    panel's extent, commits a close; anything else settles back open.

    Returns:
        (target offset, ClosedEvent if a close was committed else None)
    """
    travel = _travel(state.edge)
    d = travel.component(sample.delta)

    if sample.pointer_down:
        return travel.offset(d), None

    if sample.velocity > FLICK_VELOCITY_THRESHOLD and travel.is_flick_closing(sample.direction):
        return travel.offset(d), ClosedEvent(velocity=sample.velocity)

    if travel.moves_toward_closed(d) or not state.is_open:
        if abs(d) > travel.extent_of(state.extent) / 2:
            return travel.offset(d), ClosedEvent(velocity=sample.velocity)

    return Offset(), None


def commit_close(state: PanelState, event: ClosedEvent) -> PanelState:
    """Hand the release velocity over to the next settle"""
    return replace(state, pending_release_velocity=event.velocity)


def settle_position(state: PanelState) -> Tuple[PanelState, Offset, float]:
    """
    Resting target for the current open/closed state.

    Consumes the pending release velocity so it seeds exactly one animation.

    Returns:
        (state with the velocity cleared, target offset, initial velocity)
    """
    velocity = state.pending_release_velocity or 0.0
    target = default_offset(state.is_open, state.edge, state.extent)
    return replace(state, pending_release_velocity=None), target, velocity


def resolve_gesture(sample: GestureSample, state: PanelState) -> GestureResolution:
    """Run one full engine step for a gesture sample"""
    offset, closed = resolve_position(sample, state)
    if closed is not None:
        state = commit_close(state, closed)

    opacity = resolve_opacity(sample, state.extent, state.is_open, state.edge)

    return GestureResolution(
        state=state,
        offset=offset,
        opacity=opacity,
        closed=closed,
        immediate=sample.pointer_down,
        # Only the committing sample carries velocity; a pending one belongs to the settle
        velocity=closed.velocity if closed is not None else 0.0,
    )


def apply_measurement(state: PanelState, extent: PanelExtent, dragging: bool = False) -> Tuple[PanelState, bool]:
    """
    Store a new measurement and decide whether the one-time re-snap is due.

    The re-snap happens the first time the travel-axis extent is known while no
    drag is in progress; it marks the panel mounted.

    Returns:
        (updated state, True when the caller must jump to the resting offset
        without animating)
    """
    state = replace(state, extent=extent)
    return mount_if_measured(state, dragging)


def mount_if_measured(state: PanelState, dragging: bool = False) -> Tuple[PanelState, bool]:
    if state.mounted or dragging:
        return state, False

    if _travel(state.edge).extent_of(state.extent) <= 0:
        return state, False

    return replace(state, mounted=True), True


def replay_samples(state: PanelState, samples: Iterable[GestureSample]) -> Tuple[PanelState, List[GestureResolution]]:
    """
    Re-run a recorded sequence of samples in order.

    The same sequence against the same starting state always yields the same
    resolutions.
    """
    resolutions = []
    for sample in samples:
        resolution = resolve_gesture(sample, state)
        state = resolution.state
        resolutions.append(resolution)
    return state, resolutions
