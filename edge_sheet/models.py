"""
msgspec-based data models for the sheet gesture engine.
Every engine value is an immutable msgspec.Struct; state changes produce new
instances via msgspec.structs.replace.

This module provides:
- Edge and GestureAxis enums
- Geometry structs (Offset, PanelExtent)
- Per-event GestureSample and the threaded PanelState
- JSON helpers for recording and replaying gesture traces
"""

from enum import StrEnum
from typing import Optional, List, Tuple

import msgspec


class Edge(StrEnum):
    """Side of the viewport the sheet is anchored to and slides from"""
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"


class GestureAxis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# =============================================================================
# Geometry
# =============================================================================

class Offset(msgspec.Struct, frozen=True):
    """Position delta from the fully-open resting position, in pixels"""
    x: float = 0.0
    y: float = 0.0


class PanelExtent(msgspec.Struct, frozen=True):
    """Measured panel size. Zero means the panel has not been measured yet."""
    width: float = 0.0
    height: float = 0.0


# =============================================================================
# Gestures
# =============================================================================

class GestureSample(msgspec.Struct, frozen=True):
    """
    One update of an in-progress drag.

    Attributes:
        delta: Cumulative (dx, dy) since the drag started
        velocity: Instantaneous speed in px/ms, never negative
        direction: Per-axis sign (-1, 0, 1) of the latest movement step
        pointer_down: False only for the release sample
        initial: Point where the drag started
        current: Latest pointer position
    """
    delta: Tuple[float, float] = (0.0, 0.0)
    velocity: float = 0.0
    direction: Tuple[float, float] = (0.0, 0.0)
    pointer_down: bool = True
    initial: Tuple[float, float] = (0.0, 0.0)
    current: Tuple[float, float] = (0.0, 0.0)


class ClosedEvent(msgspec.Struct, frozen=True):
    """A committed close, carrying the release velocity to seed the animation"""
    velocity: float = 0.0


class PanelState(msgspec.Struct, frozen=True):
    is_open: bool
    edge: Edge = Edge.RIGHT
    extent: PanelExtent = msgspec.field(default_factory=PanelExtent)
    pending_release_velocity: Optional[float] = None
    mounted: bool = False


class GestureResolution(msgspec.Struct, frozen=True):
    """Everything one engine step produces for a single gesture sample"""
    state: PanelState
    offset: Offset
    opacity: float
    closed: Optional[ClosedEvent] = None
    immediate: bool = False
    velocity: float = 0.0


# =============================================================================
# Trace serialization
# =============================================================================

_samples_encoder = msgspec.json.Encoder()
_samples_decoder = msgspec.json.Decoder(List[GestureSample])


def encode_samples(samples: List[GestureSample]) -> bytes:
    """
    Encode a recorded gesture trace to JSON bytes.

    Example:
        >>> data = encode_samples([GestureSample(delta=(-20.0, 0.0))])
    """
    return _samples_encoder.encode(samples)


def decode_samples(data: bytes) -> List[GestureSample]:
    """
    Decode a gesture trace produced by encode_samples.

    Raises:
        msgspec.ValidationError: If the payload does not match GestureSample
    """
    return _samples_decoder.decode(data)
