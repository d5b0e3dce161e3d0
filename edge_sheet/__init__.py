from .models import (
    Edge,
    GestureAxis,
    Offset,
    PanelExtent,
    GestureSample,
    ClosedEvent,
    PanelState,
    GestureResolution,
    encode_samples,
    decode_samples,
)
from .gestures import (
    taper,
    taper_offset,
    default_offset,
    resolve_opacity,
    get_direction,
    should_capture_gesture,
    resolve_position,
    resolve_gesture,
    commit_close,
    settle_position,
    apply_measurement,
    replay_samples,
)
from .pan_responder import GestureTracker
from .spring import AnimationRuntime, Spring, OffsetSpring, SpringConfig
from .controller import SheetController, SheetLocks
from .logger import setup_logger
from .version import __version__

# Flet is only needed for the UI component; import it from
# edge_sheet.ui_flet.components.sheet when rendering.

__all__ = [
    "Edge",
    "GestureAxis",
    "Offset",
    "PanelExtent",
    "GestureSample",
    "ClosedEvent",
    "PanelState",
    "GestureResolution",
    "encode_samples",
    "decode_samples",
    "taper",
    "taper_offset",
    "default_offset",
    "resolve_opacity",
    "get_direction",
    "should_capture_gesture",
    "resolve_position",
    "resolve_gesture",
    "commit_close",
    "settle_position",
    "apply_measurement",
    "replay_samples",
    "GestureTracker",
    "AnimationRuntime",
    "Spring",
    "OffsetSpring",
    "SpringConfig",
    "SheetController",
    "SheetLocks",
    "setup_logger",
    "__version__",
]
