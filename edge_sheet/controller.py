"""
Sheet controller.
Feeds pointer events through the gesture engine and forwards the resulting
targets to the animation runtimes. This is the only place that knows about
animation, scroll locking and the close callback.
"""

import logging
from typing import Callable, Optional, Protocol

from msgspec.structs import replace

from .gestures import (
    apply_measurement,
    default_offset,
    mount_if_measured,
    resolve_gesture,
    settle_position,
)
from .models import Edge, GestureResolution, GestureSample, PanelExtent, PanelState
from .pan_responder import GestureTracker
from .spring import AnimationRuntime


class SheetLocks(Protocol):
    """Scroll lock and focus trap, active exactly while the sheet is open"""

    def set_active(self, active: bool) -> None:
        ...


class SheetController:
    """
    Drives one sheet.

    The caller owns the open/closed state: committed closes, overlay clicks and
    the Escape key only *request* a close through on_request_close, and the
    caller answers with set_open(False).
    """

    def __init__(
        self,
        edge,
        on_request_close: Callable[[], None],
        position: AnimationRuntime,
        opacity: AnimationRuntime,
        is_open: bool = False,
        close_on_click: bool = True,
        locks: Optional[SheetLocks] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.state = PanelState(is_open=is_open, edge=Edge(edge))
        self.on_request_close = on_request_close
        self.close_on_click = close_on_click
        self.position = position
        self.opacity = opacity
        self.locks = locks
        self.tracker = GestureTracker(self.state.edge, self.logger)
        self._click = False

        self.position.animate_to(default_offset(is_open, self.state.edge), immediate=True)
        self.opacity.animate_to(1.0 if is_open else 0.0, immediate=True)
        if self.locks is not None:
            self.locks.set_active(is_open)

    @property
    def is_dragging(self) -> bool:
        return self.tracker.is_active

    # -------------------------------------------------------------------------
    # Gestures
    # -------------------------------------------------------------------------

    def on_press(self, x: float, y: float, timestamp: Optional[float] = None) -> None:
        # A close the caller never answered must not seed this gesture's settle
        if self.state.pending_release_velocity is not None:
            self.state = replace(self.state, pending_release_velocity=None)
        self.tracker.press(x, y, timestamp)

    def on_move(self, x: float, y: float, timestamp: Optional[float] = None) -> None:
        sample = self.tracker.move(x, y, timestamp)
        if sample is not None:
            self._apply(sample)

    def on_release(self, timestamp: Optional[float] = None) -> None:
        self._finish(self.tracker.release(timestamp))

    def on_terminate(self) -> None:
        """The gesture was taken away before release; resolve it as released"""
        self._finish(self.tracker.terminate())

    def _finish(self, sample: Optional[GestureSample]) -> None:
        committed = False
        if sample is not None:
            committed = self._apply(sample).closed is not None

        # A measurement that arrived mid-drag still owes its re-snap. A committed
        # close keeps its release animation and velocity for the caller's answer.
        self.state, resnap = mount_if_measured(self.state)
        if resnap and not committed:
            self._settle(immediate=True)

    def _apply(self, sample: GestureSample) -> GestureResolution:
        resolution = resolve_gesture(sample, self.state)
        self.state = resolution.state

        self.position.animate_to(
            resolution.offset,
            immediate=resolution.immediate,
            initial_velocity=resolution.velocity,
        )
        self.opacity.animate_to(resolution.opacity, immediate=resolution.immediate)

        if resolution.closed is not None:
            self.logger.info(
                f"Close committed on {self.state.edge} sheet "
                f"(velocity {resolution.closed.velocity:.3f})"
            )
            self.on_request_close()

        return resolution

    # -------------------------------------------------------------------------
    # Open / close and measurement
    # -------------------------------------------------------------------------

    def set_open(self, is_open: bool) -> None:
        """
        Apply an external open/close state change.

        A drag still in progress is cancelled so its stale samples cannot
        override the new resting target.
        """
        if is_open == self.state.is_open:
            return

        if self.tracker.is_active:
            self.logger.debug("Open state changed mid-drag, dropping gesture")
        self.tracker.cancel()

        self.state = replace(self.state, is_open=is_open)
        self.logger.info(f"Sheet {'opening' if is_open else 'closing'} ({self.state.edge})")
        self._settle()

        if self.locks is not None:
            self.locks.set_active(is_open)

    def on_measure(self, width: float, height: float) -> None:
        """Record the panel's rendered size"""
        extent = PanelExtent(width=width, height=height)
        if extent == self.state.extent:
            return

        self.state, resnap = apply_measurement(self.state, extent, dragging=self.is_dragging)
        if resnap:
            self.logger.debug(f"First measurement {width}x{height}, snapping without animation")
        if not self.is_dragging:
            self._settle(immediate=resnap)

    def _settle(self, immediate: bool = False) -> None:
        self.state, target, velocity = settle_position(self.state)
        self.position.animate_to(target, immediate=immediate, initial_velocity=velocity)
        self.opacity.animate_to(1.0 if self.state.is_open else 0.0)

    # -------------------------------------------------------------------------
    # Overlay click and keyboard
    # -------------------------------------------------------------------------

    def on_overlay_press(self) -> None:
        self._click = True

    def on_overlay_move(self) -> None:
        self._click = False

    def on_overlay_release(self) -> None:
        """Close on a genuine click, i.e. press and release with no move between"""
        click, self._click = self._click, False
        if click and self.close_on_click:
            self.logger.info("Overlay clicked, requesting close")
            self.on_request_close()

    def handle_key(self, key: str) -> bool:
        """
        Returns:
            True if the key was consumed
        """
        if key == "Escape" and self.state.is_open:
            self.logger.info("ESC key pressed, requesting close")
            self.on_request_close()
            return True
        return False
