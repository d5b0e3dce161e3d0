"""
Sheet component for Flet.
Anchors a panel to one edge of the page with a scrim overlay. The panel follows
drag gestures, settles open or closed on release, and can be flung shut.
"""

import logging
from typing import Callable, Optional, Union

import flet as ft

from ....config import get_config_manager
from ....constants import MAX_EXTENT
from ....controller import SheetController
from ....gestures import taper_offset
from ....models import Edge, Offset
from ....spring import OffsetSpring, Spring, SpringConfig
from ...theme.colors import SheetColors, Shadows
from .frame_runtime import FletSpringRuntime


class Sheet:
    """
    Edge-anchored sliding sheet.

    Features:
    - Opens from the left, top, right or bottom edge
    - Drag to pull it shut, or fling it closed
    - Scrim fades with panel travel (click to dismiss)
    - ESC key to dismiss
    - Overshoot past the open position is rendered with resistance

    The caller owns the open state: on_request_close is called when the user
    asks to close, and the caller answers with set_open(False).
    """

    # Below this page width horizontal sheets may span the whole viewport
    COMPACT_BREAKPOINT = 768

    HANDLE_WIDTH = 40
    HANDLE_HEIGHT = 4
    CORNER_RADIUS = 16

    def __init__(
        self,
        page: ft.Page,
        logger: logging.Logger,
        content: ft.Control,
        edge: Optional[Union[Edge, str]] = None,
        on_request_close: Optional[Callable[[], None]] = None,
        is_open: bool = False,
        close_on_click: Optional[bool] = None,
        extent: int = MAX_EXTENT,
        spring_config: Optional[SpringConfig] = None,
    ):
        """
        Initialize the sheet.

        Args:
            page: Flet page instance
            logger: Logger for sheet operations
            content: Control rendered inside the panel
            edge: Edge to anchor to (defaults to the configured edge)
            on_request_close: Called when the user asks to close. Defaults to
                closing the sheet directly.
            is_open: Initial open state
            close_on_click: Close when the scrim is clicked (defaults to config)
            extent: Requested panel size along its travel axis
            spring_config: Animation physics (defaults to config)
        """
        self.page = page
        self.logger = logger
        self.content = content
        self.requested_extent = extent
        self._attached = False
        self._previous_resized_handler = None
        self._keyboard_active = False

        if edge is None or close_on_click is None or spring_config is None:
            config = get_config_manager()
            edge = edge or config.get_edge()
            close_on_click = config.get_close_on_click() if close_on_click is None else close_on_click
            spring_config = spring_config or config.get_spring_config()

        self.edge = Edge(edge)

        self._build()

        self._position = FletSpringRuntime(
            page,
            OffsetSpring(config=spring_config),
            self._render_position,
            on_settled=self._on_position_settled,
            logger=logger,
        )
        self._opacity = FletSpringRuntime(
            page,
            Spring(config=spring_config),
            self._render_opacity,
            logger=logger,
        )

        self.controller = SheetController(
            self.edge,
            on_request_close or self._close_self,
            self._position,
            self._opacity,
            is_open=is_open,
            close_on_click=close_on_click,
            locks=self,
            logger=logger,
        )

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    @property
    def is_horizontal(self) -> bool:
        return self.edge in (Edge.LEFT, Edge.RIGHT)

    def _build(self) -> None:
        """Build scrim, panel and the gesture layer around them."""
        is_dark = self.page.theme_mode != ft.ThemeMode.LIGHT

        self._scrim = ft.Container(
            expand=True,
            bgcolor=SheetColors.SCRIM,
            opacity=0,
        )
        scrim_detector = ft.GestureDetector(
            content=self._scrim,
            on_tap_down=self._on_scrim_tap_down,
            on_tap_up=self._on_scrim_tap_up,
        )

        controls = [self.content]
        if not self.is_horizontal:
            handle = ft.Container(
                width=self.HANDLE_WIDTH,
                height=self.HANDLE_HEIGHT,
                border_radius=self.HANDLE_HEIGHT / 2,
                bgcolor=SheetColors.get_handle(is_dark),
            )
            row = ft.Row([handle], alignment=ft.MainAxisAlignment.CENTER)
            controls = [row, self.content] if self.edge == Edge.BOTTOM else [self.content, row]

        self._panel = ft.Container(
            content=ft.Column(controls=controls, spacing=12, expand=True),
            bgcolor=SheetColors.get_layer(is_dark),
            shadow=Shadows.LEVEL_5,
            padding=24,
            border_radius=self._corner_radius(),
        )
        # Stack positions apply to this wrapper, which also swallows taps on
        # the panel so they never reach the scrim
        self._panel_slot = ft.GestureDetector(
            content=self._panel,
            on_tap=lambda e: None,
            visible=False,  # Hidden until the first measurement
        )
        self._place_panel()

        self._stack = ft.Stack(
            controls=[scrim_detector, self._panel_slot],
            expand=True,
        )
        self._gesture_layer = ft.GestureDetector(
            content=self._stack,
            expand=True,
            on_pan_start=self._on_pan_start,
            on_pan_update=self._on_pan_update,
            on_pan_end=self._on_pan_end,
            visible=False,
        )

    def _corner_radius(self):
        if self.edge == Edge.BOTTOM:
            return ft.border_radius.only(top_left=self.CORNER_RADIUS, top_right=self.CORNER_RADIUS)
        if self.edge == Edge.TOP:
            return ft.border_radius.only(bottom_left=self.CORNER_RADIUS, bottom_right=self.CORNER_RADIUS)
        return None

    def _place_panel(self) -> None:
        """Pin the panel to its edge inside the Stack."""
        if self.is_horizontal:
            self._panel_slot.top = 0
            self._panel_slot.bottom = 0
        else:
            self._panel_slot.left = 0
            self._panel_slot.right = 0

    def _measure(self) -> None:
        """Size the panel from the viewport and report it to the controller."""
        page_width = self.page.width or 0
        page_height = self.page.height or 0

        if self.is_horizontal:
            limit = page_width if page_width < self.COMPACT_BREAKPOINT else MAX_EXTENT
            width = min(self.requested_extent, limit, page_width)
            height = page_height
            self._panel.width = width
        else:
            width = page_width
            height = min(self.requested_extent, MAX_EXTENT, page_height)
            self._panel.height = height

        self.controller.on_measure(width, height)
        self._panel_slot.visible = self.controller.state.mounted

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_position(self, offset: Offset) -> None:
        shown = taper_offset(offset, self.edge)
        if self.edge == Edge.LEFT:
            self._panel_slot.left = shown.x
        elif self.edge == Edge.RIGHT:
            self._panel_slot.right = -shown.x
        elif self.edge == Edge.TOP:
            self._panel_slot.top = shown.y
        else:
            self._panel_slot.bottom = -shown.y

    def _render_opacity(self, value: float) -> None:
        self._scrim.opacity = min(1.0, max(0.0, value))

    def _on_position_settled(self) -> None:
        # Stop intercepting input once fully closed
        if not self.controller.state.is_open:
            self._gesture_layer.visible = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self) -> None:
        """Insert the sheet into the page overlay and take the first measurement."""
        if self._attached:
            return

        self.page.overlay.append(self._gesture_layer)
        self._previous_resized_handler = self.page.on_resized
        self.page.on_resized = self._on_page_resized
        self._attached = True

        self._gesture_layer.visible = self.controller.state.is_open
        self._measure()
        self.page.update()
        self.logger.info(f"Sheet mounted on {self.edge} edge")

    def dispose(self) -> None:
        """Remove the sheet from the page and release its handlers."""
        if not self._attached:
            return

        try:
            # The gesture layer is going away; resolve any drag it was carrying
            if self.controller.is_dragging:
                self.controller.on_terminate()
            self.set_active(False)
            if self.page.on_resized == self._on_page_resized:
                self.page.on_resized = self._previous_resized_handler
        finally:
            if self._gesture_layer in self.page.overlay:
                self.page.overlay.remove(self._gesture_layer)
            self._attached = False
            self.page.update()
            self.logger.info("Sheet disposed")

    def set_open(self, is_open: bool) -> None:
        """Open or close the sheet (external state change)."""
        if is_open:
            self._gesture_layer.visible = True
        self.controller.set_open(is_open)
        self.page.update()

    @property
    def is_open(self) -> bool:
        return self.controller.state.is_open

    def _close_self(self) -> None:
        self.set_open(False)

    def set_active(self, active: bool) -> None:
        """Capture the keyboard exactly while open (Escape closes)."""
        if active and not self._keyboard_active:
            self.page.on_keyboard_event = self._handle_keyboard_event
            self._keyboard_active = True
        elif not active and self._keyboard_active:
            if self.page.on_keyboard_event == self._handle_keyboard_event:
                self.page.on_keyboard_event = None
            self._keyboard_active = False

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def _on_page_resized(self, e) -> None:
        self._measure()
        self.page.update()
        if self._previous_resized_handler is not None:
            self._previous_resized_handler(e)

    def _on_pan_start(self, e: ft.DragStartEvent) -> None:
        self.controller.on_press(e.global_x, e.global_y)

    def _on_pan_update(self, e: ft.DragUpdateEvent) -> None:
        self.controller.on_overlay_move()
        self.controller.on_move(e.global_x, e.global_y)
        self.page.update()

    def _on_pan_end(self, e: ft.DragEndEvent) -> None:
        self.controller.on_release()
        self._panel_slot.visible = self.controller.state.mounted
        self.page.update()

    def _on_scrim_tap_down(self, e) -> None:
        self.controller.on_overlay_press()

    def _on_scrim_tap_up(self, e) -> None:
        self.controller.on_overlay_release()

    def _handle_keyboard_event(self, e: ft.KeyboardEvent) -> None:
        """
        Handle keyboard events (ESC to close).

        Args:
            e: Keyboard event
        """
        if self.controller.handle_key(e.key):
            self.page.update()
