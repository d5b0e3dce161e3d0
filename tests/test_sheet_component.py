"""
Tests for the Flet Sheet component against a stand-in page.
"""

import logging
from types import SimpleNamespace

import flet as ft
import pytest

from edge_sheet.models import Edge, Offset
from edge_sheet.spring import SpringConfig
from edge_sheet.ui_flet.components.sheet import Sheet


class FakePage:
    """Just enough of ft.Page for the sheet to mount and animate"""

    def __init__(self, width=1280, height=800):
        self.width = width
        self.height = height
        self.theme_mode = ft.ThemeMode.DARK
        self.overlay = []
        self.on_resized = None
        self.on_keyboard_event = None
        self.tasks = []
        self.updates = 0

    def update(self):
        self.updates += 1

    def run_task(self, handler, *args):
        self.tasks.append(handler)


def make_sheet(page, edge=Edge.LEFT, is_open=False, on_request_close=None):
    return Sheet(
        page,
        logging.getLogger("EdgeSheet.tests"),
        ft.Text("Menu"),
        edge=edge,
        on_request_close=on_request_close,
        is_open=is_open,
        close_on_click=True,
        spring_config=SpringConfig(),
    )


class TestMounting:
    def test_mount_measures_and_snaps_closed(self):
        page = FakePage()
        sheet = make_sheet(page, Edge.LEFT)

        sheet.mount()

        assert sheet._gesture_layer in page.overlay
        assert sheet.controller.state.mounted
        assert sheet.controller.state.extent.width == 400
        assert sheet._panel_slot.visible is True
        assert sheet._panel_slot.left == -400
        assert page.tasks == []

    def test_compact_page_uses_full_width(self):
        page = FakePage(width=360, height=640)
        sheet = make_sheet(page, Edge.RIGHT)
        sheet.mount()
        assert sheet.controller.state.extent.width == 360
        assert sheet._panel_slot.right == -360

    def test_vertical_sheet_is_capped(self):
        page = FakePage(width=1280, height=900)
        sheet = make_sheet(page, Edge.BOTTOM)
        sheet.mount()
        assert sheet.controller.state.extent.height == 400
        assert sheet._panel_slot.bottom == -400

    def test_dispose_removes_overlay_and_handlers(self):
        page = FakePage()
        sheet = make_sheet(page, Edge.TOP, is_open=True)
        sheet.mount()
        assert page.on_keyboard_event is not None

        sheet.dispose()

        assert sheet._gesture_layer not in page.overlay
        assert page.on_keyboard_event is None
        assert page.on_resized is None

    def test_dispose_mid_drag_resolves_the_gesture(self):
        page = FakePage()
        requests = []
        sheet = make_sheet(page, Edge.LEFT, is_open=True, on_request_close=lambda: requests.append(True))
        sheet.mount()
        sheet.controller.on_press(500, 300, timestamp=0)
        sheet.controller.on_move(400, 300, timestamp=10)
        assert sheet.controller.is_dragging

        sheet.dispose()

        assert not sheet.controller.is_dragging
        assert requests == [True]


class TestOpenClose:
    def test_opening_shows_layer_and_animates(self):
        page = FakePage()
        sheet = make_sheet(page, Edge.LEFT)
        sheet.mount()

        sheet.set_open(True)

        assert sheet.is_open
        assert sheet._gesture_layer.visible is True
        assert len(page.tasks) == 2  # position and opacity
        assert page.on_keyboard_event is not None

    def test_escape_requests_close(self):
        page = FakePage()
        requests = []
        sheet = make_sheet(page, Edge.RIGHT, is_open=True, on_request_close=lambda: requests.append(True))
        sheet.mount()

        page.on_keyboard_event(SimpleNamespace(key="Escape"))

        assert requests == [True]

    def test_default_close_handler_closes_the_sheet(self):
        page = FakePage()
        sheet = make_sheet(page, Edge.RIGHT, is_open=True)
        sheet.mount()

        page.on_keyboard_event(SimpleNamespace(key="Escape"))

        assert not sheet.is_open
        assert page.on_keyboard_event is None

    def test_settled_close_hides_gesture_layer(self):
        page = FakePage()
        sheet = make_sheet(page, Edge.LEFT, is_open=True)
        sheet.mount()
        sheet.set_open(False)

        sheet._on_position_settled()

        assert sheet._gesture_layer.visible is False


class TestRendering:
    @pytest.mark.parametrize(
        "edge, offset, attribute, expected",
        [
            (Edge.LEFT, Offset(x=100, y=0), "left", 40),
            (Edge.LEFT, Offset(x=-100, y=0), "left", -100),
            (Edge.RIGHT, Offset(x=-100, y=0), "right", 40),
            (Edge.TOP, Offset(x=0, y=-50), "top", -50),
            (Edge.BOTTOM, Offset(x=0, y=50), "bottom", -50),
        ],
    )
    def test_position_is_tapered_on_render(self, edge, offset, attribute, expected):
        sheet = make_sheet(FakePage(), edge)
        sheet._render_position(offset)
        assert getattr(sheet._panel_slot, attribute) == pytest.approx(expected)

    def test_opacity_is_clamped(self):
        sheet = make_sheet(FakePage())
        sheet._render_opacity(1.2)
        assert sheet._scrim.opacity == 1.0
        sheet._render_opacity(-0.1)
        assert sheet._scrim.opacity == 0.0
