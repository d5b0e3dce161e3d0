"""
Edge Sheet - Flet demo entry point
Opens a sheet from each edge of the window; drag, fling, click the scrim or
press ESC to close it.
"""

import logging
import flet as ft

from edge_sheet.config import get_config_manager
from edge_sheet.logger import setup_logger, set_console_level
from edge_sheet.models import Edge
from edge_sheet.ui_flet.components.sheet import Sheet
from edge_sheet.ui_flet.theme import SheetColors


def build_sheet_content(edge: Edge) -> ft.Control:
    """Placeholder content describing how to dismiss the sheet"""
    return ft.Column(
        controls=[
            ft.Text(f"{edge.value.title()} sheet", size=20, weight=ft.FontWeight.BOLD),
            ft.Text("Drag toward the edge or fling it to close."),
            ft.Text("Click the scrim or press ESC to dismiss."),
        ],
        spacing=8,
    )


async def main(page: ft.Page):
    """
    Main async entry point for the Flet application

    Args:
        page: The Flet page instance
    """
    page.title = "Edge Sheet"
    page.window.width = 900
    page.window.height = 700
    page.window.min_width = 400
    page.window.min_height = 400
    page.padding = 24

    page.theme_mode = ft.ThemeMode.DARK
    page.bgcolor = "#2E2E2E"
    page.theme = ft.Theme(color_scheme_seed=SheetColors.PRIMARY, use_material3=True)
    page.dark_theme = ft.Theme(color_scheme_seed=SheetColors.PRIMARY, use_material3=True)

    logger = logging.getLogger("EdgeSheet")
    logger.info("Edge Sheet demo starting...")

    sheets = {}

    def make_close_handler(edge: Edge):
        # The page owns the open state; sheets only request a close
        def request_close():
            logger.debug(f"Close requested by {edge} sheet")
            sheets[edge].set_open(False)
        return request_close

    for edge in Edge:
        sheets[edge] = Sheet(
            page,
            logger,
            build_sheet_content(edge),
            edge=edge,
            on_request_close=make_close_handler(edge),
        )

    def open_sheet(edge: Edge):
        def handler(e):
            for other in sheets.values():
                if other.is_open:
                    other.set_open(False)
            sheets[edge].set_open(True)
        return handler

    buttons = ft.Row(
        controls=[
            ft.FilledButton(f"Open {edge.value}", on_click=open_sheet(edge))
            for edge in Edge
        ],
        alignment=ft.MainAxisAlignment.CENTER,
        wrap=True,
    )

    page.add(
        ft.Container(
            content=buttons,
            alignment=ft.alignment.center,
            expand=True,
        )
    )

    for sheet in sheets.values():
        sheet.mount()

    page.update()
    logger.info("UI initialized successfully")


def configure_logging():
    """Setup logging and apply the configured console verbosity"""
    logger = setup_logger()
    try:
        set_console_level(logger, get_config_manager().get_console_level())
    except (OSError, ValueError) as e:
        logger.warning(f"Could not apply logging config: {e}")
    return logger


if __name__ == "__main__":
    configure_logging()
    ft.app(target=main)
