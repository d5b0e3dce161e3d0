"""
Sheet color palette and elevation
"""

import flet as ft


class SheetColors:
    """Material Design 3 surfaces used by the sheet"""

    PRIMARY = "#2D6E88"

    # Overlay behind the sheet; its opacity is animated separately
    SCRIM = "rgba(0, 0, 0, 0.5)"

    @staticmethod
    def get_layer(is_dark: bool = True) -> str:
        return "#3A3A3A" if is_dark else "#FFFFFF"

    @staticmethod
    def get_handle(is_dark: bool = True) -> str:
        return "#5A5A5A" if is_dark else "#79747E"


class Shadows:
    """Elevation for the sheet surface"""

    # Modals and top-level overlays (multi-layer)
    LEVEL_5 = [
        ft.BoxShadow(
            spread_radius=2,
            blur_radius=32,
            offset=ft.Offset(0, 12),
            color="rgba(0, 0, 0, 0.32)",
        ),
        ft.BoxShadow(
            spread_radius=0,
            blur_radius=8,
            offset=ft.Offset(0, 4),
            color="rgba(0, 0, 0, 0.16)",
        ),
    ]
