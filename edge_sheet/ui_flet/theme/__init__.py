"""Theme module for the edge sheet Flet UI"""

from .colors import SheetColors, Shadows

__all__ = [
    'SheetColors',
    'Shadows',
]
