"""
Sheet Component Package

Edge-anchored sheet that follows drag gestures and can be flung closed.

Usage Example:
    ```python
    from edge_sheet.ui_flet.components.sheet import Sheet

    def request_close():
        sheet.set_open(False)

    sheet = Sheet(page, logger, ft.Text("Menu"), edge="left",
                  on_request_close=request_close)
    sheet.mount()
    sheet.set_open(True)
    ```
"""

from .frame_runtime import FletSpringRuntime
from .sheet import Sheet

__all__ = [
    "FletSpringRuntime",
    "Sheet",
]
