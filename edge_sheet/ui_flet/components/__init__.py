"""
Reusable Flet UI Components
"""

from .sheet import Sheet, FletSpringRuntime

__all__ = [
    'Sheet',
    'FletSpringRuntime',
]
