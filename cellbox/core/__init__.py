"""
Core helpers shared by the UI layer.

Cell-width measurement and constants; nothing here writes to the terminal.
"""

from .width import (
    strip_ansi,
    rune_width,
    max_rune_width,
    display_width,
    get_lines,
)

__all__ = [
    "strip_ansi",
    "rune_width",
    "max_rune_width",
    "display_width",
    "get_lines",
]
