"""
User interface module.

Handles colors and bordered rendering of terminal text.
"""

from .colors import (
    Colors,
    Color,
    ColorProfile,
    rgb,
    detect_color_profile,
    style_segment,
)

__all__ = [
    # Colors
    "Colors",
    "Color",
    "ColorProfile",
    "rgb",
    "detect_color_profile",
    "style_segment",
]
