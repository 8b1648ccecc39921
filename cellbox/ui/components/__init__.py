"""
Reusable visual building blocks.

Border glyph sets and the compositor that draws them around text.
"""

from .box import (
    BorderSpec,
    NO_BORDER,
    NORMAL_BORDER,
    ROUNDED_BORDER,
    THICK_BORDER,
    DOUBLE_BORDER,
    HIDDEN_BORDER,
    BORDERS,
    get_border,
    edge_width,
    frame_size,
)
from .border import (
    EdgeFlags,
    EdgeColors,
    resolve_glyphs,
    render_horizontal_edge,
    apply_border,
)

__all__ = [
    # Border glyphs
    "BorderSpec",
    "NO_BORDER",
    "NORMAL_BORDER",
    "ROUNDED_BORDER",
    "THICK_BORDER",
    "DOUBLE_BORDER",
    "HIDDEN_BORDER",
    "BORDERS",
    "get_border",
    "edge_width",
    "frame_size",
    # Compositing
    "EdgeFlags",
    "EdgeColors",
    "resolve_glyphs",
    "render_horizontal_edge",
    "apply_border",
]
