"""
Box drawing primitives.

Border glyph sets and the width helpers for rendering bordered text.
"""

from dataclasses import dataclass, asdict, fields
from typing import Optional

from ...core.width import max_rune_width


@dataclass(frozen=True)
class BorderSpec:
    """
    Glyphs for the eight segments of a border.

    Edge fields may hold several glyphs, which repeat to fill the edge.
    Only the first character of a corner field is drawn.
    """
    top: str = ""
    bottom: str = ""
    left: str = ""
    right: str = ""
    top_left: str = ""
    top_right: str = ""
    bottom_left: str = ""
    bottom_right: str = ""

    def is_empty(self) -> bool:
        return self == NO_BORDER

    @property
    def top_size(self) -> int:
        return edge_width(self, "top")

    @property
    def right_size(self) -> int:
        return edge_width(self, "right")

    @property
    def bottom_size(self) -> int:
        return edge_width(self, "bottom")

    @property
    def left_size(self) -> int:
        return edge_width(self, "left")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BorderSpec":
        values = {f.name: data.get(f.name, "") for f in fields(cls)}
        return cls(**{name: v if isinstance(v, str) else "" for name, v in values.items()})


NO_BORDER = BorderSpec()

NORMAL_BORDER = BorderSpec(
    top="─", bottom="─", left="│", right="│",
    top_left="┌", top_right="┐", bottom_left="└", bottom_right="┘",
)

ROUNDED_BORDER = BorderSpec(
    top="─", bottom="─", left="│", right="│",
    top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯",
)

THICK_BORDER = BorderSpec(
    top="━", bottom="━", left="┃", right="┃",
    top_left="┏", top_right="┓", bottom_left="┗", bottom_right="┛",
)

DOUBLE_BORDER = BorderSpec(
    top="═", bottom="═", left="║", right="║",
    top_left="╔", top_right="╗", bottom_left="╚", bottom_right="╝",
)

# Keeps layout positioning of a border without drawing one
HIDDEN_BORDER = BorderSpec(
    top=" ", bottom=" ", left=" ", right=" ",
    top_left=" ", top_right=" ", bottom_left=" ", bottom_right=" ",
)

BORDERS = {
    "none": NO_BORDER,
    "normal": NORMAL_BORDER,
    "plain": NORMAL_BORDER,
    "light": NORMAL_BORDER,
    "rounded": ROUNDED_BORDER,
    "thick": THICK_BORDER,
    "heavy": THICK_BORDER,
    "double": DOUBLE_BORDER,
    "hidden": HIDDEN_BORDER,
    "invisible": HIDDEN_BORDER,
}

# Segments that make up each physical edge: line glyph plus its two corners
EDGE_SEGMENTS = {
    "top": ("top_left", "top", "top_right"),
    "right": ("top_right", "right", "bottom_right"),
    "bottom": ("bottom_left", "bottom", "bottom_right"),
    "left": ("top_left", "left", "bottom_left"),
}


def get_border(name: str) -> Optional[BorderSpec]:
    """Get a preset border by name (case-insensitive)."""
    return BORDERS.get(name.strip().lower())


def edge_width(spec: BorderSpec, edge: str) -> int:
    """
    Thickness of one edge of a border, in cells.

    Args:
        spec: Border glyphs
        edge: "top", "right", "bottom" or "left"

    Returns:
        Widest glyph among the edge and its two corners, 0 if all are empty
    """
    if edge not in EDGE_SEGMENTS:
        raise ValueError(f"Unknown edge: {edge!r}")
    return max(max_rune_width(getattr(spec, name)) for name in EDGE_SEGMENTS[edge])


def frame_size(spec: BorderSpec, sides: tuple) -> tuple[int, int]:
    """
    Cells a border adds around content.

    Args:
        spec: Border glyphs
        sides: Resolved (top, right, bottom, left) booleans

    Returns:
        Tuple of (horizontal, vertical) cell counts
    """
    top, right, bottom, left = sides
    horizontal = (spec.left_size if left else 0) + (spec.right_size if right else 0)
    vertical = (spec.top_size if top else 0) + (spec.bottom_size if bottom else 0)
    return horizontal, vertical
