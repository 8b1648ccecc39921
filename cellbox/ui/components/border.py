"""
Border compositing.

Weaves a BorderSpec around a block of text: decides which sides and
corners are drawn, builds the top and bottom edges to the right cell
width, and styles each side with its own colors.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ...core.constants import EDGES
from ...core.width import display_width, get_lines, max_rune_width, rune_width
from ..colors import Color, ColorProfile, style_segment
from .box import BorderSpec, NO_BORDER


@dataclass(frozen=True)
class EdgeFlags:
    """
    Which sides of a border to draw.

    Each side is True, False or None (not set). With no side set, a border
    draws on all four sides; once any side is set, unset sides are off.
    """
    top: Optional[bool] = None
    right: Optional[bool] = None
    bottom: Optional[bool] = None
    left: Optional[bool] = None

    @classmethod
    def only(cls, *sides: str) -> "EdgeFlags":
        """Flags with the named sides on and every other side off."""
        return cls(**{side: side in sides for side in EDGES})

    def resolve(self, border: BorderSpec) -> tuple[bool, bool, bool, bool]:
        """
        Turn the tri-state flags into definite (top, right, bottom, left).

        Args:
            border: Border being drawn

        Returns:
            All True when a border is set and no side was touched, otherwise
            each side's explicit value with unset sides False
        """
        sides = (self.top, self.right, self.bottom, self.left)
        if border != NO_BORDER and all(side is None for side in sides):
            return True, True, True, True
        return tuple(bool(side) for side in sides)


@dataclass(frozen=True)
class EdgeColors:
    """Foreground and background color for each side (None for no color)."""
    top_fg: Optional[Color] = None
    right_fg: Optional[Color] = None
    bottom_fg: Optional[Color] = None
    left_fg: Optional[Color] = None
    top_bg: Optional[Color] = None
    right_bg: Optional[Color] = None
    bottom_bg: Optional[Color] = None
    left_bg: Optional[Color] = None

    @classmethod
    def uniform(cls, fg: Optional[Color] = None, bg: Optional[Color] = None) -> "EdgeColors":
        """Same colors on every side."""
        return cls(fg, fg, fg, fg, bg, bg, bg, bg)


def _first_char(text: str) -> str:
    return text[:1]


def resolve_glyphs(border: BorderSpec, top: bool, right: bool, bottom: bool, left: bool) -> BorderSpec:
    """
    Glyphs that will actually be drawn for a set of enabled sides.

    Enabled sides with no glyph get a space so they keep their cell. A
    corner is kept only when both of its sides are enabled (a space if its
    glyph is empty) and is cut down to its first character.
    """
    def corner(glyph: str, *adjoining: bool) -> str:
        if not all(adjoining):
            return ""
        return _first_char(glyph) or " "

    return replace(
        border,
        left=(border.left or " ") if left else border.left,
        right=(border.right or " ") if right else border.right,
        top_left=corner(border.top_left, top, left),
        top_right=corner(border.top_right, top, right),
        bottom_left=corner(border.bottom_left, bottom, left),
        bottom_right=corner(border.bottom_right, bottom, right),
    )


def render_horizontal_edge(left: str, middle: str, right: str, width: int) -> str:
    """
    Create a top or bottom edge.

    Args:
        left: Left corner glyph
        middle: Fill pattern, repeated glyph by glyph
        right: Right corner glyph
        width: Total cell width including corners

    Returns:
        Edge string exactly width cells wide, or "" if width < 1
    """
    if width < 1:
        return ""

    if max_rune_width(middle) == 0:
        middle = " "

    fill_width = width - display_width(left) - display_width(right)

    out = [left]
    used = 0
    j = 0
    while used < fill_width:
        glyph = middle[j]
        w = rune_width(glyph)
        if used + w > fill_width:
            # A wide glyph would overshoot; pad the last cells instead
            out.append(" " * (fill_width - used))
            break
        out.append(glyph)
        used += w
        j = (j + 1) % len(middle)
    out.append(right)

    return "".join(out)


def apply_border(
    content: str,
    border: BorderSpec,
    edges: Optional[EdgeFlags] = None,
    colors: Optional[EdgeColors] = None,
    profile: Optional[ColorProfile] = None,
) -> str:
    """
    Draw a border around a block of text.

    Args:
        content: Text block, lines separated by newlines (may contain ANSI styling)
        border: Border glyphs
        edges: Sides to draw, None for the default of all sides
        colors: Per-side colors, None for uncolored
        profile: Color profile for the border colors, None for truecolor

    Returns:
        The bordered block, or content unchanged when no border is drawn
    """
    edges = edges or EdgeFlags()
    colors = colors or EdgeColors()
    profile = profile or ColorProfile.TRUECOLOR

    has_top, has_right, has_bottom, has_left = edges.resolve(border)
    if border == NO_BORDER or not (has_top or has_right or has_bottom or has_left):
        return content

    lines, width = get_lines(content)
    glyphs = resolve_glyphs(border, has_top, has_right, has_bottom, has_left)

    # Only the left side widens the box; the right end of the top and
    # bottom edges is sized by their own corner.
    if has_left:
        width += max_rune_width(glyphs.left)

    out = []

    if has_top:
        top = render_horizontal_edge(
            glyphs.top_left, glyphs.top, glyphs.top_right,
            width + display_width(glyphs.top_right),
        )
        out.append(style_segment(top, colors.top_fg, colors.top_bg, profile) + "\n")

    left_index = 0
    right_index = 0
    for i, line in enumerate(lines):
        if has_left:
            glyph = glyphs.left[left_index]
            left_index = (left_index + 1) % len(glyphs.left)
            out.append(style_segment(glyph, colors.left_fg, colors.left_bg, profile))
        out.append(line)
        if has_right:
            glyph = glyphs.right[right_index]
            right_index = (right_index + 1) % len(glyphs.right)
            out.append(style_segment(glyph, colors.right_fg, colors.right_bg, profile))
        if i < len(lines) - 1:
            out.append("\n")

    if has_bottom:
        bottom = render_horizontal_edge(
            glyphs.bottom_left, glyphs.bottom, glyphs.bottom_right,
            width + display_width(glyphs.bottom_right),
        )
        out.append("\n" + style_segment(bottom, colors.bottom_fg, colors.bottom_bg, profile))

    return "".join(out)
