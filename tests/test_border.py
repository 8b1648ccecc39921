"""
Border compositing tests.

Tests which sides and corners get drawn, edge widths and per-side colors.
Run with: pytest tests/test_border.py -v
"""

from dataclasses import replace

import pytest

from cellbox.core.width import display_width
from cellbox.ui.colors import Color, ColorProfile
from cellbox.ui.components.box import (
    NO_BORDER,
    NORMAL_BORDER,
    ROUNDED_BORDER,
    HIDDEN_BORDER,
)
from cellbox.ui.components.border import (
    EdgeFlags,
    EdgeColors,
    resolve_glyphs,
    render_horizontal_edge,
    apply_border,
)


class TestEdgeFlags:
    """Tests for EdgeFlags.resolve() - the all-or-nothing default."""

    def test_unset_with_border_enables_all(self):
        assert EdgeFlags().resolve(NORMAL_BORDER) == (True, True, True, True)

    def test_unset_without_border_enables_none(self):
        assert EdgeFlags().resolve(NO_BORDER) == (False, False, False, False)

    def test_touching_one_side_disables_the_rest(self):
        assert EdgeFlags(top=True).resolve(NORMAL_BORDER) == (True, False, False, False)

    def test_explicit_false_counts_as_touched(self):
        assert EdgeFlags(left=False).resolve(NORMAL_BORDER) == (False, False, False, False)

    def test_only(self):
        assert EdgeFlags.only("top", "bottom") == EdgeFlags(
            top=True, right=False, bottom=True, left=False
        )


class TestResolveGlyphs:
    """Tests for resolve_glyphs() - corner elision and space substitution."""

    def test_all_sides_keep_corners(self):
        assert resolve_glyphs(NORMAL_BORDER, True, True, True, True) == NORMAL_BORDER

    def test_top_only_drops_corners(self):
        glyphs = resolve_glyphs(NORMAL_BORDER, True, False, False, False)
        assert glyphs.top_left == ""
        assert glyphs.top_right == ""
        assert glyphs.bottom_left == ""
        assert glyphs.bottom_right == ""

    def test_corner_needs_both_sides(self):
        glyphs = resolve_glyphs(NORMAL_BORDER, True, True, False, False)
        assert glyphs.top_right == "┐"
        assert glyphs.top_left == ""
        assert glyphs.bottom_right == ""

    def test_empty_sides_become_spaces(self):
        spec = replace(NORMAL_BORDER, left="", right="")
        glyphs = resolve_glyphs(spec, True, True, True, True)
        assert glyphs.left == " "
        assert glyphs.right == " "

    def test_empty_corner_becomes_space(self):
        spec = replace(NORMAL_BORDER, top_left="")
        assert resolve_glyphs(spec, True, True, True, True).top_left == " "

    def test_corner_limited_to_first_char(self):
        spec = replace(NORMAL_BORDER, bottom_right="┘┘┘")
        assert resolve_glyphs(spec, True, True, True, True).bottom_right == "┘"


class TestRenderHorizontalEdge:
    """Tests for render_horizontal_edge()."""

    def test_corners_and_fill(self):
        assert render_horizontal_edge("┌", "─", "┐", 5) == "┌───┐"

    @pytest.mark.parametrize("width", [2, 3, 7, 20])
    def test_width_matches_target(self, width):
        edge = render_horizontal_edge("┌", "─", "┐", width)
        assert display_width(edge) == width

    def test_pattern_cycles_in_order(self):
        assert render_horizontal_edge("", "123", "", 7) == "1231231"

    def test_empty_middle_is_space(self):
        assert render_horizontal_edge("", "", "", 3) == "   "

    @pytest.mark.parametrize("width", [0, -1, -10])
    def test_no_width_no_edge(self, width):
        assert render_horizontal_edge("┌", "─", "┐", width) == ""

    def test_wide_fill_does_not_overshoot(self):
        edge = render_horizontal_edge("", "盒", "", 5)
        assert edge == "盒盒 "
        assert display_width(edge) == 5

    def test_mixed_width_pattern(self):
        assert render_horizontal_edge("", "a盒", "", 6) == "a盒a盒"

    def test_wide_corners(self):
        edge = render_horizontal_edge("＃", "─", "＃", 6)
        assert edge == "＃──＃"
        assert display_width(edge) == 6

    def test_zero_width_pattern_treated_as_space(self):
        assert render_horizontal_edge("", "\u0301", "", 2) == "  "


class TestApplyBorder:
    """Tests for apply_border() - the whole box."""

    def test_normal_border_all_sides(self, block):
        assert apply_border(block, NORMAL_BORDER) == "┌──┐\n│ab│\n│cd│\n└──┘"

    def test_top_only(self, block):
        assert apply_border(block, NORMAL_BORDER, EdgeFlags(top=True)) == "──\nab\ncd"

    def test_hidden_border_keeps_layout(self, block):
        assert apply_border(block, HIDDEN_BORDER) == "    \n ab \n cd \n    "

    def test_no_border_is_identity(self, block):
        assert apply_border(block, NO_BORDER) == block
        assert apply_border(block, NO_BORDER, EdgeFlags(top=True)) == block

    def test_all_sides_off_is_identity(self, block):
        edges = EdgeFlags(top=False, right=False, bottom=False, left=False)
        assert apply_border(block, ROUNDED_BORDER, edges) == block

    def test_identity_keeps_unequal_lines(self):
        assert apply_border("abc\nd", NO_BORDER) == "abc\nd"

    def test_top_and_right(self, block):
        edges = EdgeFlags(top=True, right=True)
        assert apply_border(block, NORMAL_BORDER, edges) == "──┐\nab│\ncd│"

    def test_top_and_left(self, block):
        edges = EdgeFlags(top=True, left=True)
        assert apply_border(block, NORMAL_BORDER, edges) == "┌──\n│ab\n│cd"

    def test_sides_only(self, block):
        edges = EdgeFlags(left=True, right=True)
        assert apply_border(block, NORMAL_BORDER, edges) == "│ab│\n│cd│"

    def test_top_and_bottom(self, block):
        edges = EdgeFlags.only("top", "bottom")
        assert apply_border(block, NORMAL_BORDER, edges) == "──\nab\ncd\n──"

    def test_bottom_only_has_leading_newline(self, block):
        assert apply_border(block, NORMAL_BORDER, EdgeFlags(bottom=True)) == "ab\ncd\n──"

    def test_empty_side_glyphs_take_one_cell(self, block):
        spec = replace(NORMAL_BORDER, left="", right="")
        assert apply_border(block, spec) == "┌──┐\n ab \n cd \n└──┘"

    def test_empty_edge_glyph_is_space(self, block):
        spec = replace(NORMAL_BORDER, top="")
        assert apply_border(block, spec).split("\n")[0] == "┌  ┐"

    def test_wide_side_glyphs(self, block):
        spec = replace(NORMAL_BORDER, left="＃", right="＃")
        lines = apply_border(block, spec).split("\n")
        assert lines[1] == "＃ab＃"
        assert display_width(lines[1]) == 2 + 2 + 2
        # The top edge is sized from the left side and the top-right corner
        assert lines[0] == "┌───┐"

    def test_side_patterns_cycle_independently(self):
        spec = replace(NORMAL_BORDER, left="123", right="ab")
        lines = apply_border("x\nx\nx\nx", spec).split("\n")
        assert lines[1:-1] == ["1xa", "2xb", "3xa", "1xb"]

    def test_top_pattern_cycles(self):
        spec = replace(NORMAL_BORDER, top="=-")
        assert apply_border("abcde", spec).split("\n")[0] == "┌=-=-=┐"

    def test_uneven_lines_padded(self):
        assert apply_border("abc\nd", NORMAL_BORDER) == "┌───┐\n│abc│\n│d  │\n└───┘"

    def test_wide_content(self):
        assert apply_border("盒", NORMAL_BORDER) == "┌──┐\n│盒│\n└──┘"

    def test_styled_content_measured_by_cells(self):
        out = apply_border("\x1b[1mab\x1b[0m", NORMAL_BORDER)
        assert out == "┌──┐\n│\x1b[1mab\x1b[0m│\n└──┘"

    def test_empty_content(self):
        assert apply_border("", NORMAL_BORDER) == "┌┐\n││\n└┘"


class TestBorderColors:
    """Tests for per-side colors in apply_border()."""

    def test_top_color_covers_corners(self, block):
        colors = EdgeColors(top_fg=Color("#ff0000"))
        lines = apply_border(block, NORMAL_BORDER, colors=colors).split("\n")
        assert lines[0] == "\x1b[38;2;255;0;0m┌──┐\x1b[0m"
        assert lines[1] == "│ab│"
        assert lines[3] == "└──┘"

    def test_side_colors_leave_content_alone(self, block):
        colors = EdgeColors(left_fg=Color("1"), right_bg=Color("4"))
        lines = apply_border(block, NORMAL_BORDER, colors=colors).split("\n")
        assert lines[1] == "\x1b[31m│\x1b[0mab\x1b[44m│\x1b[0m"

    def test_uniform_colors(self, block):
        colors = EdgeColors.uniform(fg=Color("9"))
        out = apply_border(block, NORMAL_BORDER, colors=colors)
        assert out.count("\x1b[91m") == 6

    def test_ascii_profile_drops_color(self, block):
        colors = EdgeColors.uniform(fg=Color("#ff0000"), bg=Color("#000000"))
        out = apply_border(block, NORMAL_BORDER, colors=colors, profile=ColorProfile.ASCII)
        assert out == "┌──┐\n│ab│\n│cd│\n└──┘"

    def test_ansi256_profile(self, block):
        colors = EdgeColors(bottom_fg=Color("#ff0000"))
        out = apply_border(block, NORMAL_BORDER, colors=colors, profile=ColorProfile.ANSI256)
        assert out.split("\n")[-1] == "\x1b[38;5;196m└──┘\x1b[0m"

    def test_no_border_ignores_colors(self, block):
        colors = EdgeColors.uniform(fg=Color("#ff0000"))
        assert apply_border(block, NO_BORDER, colors=colors) == block
