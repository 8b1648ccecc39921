"""
Cell-width measurement for terminal text.

Widths are in terminal cells, not characters or bytes: wide (CJK) glyphs
take 2 cells, combining marks take 0, and East Asian Ambiguous glyphs
(box-drawing characters among them) take 1 or 2 depending on the
terminal, configured through CELLBOX_AMBIGUOUS_WIDTH.
"""

import os
import re
import unicodedata

import wcwidth

from .constants import AMBIGUOUS_WIDTH_ENV

# CSI sequences (SGR colors, cursor movement) and OSC sequences (hyperlinks)
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_PATTERN.sub("", text)


def _get_ambiguous_width() -> int:
    """Width of East Asian Ambiguous characters (1 unless the env asks for 2)."""
    return 2 if os.environ.get(AMBIGUOUS_WIDTH_ENV, "1").strip() == "2" else 1


def rune_width(char: str) -> int:
    """
    Cell width of a single character.

    Args:
        char: One character

    Returns:
        0 for zero-width and non-printable characters, 2 for wide and
        fullwidth characters, the configured ambiguous width for ambiguous
        characters, 1 otherwise
    """
    wc = wcwidth.wcwidth(char)
    if wc <= 0:
        return 0

    eaw = unicodedata.east_asian_width(char)
    if eaw in ("F", "W"):
        return 2
    if eaw == "A":
        return _get_ambiguous_width()
    return 1


def max_rune_width(text: str) -> int:
    """
    Width of the widest character in text.

    A border glyph string is as thick as its widest character, so this is
    the measure used for border segments. Returns 0 for an empty string.
    """
    width = 0
    for char in text:
        w = rune_width(char)
        if w > width:
            width = w
    return width


def display_width(text: str) -> int:
    """Printable cell width of text, ignoring embedded ANSI sequences."""
    return sum(rune_width(char) for char in strip_ansi(text))


def get_lines(text: str) -> tuple[list[str], int]:
    """
    Split a block into lines of equal display width.

    Shorter lines are padded with trailing spaces up to the widest line, so
    that a right border lines up.

    Args:
        text: Block of text, lines separated by newlines

    Returns:
        Tuple of (lines, width) where width is the widest line's cell width
    """
    lines = text.split("\n")
    widths = [display_width(line) for line in lines]
    width = max(widths)
    return [
        line + " " * (width - w) if w < width else line
        for line, w in zip(lines, widths)
    ], width
