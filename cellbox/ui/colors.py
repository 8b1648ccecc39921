"""
Color definitions and border styling for terminal output.

Colors are given as hex ("#8a2be2") or as an xterm palette index ("205")
and are downsampled to whatever the active ColorProfile supports.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.constants import COLOR_PROFILE_ENV, CSI, RESET


class Colors:
    RESET = RESET


class ColorProfile(Enum):
    """How many colors the terminal can show, from none to 24-bit."""
    ASCII = 0
    ANSI = 1
    ANSI256 = 2
    TRUECOLOR = 3

    @classmethod
    def from_name(cls, name: str) -> Optional["ColorProfile"]:
        """Look up a profile by case-insensitive name, None if unknown."""
        return cls.__members__.get(name.strip().upper()) if name else None


# xterm's default values for the 16 basic colors
ANSI16_RGB = [
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
]

# Channel levels of the 6x6x6 color cube (indices 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _distance(c1: tuple, c2: tuple) -> int:
    return (c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2


def ansi256_to_rgb(index: int) -> tuple:
    """RGB value of an xterm-256 palette index."""
    if index < 16:
        return ANSI16_RGB[index]
    if index < 232:
        index -= 16
        return (
            CUBE_LEVELS[index // 36],
            CUBE_LEVELS[(index // 6) % 6],
            CUBE_LEVELS[index % 6],
        )
    gray = 8 + 10 * (index - 232)
    return (gray, gray, gray)


def rgb_to_ansi256(color: tuple) -> int:
    """Nearest xterm-256 index for an RGB value (cube or grayscale ramp)."""

    def cube_index(v: int) -> int:
        if v < 48:
            return 0
        if v < 115:
            return 1
        return (v - 35) // 40

    r, g, b = (cube_index(v) for v in color)
    cube = 16 + 36 * r + 6 * g + b

    avg = sum(color) // 3
    gray_index = 23 if avg > 238 else max(0, (avg - 3) // 10)
    gray = 232 + gray_index

    if _distance(color, ansi256_to_rgb(gray)) < _distance(color, ansi256_to_rgb(cube)):
        return gray
    return cube


def rgb_to_ansi16(color: tuple) -> int:
    """Nearest of the 16 basic colors for an RGB value."""
    return min(range(16), key=lambda i: _distance(color, ANSI16_RGB[i]))


def _ansi16_code(index: int, background: bool) -> str:
    base = 40 if background else 30
    if index >= 8:
        base += 60
        index -= 8
    return str(base + index)


@dataclass(frozen=True)
class Color:
    """
    A terminal color.

    value is either a hex color ("#rrggbb" or "#rgb") or an xterm palette
    index ("0" to "255"). Anything else renders as no color at all.
    """
    value: str

    def index(self) -> Optional[int]:
        """Palette index, or None if this is not an index color."""
        if self.value.isdigit():
            n = int(self.value)
            if 0 <= n <= 255:
                return n
        return None

    def rgb(self) -> Optional[tuple]:
        """RGB triple, or None if the value cannot be understood."""
        n = self.index()
        if n is not None:
            return ansi256_to_rgb(n)
        if not self.value.startswith("#"):
            return None
        digits = self.value[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            return None
        try:
            return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            return None

    def sequence(self, profile: ColorProfile, background: bool = False) -> str:
        """
        SGR parameters for this color under a profile.

        Args:
            profile: Target color profile
            background: Build a background sequence instead of foreground

        Returns:
            Parameters like "38;2;255;0;0" (without CSI or "m"), or an empty
            string when the color is invalid or the profile has no color
        """
        rgb_value = self.rgb()
        if rgb_value is None or profile == ColorProfile.ASCII:
            return ""

        index = self.index()
        if profile == ColorProfile.ANSI:
            if index is None or index >= 16:
                index = rgb_to_ansi16(rgb_value)
            return _ansi16_code(index, background)

        if index is not None and index < 16:
            return _ansi16_code(index, background)

        prefix = "48" if background else "38"
        if profile == ColorProfile.ANSI256 or index is not None:
            if index is None:
                index = rgb_to_ansi256(rgb_value)
            return f"{prefix};5;{index}"

        r, g, b = rgb_value
        return f"{prefix};2;{r};{g};{b}"


def rgb(r: int, g: int, b: int) -> Color:
    return Color(f"#{r:02x}{g:02x}{b:02x}")


def detect_color_profile(environ: Optional[dict] = None) -> ColorProfile:
    """
    Pick a color profile from environment variables.

    CELLBOX_COLOR_PROFILE wins when it names a profile. Otherwise NO_COLOR
    disables color, COLORTERM=truecolor/24bit means 24-bit, a TERM with
    "256color" means 256 colors and TERM=dumb means no color. Anything
    else gets the 16 basic colors.
    """
    env = os.environ if environ is None else environ

    override = ColorProfile.from_name(env.get(COLOR_PROFILE_ENV, ""))
    if override is not None:
        return override

    if "NO_COLOR" in env:
        return ColorProfile.ASCII

    term = env.get("TERM", "")
    if env.get("COLORTERM", "").lower() in ("truecolor", "24bit"):
        return ColorProfile.TRUECOLOR
    if "256color" in term:
        return ColorProfile.ANSI256
    if term == "dumb":
        return ColorProfile.ASCII
    return ColorProfile.ANSI


def style_segment(
    text: str,
    fg: Optional[Color] = None,
    bg: Optional[Color] = None,
    profile: ColorProfile = ColorProfile.TRUECOLOR,
) -> str:
    """
    Wrap a border segment in foreground/background color.

    Args:
        text: Border glyphs to style
        fg: Foreground color, None for none
        bg: Background color, None for none
        profile: Color profile to render the colors for

    Returns:
        text unchanged if neither color produces a sequence, otherwise text
        wrapped in one SGR sequence and a reset
    """
    params = []
    if fg is not None:
        params.append(fg.sequence(profile))
    if bg is not None:
        params.append(bg.sequence(profile, background=True))
    params = [p for p in params if p]

    if not params:
        return text
    return f"{CSI}{';'.join(params)}m{text}{Colors.RESET}"
