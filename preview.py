#!/usr/bin/env python3
"""
cellbox preview - Show border presets around a block of text.

Prints every preset (or one chosen border, custom borders from the settings
file included) so glyphs, side toggles and colors can be checked in the
terminal being used.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from cellbox.config import BorderSettings
from cellbox.core.constants import EDGES
from cellbox.ui.colors import Color, ColorProfile
from cellbox.ui.components import BORDERS, NO_BORDER, EdgeColors, EdgeFlags, apply_border

SAMPLE_TEXT = "cellbox\n盒子 box"


def parse_sides(value: Optional[str]) -> EdgeFlags:
    """Turn "top,left" into flags; None keeps the all-sides default."""
    if not value:
        return EdgeFlags()
    sides = {s.strip().lower() for s in value.split(",") if s.strip()}
    unknown = sides - set(EDGES)
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown side(s): {', '.join(sorted(unknown))}")
    return EdgeFlags.only(*sides)


def render_preview(
    settings: BorderSettings,
    text: str,
    border_name: Optional[str] = None,
    edges: Optional[EdgeFlags] = None,
    colors: Optional[EdgeColors] = None,
    profile: Optional[ColorProfile] = None,
) -> list[str]:
    """
    Build the preview blocks.

    Returns:
        One "name:" header plus bordered block per border shown
    """
    if border_name:
        spec = settings.get_border(border_name)
        if spec is None:
            raise ValueError(f"Unknown border '{border_name}'")
        names = [(border_name, spec)]
    else:
        seen = set()
        names = []
        # Custom borders shadow presets of the same name
        presets = [(n, s) for n, s in BORDERS.items() if n not in settings.borders]
        for name, spec in presets + list(settings.borders.items()):
            if spec == NO_BORDER or spec in seen:
                continue
            seen.add(spec)
            names.append((name, spec))

    blocks = []
    for name, spec in names:
        blocks.append(f"{name}:")
        blocks.append(apply_border(text, spec, edges, colors, profile))
    return blocks


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="cellbox - Preview terminal box borders"
    )
    parser.add_argument("text", nargs="?", default=SAMPLE_TEXT,
                        help="Text to frame (use \\n for line breaks)")
    parser.add_argument("--border", help="Border name (preset or custom)")
    parser.add_argument("--sides", help="Comma-separated sides to draw, e.g. top,bottom")
    parser.add_argument("--fg", help="Border foreground color (#rrggbb or 0-255)")
    parser.add_argument("--bg", help="Border background color (#rrggbb or 0-255)")
    parser.add_argument("--profile", choices=[p.name.lower() for p in ColorProfile],
                        help="Color profile (default: from settings or environment)")
    parser.add_argument("--settings", type=Path, help="Path to settings.json")
    args = parser.parse_args()

    settings = BorderSettings.load(args.settings)
    profile = ColorProfile.from_name(args.profile) if args.profile else settings.profile()
    colors = EdgeColors.uniform(
        Color(args.fg) if args.fg else None,
        Color(args.bg) if args.bg else None,
    )

    try:
        edges = parse_sides(args.sides)
        blocks = render_preview(
            settings, args.text.replace("\\n", "\n"), args.border, edges, colors, profile
        )
    except (argparse.ArgumentTypeError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    for block in blocks:
        print(block)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)
