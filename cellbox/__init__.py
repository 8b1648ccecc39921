"""
cellbox - Unicode-aware box borders for terminal text.

Draws borders around pre-laid-out multi-line text, measuring glyphs in
terminal cells and styling each side with its own colors.

Import from submodules directly:
    from cellbox.ui.components import apply_border, ROUNDED_BORDER
    from cellbox.ui.colors import Color, ColorProfile
    from cellbox.core.width import display_width, get_lines
    from cellbox.config import BorderSettings
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
