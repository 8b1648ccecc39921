"""
Configuration management for cellbox.

Config file:
- .cellbox/settings.json: default border, color profile and user-defined
  border glyph sets
"""

import json
from pathlib import Path
from typing import Optional

from .core.constants import SETTINGS_DIR, SETTINGS_FILE
from .ui.colors import ColorProfile, detect_color_profile
from .ui.components.box import BorderSpec, ROUNDED_BORDER, get_border


def default_settings_path() -> Path:
    """Settings file location relative to the working directory."""
    return Path.cwd() / SETTINGS_DIR / SETTINGS_FILE


class BorderSettings:
    """
    Manages .cellbox/settings.json - border preferences that persist across runs.

    Stores:
    - The default border name (a preset or a custom border)
    - An optional color profile override
    - Custom borders by name, which shadow presets of the same name
    """

    DEFAULT_BORDER = "rounded"

    def __init__(self, path: Path):
        self.path = path
        self.default_border: str = self.DEFAULT_BORDER
        # Profile name, empty to detect from the environment
        self.color_profile: str = ""
        # Custom borders: { name: BorderSpec }
        self.borders: dict[str, BorderSpec] = {}

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "BorderSettings":
        """Load settings from file, falling back to defaults."""
        settings = cls(path or default_settings_path())

        if settings.path.exists():
            try:
                with open(settings.path, encoding="utf-8") as f:
                    data = json.load(f)

                settings.default_border = cls._string_setting(
                    data, "default_border", cls.DEFAULT_BORDER, settings.path
                )
                settings.color_profile = cls._string_setting(
                    data, "color_profile", "", settings.path
                )
                settings.borders = {
                    name: BorderSpec.from_dict(spec)
                    for name, spec in data.get("borders", {}).items()
                    if isinstance(spec, dict)
                }
            except (ValueError, IOError, AttributeError) as e:
                # ValueError covers bad JSON and bad UTF-8
                print(f"Warning: Could not load {settings.path.name}: {e}")

        return settings

    @staticmethod
    def _string_setting(data: dict, key: str, default: str, path: Path) -> str:
        """Read a string setting, warning about and ignoring any other type."""
        value = data.get(key, default)
        if isinstance(value, str):
            return value
        print(f"Warning: Ignoring non-string '{key}' in {path.name}: {value!r}")
        return default

    def save(self):
        """Save settings to file."""
        data = {
            "default_border": self.default_border,
            "color_profile": self.color_profile,
            "borders": {name: spec.to_dict() for name, spec in self.borders.items()},
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_border(self, name: str) -> Optional[BorderSpec]:
        """Get a border by name: custom borders first, then presets."""
        if name in self.borders:
            return self.borders[name]
        return get_border(name)

    def set_border(self, name: str, spec: BorderSpec):
        """Add or replace a custom border."""
        self.borders[name] = spec

    def remove_border(self, name: str) -> bool:
        """Remove a custom border. Returns True if it existed."""
        return self.borders.pop(name, None) is not None

    def default_spec(self) -> BorderSpec:
        """The default border, or the rounded preset if its name is unknown."""
        return self.get_border(self.default_border) or ROUNDED_BORDER

    def profile(self) -> ColorProfile:
        """Configured color profile, or the one detected from the environment."""
        return ColorProfile.from_name(self.color_profile) or detect_color_profile()
