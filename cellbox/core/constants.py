"""
Shared constants for cellbox.
"""

# Environment overrides
AMBIGUOUS_WIDTH_ENV = "CELLBOX_AMBIGUOUS_WIDTH"
COLOR_PROFILE_ENV = "CELLBOX_COLOR_PROFILE"

# Default settings file, relative to the working directory
SETTINGS_DIR = ".cellbox"
SETTINGS_FILE = "settings.json"

# SGR framing
CSI = "\x1b["
RESET = "\x1b[0m"

# Side names, clockwise from the top
EDGES = ("top", "right", "bottom", "left")
