"""
Constants and configuration values for the termlayout engine.
"""

# Border widgets draw one cell on every side of their interior
BORDER_INSET = 1

# Expand and Spacer widgets without a factor attribute
DEFAULT_FACTOR = 1

# Default text measurement
DEFAULT_TAB_WIDTH = 4
WRAP_NORMAL = "normal"
WRAP_OVERFLOW = "overflow"

# Settings file looked up by load_layout_settings() when no path is given
SETTINGS_FILE = "termlayout.json"
