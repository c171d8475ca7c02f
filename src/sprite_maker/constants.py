"""
Constants used internally by the sprite maker.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Color modes
COLOR_MODE_RGBA = "RGBA"
ALPHA_CHANNEL = "A"

# Fully transparent fill for the sprite canvas
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Alpha range accepted for the padding sentinel
ALPHA_MIN = 0
ALPHA_MAX = 255

# Output
SPRITE_FORMAT = "PNG"
CSS_ENCODING = "utf-8"

# Class names must not start with a digit or a hyphen followed by a digit
CLASS_NAME_FALLBACK = "item"
