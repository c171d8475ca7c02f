"""Shared default values for user-facing configuration settings."""
from sprite_maker.type_defs import LayoutName

# Input
DEFAULT_SOURCE_DIR = "images"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".png", ".gif", ".jpg", ".jpeg", ".bmp")
DEFAULT_REMOVE_PADDING = False
# PIL alpha of a fully transparent pixel; columns/rows made only of this
# value are considered padding.
DEFAULT_BACKGROUND_ALPHA = 0

# Layout
DEFAULT_LAYOUT_NAME: LayoutName = "Packed"
DEFAULT_FIXED_DIMENSION_N = 1

# Output
DEFAULT_TARGET_FILE = "sprite.png"
DEFAULT_CLASS_PREFIX = "sprite"
