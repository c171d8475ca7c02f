"""Public package exports for the sprite maker."""

from __future__ import annotations

from .config import SpriteMakerConfig
from .layout import (
    DirectoryBasedLayout,
    FixedDimensionLayout,
    GrowingBinPacker,
    Layout,
    LayoutNotFinalizedError,
    PackedLayout,
    build_layout,
)
from .main import make_sprite
from .type_defs import ItemInfo

__all__ = [
    "DirectoryBasedLayout",
    "FixedDimensionLayout",
    "GrowingBinPacker",
    "ItemInfo",
    "Layout",
    "LayoutNotFinalizedError",
    "PackedLayout",
    "SpriteMakerConfig",
    "build_layout",
    "make_sprite",
]
