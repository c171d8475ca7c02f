"""
Layout engine split into the base interface, the bin packer and strategies.

The package exposes the strategies and the name based factory directly so
callers do not need to know which module holds which strategy.
"""

from __future__ import annotations

from . import base, bin_packing
from .base import Layout, LayoutNotFinalizedError
from .bin_packing import Block, GrowingBinPacker, Placement
from .directory_based import DirectoryBasedLayout
from .factory import LAYOUTS, build_layout
from .fixed_dimension import FixedDimensionLayout
from .packed import PackedLayout

__all__ = [
    "LAYOUTS",
    "Block",
    "DirectoryBasedLayout",
    "FixedDimensionLayout",
    "GrowingBinPacker",
    "Layout",
    "LayoutNotFinalizedError",
    "PackedLayout",
    "Placement",
    "base",
    "bin_packing",
    "build_layout",
]
