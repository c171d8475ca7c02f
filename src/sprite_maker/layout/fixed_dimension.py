"""Layout that arranges items on a uniform grid with a fixed column count."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from sprite_maker.config_defaults import DEFAULT_FIXED_DIMENSION_N
from sprite_maker.layout.base import Layout

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.type_defs import ItemInfo, LayoutOptions


class FixedDimensionLayout(Layout):
    """
    Place items row by row on a grid of ``n`` columns.

    Every cell is as large as the widest and the tallest item, so the grid
    is regular rather than tight. Items are placed in the iteration order of
    the input mapping.
    """

    name = "FixedDimension"

    def __init__(self) -> None:
        super().__init__()
        self.n = DEFAULT_FIXED_DIMENSION_N

    def _configure(self, options: LayoutOptions) -> None:
        n = options.get("n", DEFAULT_FIXED_DIMENSION_N)
        if n < 1:
            msg = f"n must be a positive integer, got {n}"
            raise ValueError(msg)
        self.n = n

    def _layout_items(self, items: Mapping[str, ItemInfo]) -> None:
        if not items:
            self.set_dimensions(0, 0)
            return

        cell_w = max(info.width for info in items.values())
        cell_h = max(info.height for info in items.values())
        for index, item_id in enumerate(items):
            row, col = divmod(index, self.n)
            self.set_item_coord(item_id, col * cell_w, row * cell_h)

        rows = math.ceil(len(items) / self.n)
        self.set_dimensions(self.n * cell_w, rows * cell_h)
