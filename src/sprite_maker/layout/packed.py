"""Layout that packs items as tightly as the growing bin packer allows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprite_maker.layout.base import Layout
from sprite_maker.layout.bin_packing import Block, GrowingBinPacker

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.type_defs import ItemInfo


class PackedLayout(Layout):
    """
    Pack items to keep the sprite sheet small.

    Items are fed to the packer by descending height; equal heights keep
    the iteration order of the input mapping. Items the packer cannot place
    are left out of the layout.
    """

    name = "Packed"

    def _layout_items(self, items: Mapping[str, ItemInfo]) -> None:
        if not items:
            self.set_dimensions(0, 0)
            return

        sorted_ids = sorted(
            items, key=lambda item_id: items[item_id].height, reverse=True,
        )
        blocks = [
            Block(items[item_id].width, items[item_id].height, item_id)
            for item_id in sorted_ids
        ]
        GrowingBinPacker().fit(blocks)

        max_w = 0
        max_h = 0
        for block in blocks:
            if block.fit is None:
                continue
            self.set_item_coord(block.id, block.fit.x, block.fit.y)
            max_w = max(max_w, block.fit.x + block.width)
            max_h = max(max_h, block.fit.y + block.height)

        self.set_dimensions(max_w, max_h)
