"""Layout that places the images of each directory on their own row."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprite_maker.layout.base import Layout

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.type_defs import ItemInfo


class DirectoryBasedLayout(Layout):
    """
    Cascade items sharing a parent directory on the same row.

    Items are sorted by ``(parent_dir, pathname)``. A new row starts every
    time the parent directory changes; a row is as tall as its tallest item.
    """

    name = "DirectoryBased"

    def _layout_items(self, items: Mapping[str, ItemInfo]) -> None:
        sorted_ids = sorted(
            items,
            key=lambda item_id: (items[item_id].parent_dir,
                                 items[item_id].pathname),
        )

        x = 0
        y = 0
        row_height = 0
        max_w = 0
        previous_dir: str | None = None
        for item_id in sorted_ids:
            info = items[item_id]
            if previous_dir is not None and info.parent_dir != previous_dir:
                y += row_height
                x = 0
                row_height = 0
            previous_dir = info.parent_dir

            self.set_item_coord(item_id, x, y)
            x += info.width
            row_height = max(row_height, info.height)
            max_w = max(max_w, x)

        self.set_dimensions(max_w, y + row_height)
