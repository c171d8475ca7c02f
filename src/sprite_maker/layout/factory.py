"""Select and build a layout strategy by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprite_maker.layout.directory_based import DirectoryBasedLayout
from sprite_maker.layout.fixed_dimension import FixedDimensionLayout
from sprite_maker.layout.packed import PackedLayout
from sprite_maker.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.layout.base import Layout
    from sprite_maker.type_defs import ItemInfo, LayoutName, LayoutOptions

LAYOUTS: dict[str, type[Layout]] = {
    PackedLayout.name: PackedLayout,
    DirectoryBasedLayout.name: DirectoryBasedLayout,
    FixedDimensionLayout.name: FixedDimensionLayout,
}


def build_layout(
    layout_name: LayoutName | str,
    items: Mapping[str, ItemInfo],
    options: LayoutOptions | None = None,
) -> Layout:
    """
    Lay out ``items`` with the strategy registered as ``layout_name``.

    Raises:
        ValueError: If no strategy has that name.

    """
    layout_cls = LAYOUTS.get(layout_name)
    if layout_cls is None:
        valid = ", ".join(sorted(LAYOUTS))
        msg = f"Unknown layout '{layout_name}'. Expected one of: {valid}"
        raise ValueError(msg)
    logger.info("Laying out %d items with the %s layout",
                len(items), layout_name)
    return layout_cls.from_items(items, options)
