"""
Layout interface for items placed on a 2D sprite canvas.

A layout maps item ids to the top left coordinate each item occupies and
records the overall canvas size. Strategies subclass ``Layout`` and fill it
in ``_layout_items`` once, at construction time. After ``finalize`` the
layout is ready to be queried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprite_maker.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.type_defs import Coord, ItemInfo, LayoutOptions


class LayoutNotFinalizedError(RuntimeError):
    """Raised when coordinates are read from a layout before finalize()."""


class Layout:
    """
    Base class for sprite layouts.

    Not meant to be instantiated directly; strategies implement
    ``_layout_items`` and are built through ``from_items`` or their own
    constructor.
    """

    name = "Layout"

    def __init__(self) -> None:
        self._items: dict[str, Coord] = {}
        self._width: int | None = None
        self._height: int | None = None
        self._finalized = False

    @classmethod
    def from_items(
        cls,
        items: Mapping[str, ItemInfo] | None,
        options: LayoutOptions | None = None,
    ) -> Layout:
        """Lay out ``items`` with this strategy and return the finalized layout."""
        if items is None:
            msg = f"No items were passed to the {cls.name} layout"
            raise ValueError(msg)
        layout = cls()
        layout._configure(options or {})
        layout._layout_items(items)
        layout.finalize()
        return layout

    def _configure(self, options: LayoutOptions) -> None:
        """Read strategy specific options. Default strategies take none."""
        if options:
            logger.debug("%s layout ignores options: %s", self.name, options)

    def _layout_items(self, items: Mapping[str, ItemInfo]) -> None:
        """Place ``items`` and set the canvas dimensions."""
        msg = f"{type(self).__name__} must implement _layout_items"
        raise NotImplementedError(msg)

    def get_item_coord(self, item_id: str) -> Coord | None:
        """
        Return the (x, y) coordinate of ``item_id``.

        Returns None, with a warning, when the id is not part of the layout.

        Raises:
            LayoutNotFinalizedError: If ``finalize`` was not called yet.

        """
        if not self._finalized:
            msg = "finalize() was not called on this layout"
            raise LayoutNotFinalizedError(msg)
        coord = self._items.get(item_id)
        if coord is None:
            logger.warning(
                "Item id %s doesn't appear to be part of this layout",
                item_id,
            )
        return coord

    def set_item_coord(self, item_id: str, x: int, y: int) -> None:
        """Place ``item_id`` at (x, y), replacing any previous coordinate."""
        self._items[item_id] = (x, y)

    def move_items(self, dx: int, dy: int) -> None:
        """Translate every placed item by (dx, dy)."""
        self._items = {
            item_id: (x + dx, y + dy)
            for item_id, (x, y) in self._items.items()
        }

    def delete_item(self, item_id: str) -> None:
        """
        Remove ``item_id`` from the layout.

        This does not trigger a new layout: the removed item leaves a hole.
        Warns when the id is not part of the layout.
        """
        if item_id not in self._items:
            logger.warning(
                "The item with id %s you are trying to delete doesn't "
                "exist in the current layout",
                item_id,
            )
            return
        del self._items[item_id]

    def merge_with(self, other: Layout) -> None:
        """
        Copy every item of ``other`` into this layout.

        Ids are expected to be disjoint; a colliding id is reported and the
        coordinate from ``other`` wins.
        """
        for item_id, (x, y) in other.get_items().items():
            if item_id in self._items:
                logger.warning(
                    "The id %s already exists in the target layout",
                    item_id,
                )
            self.set_item_coord(item_id, x, y)

    def get_item_ids(self) -> list[str]:
        """Return the ids of all placed items."""
        return list(self._items)

    def get_items(self) -> dict[str, Coord]:
        """Return a copy of the id to coordinate mapping."""
        return dict(self._items)

    def width(self) -> int:
        """Overall width of the layout in pixels."""
        return self._width or 0

    def height(self) -> int:
        """Overall height of the layout in pixels."""
        return self._height or 0

    def set_dimensions(self, width: int, height: int) -> None:
        """Record the canvas size computed by a strategy."""
        self._width = width
        self._height = height

    @property
    def is_finalized(self) -> bool:
        """Whether finalize() has run."""
        return self._finalized

    def finalize(self) -> None:
        """
        Mark the layout as ready for querying.

        Warns when a strategy never set the canvas width or height; the
        layout stays usable with zero valued dimensions.
        """
        if self._width is None:
            logger.warning("Attribute width should always be set in the layout")
        if self._height is None:
            logger.warning(
                "Attribute height should always be set in the layout")
        self._finalized = True

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(items={len(self._items)}, "
                f"width={self.width()}, height={self.height()})")
