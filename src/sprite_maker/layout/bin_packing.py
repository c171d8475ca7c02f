"""
Growing binary tree bin packer.

Places rectangles without a fixed bin size. The bin starts at the size of
the first block and grows right or down whenever a block does not fit,
preferring the direction that keeps the bin closer to a square.

Best results occur when the blocks are sorted by descending height, or by
descending ``max(width, height)``. The packer never sorts on its own: the
order of the input list is the placement order.

Typical usage example:
    blocks = [Block(100, 100, "a"), Block(80, 80, "b"), Block(80, 80, "c")]
    GrowingBinPacker().fit(blocks)
    for block in blocks:
        if block.fit is not None:
            print(block.id, block.fit.x, block.fit.y)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sprite_maker.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


@dataclass(frozen=True)
class Placement:
    """Top left corner assigned to a block."""

    x: int
    y: int


@dataclass
class Block:
    """Rectangle to pack; ``fit`` is filled in by the packer."""

    width: int
    height: int
    id: str
    fit: Placement | None = None


@dataclass
class _Node:
    """Region of packing space; split once a block is placed in it."""

    x: int
    y: int
    w: int
    h: int
    used: bool = False
    right: _Node | None = None
    down: _Node | None = None


class GrowingBinPacker:
    """
    Binary tree bin packer that grows its bin on demand.

    Each call to ``fit`` builds its own tree, so one instance can be reused
    and separate instances never share state.
    """

    def __init__(self) -> None:
        self.root: _Node | None = None

    def fit(self, blocks: Sequence[Block]) -> list[Block]:
        """
        Place every block in input order.

        Each block gets its ``fit`` attribute set to a ``Placement`` or left
        as ``None`` when the bin cannot grow to hold it. Unplaced blocks are
        logged and packing continues with the remaining ones.

        Args:
            blocks: Blocks to place, already sorted by the caller.

        Returns:
            The blocks that could not be placed.

        Raises:
            ValueError: If ``blocks`` is empty.

        """
        if not blocks:
            msg = "No blocks provided"
            raise ValueError(msg)

        first = blocks[0]
        self.root = _Node(0, 0, first.width, first.height)

        unplaced: list[Block] = []
        for block in blocks:
            node = self._find_node(self.root, block.width, block.height)
            if node is not None:
                block.fit = self._split_node(node, block.width, block.height)
            else:
                block.fit = self._grow_node(block.width, block.height)
            if block.fit is None:
                logger.warning("Unable to fit block %s", block.id)
                unplaced.append(block)
        return unplaced

    @staticmethod
    def _find_node(root: _Node, w: int, h: int) -> _Node | None:
        """Return the first free node able to hold w x h, right before down."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.used:
                # Popped in reverse, so "right" is searched first.
                if node.down is not None:
                    stack.append(node.down)
                if node.right is not None:
                    stack.append(node.right)
            elif w <= node.w and h <= node.h:
                return node
        return None

    @staticmethod
    def _split_node(node: _Node, w: int, h: int) -> Placement:
        """Occupy the top left w x h of node and carve the leftover space."""
        node.used = True
        node.down = _Node(node.x, node.y + h, node.w, node.h - h)
        node.right = _Node(node.x + w, node.y, node.w - w, h)
        return Placement(node.x, node.y)

    def _grow_node(self, w: int, h: int) -> Placement | None:
        """Enlarge the bin to make room for w x h, or return None."""
        root = self._require_root()
        can_grow_down = w <= root.w
        can_grow_right = h <= root.h

        should_grow_right = can_grow_right and root.h >= root.w + w
        should_grow_down = can_grow_down and root.w >= root.h + h

        if should_grow_right:
            return self._grow_right(w, h)
        if should_grow_down:
            return self._grow_down(w, h)
        if can_grow_right:
            return self._grow_right(w, h)
        if can_grow_down:
            return self._grow_down(w, h)
        return None

    def _grow_right(self, w: int, h: int) -> Placement | None:
        old = self._require_root()
        self.root = _Node(
            0, 0, old.w + w, old.h,
            used=True,
            down=old,
            right=_Node(old.w, 0, w, old.h),
        )
        return self._place_in_root(w, h)

    def _grow_down(self, w: int, h: int) -> Placement | None:
        old = self._require_root()
        self.root = _Node(
            0, 0, old.w, old.h + h,
            used=True,
            down=_Node(0, old.h, old.w, h),
            right=old,
        )
        return self._place_in_root(w, h)

    def _place_in_root(self, w: int, h: int) -> Placement | None:
        node = self._find_node(self._require_root(), w, h)
        if node is None:
            return None
        return self._split_node(node, w, h)

    def _require_root(self) -> _Node:
        if self.root is None:
            msg = "Packer has no root; call fit() first"
            raise RuntimeError(msg)
        return self.root
