"""
Tests for the growing binary tree bin packer.

Covers:
- Placement of simple and mixed block sets without overlap
- Growth direction rules and determinism
- Unplaceable blocks and empty input
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from sprite_maker.layout.bin_packing import Block, GrowingBinPacker, Placement

if TYPE_CHECKING:
    from _pytest.logging import LogCaptureFixture


def _blocks(*sizes: tuple[int, int]) -> list[Block]:
    return [Block(w, h, str(i)) for i, (w, h) in enumerate(sizes)]


def _overlap(a: Block, b: Block) -> bool:
    assert a.fit is not None
    assert b.fit is not None
    return (a.fit.x < b.fit.x + b.width and b.fit.x < a.fit.x + a.width
            and a.fit.y < b.fit.y + b.height and b.fit.y < a.fit.y + a.height)


def _extent(blocks: list[Block]) -> tuple[int, int]:
    return (
        max(b.fit.x + b.width for b in blocks if b.fit is not None),
        max(b.fit.y + b.height for b in blocks if b.fit is not None),
    )


class TestGrowingBinPacker:
    """Unit tests for GrowingBinPacker.fit."""

    def test_single_block_at_origin(self) -> None:
        """The first block always lands at the origin."""
        blocks = _blocks((30, 20))
        assert GrowingBinPacker().fit(blocks) == []
        assert blocks[0].fit == Placement(0, 0)

    def test_three_square_scenario(self) -> None:
        """100/80/80 squares fit without overlap within 180x180."""
        blocks = _blocks((100, 100), (80, 80), (80, 80))
        GrowingBinPacker().fit(blocks)
        assert all(b.fit is not None for b in blocks)
        assert not _overlap(blocks[0], blocks[1])
        assert not _overlap(blocks[0], blocks[2])
        assert not _overlap(blocks[1], blocks[2])
        width, height = _extent(blocks)
        assert width <= 180  # noqa: PLR2004
        assert height <= 180  # noqa: PLR2004

    def test_three_square_exact_placements(self) -> None:
        """Grow right first, then down once the bin is wide enough."""
        blocks = _blocks((100, 100), (80, 80), (80, 80))
        GrowingBinPacker().fit(blocks)
        assert [b.fit for b in blocks] == [
            Placement(0, 0), Placement(100, 0), Placement(0, 100),
        ]

    def test_fills_free_space_before_growing(self) -> None:
        """Smaller blocks reuse leftover space in split nodes."""
        blocks = _blocks((100, 100), (50, 50), (50, 50))
        GrowingBinPacker().fit(blocks)
        width, height = _extent(blocks)
        assert (width, height) == (150, 100)
        assert blocks[2].fit == Placement(100, 50)

    def test_mixed_blocks_do_not_overlap(self) -> None:
        """A varied, height sorted set is packed without overlap."""
        sizes = [(120, 150), (64, 64), (80, 40), (100, 200), (56, 50),
                 (10, 10), (200, 20), (32, 96), (64, 64), (15, 140)]
        blocks = sorted(_blocks(*sizes), key=lambda b: b.height, reverse=True)
        unplaced = GrowingBinPacker().fit(blocks)
        placed = [b for b in blocks if b.fit is not None]
        assert len(placed) + len(unplaced) == len(blocks)
        for i, a in enumerate(placed):
            for b in placed[i + 1:]:
                assert not _overlap(a, b), f"{a.id} overlaps {b.id}"

    def test_deterministic(self) -> None:
        """Same input order gives the same placements."""
        sizes = [(40, 90), (70, 70), (30, 60), (90, 30), (20, 20)]
        first = _blocks(*sizes)
        second = _blocks(*sizes)
        GrowingBinPacker().fit(first)
        GrowingBinPacker().fit(second)
        assert [b.fit for b in first] == [b.fit for b in second]

    def test_packer_instance_is_reusable(self) -> None:
        """Each fit call starts from a fresh tree."""
        packer = GrowingBinPacker()
        packer.fit(_blocks((50, 50), (50, 50)))
        blocks = _blocks((10, 10))
        packer.fit(blocks)
        assert blocks[0].fit == Placement(0, 0)
        assert packer.root is not None
        assert (packer.root.w, packer.root.h) == (10, 10)

    def test_unplaceable_block_is_reported(
        self,
        caplog: LogCaptureFixture,
    ) -> None:
        """A block larger than the bin in both directions stays unplaced."""
        blocks = _blocks((10, 10), (50, 50), (5, 5))
        with caplog.at_level(logging.WARNING):
            unplaced = GrowingBinPacker().fit(blocks)
        assert [b.id for b in unplaced] == ["1"]
        assert blocks[1].fit is None
        assert blocks[2].fit is not None
        assert "Unable to fit block 1" in caplog.text

    def test_empty_input_rejected(self) -> None:
        """Packing nothing is a caller error."""
        with pytest.raises(ValueError, match="No blocks"):
            GrowingBinPacker().fit([])

    def test_grow_down_when_wide(self) -> None:
        """A wide bin grows down for a block that only fits its width."""
        blocks = _blocks((100, 10), (100, 10))
        GrowingBinPacker().fit(blocks)
        assert blocks[1].fit == Placement(0, 10)

    def test_grow_right_when_tall(self) -> None:
        """A tall bin grows right for a block that only fits its height."""
        blocks = _blocks((10, 100), (10, 100))
        GrowingBinPacker().fit(blocks)
        assert blocks[1].fit == Placement(10, 0)
