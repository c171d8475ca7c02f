"""
Test configuration and shared fixtures for sprite_maker.

This module defines reusable pytest fixtures for building item maps,
rendering small RGBA images, and laying out temporary source directories.
These fixtures support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from sprite_maker.config import SpriteMakerConfig
from sprite_maker.constants import COLOR_MODE_RGBA
from sprite_maker.layout.base import Layout
from sprite_maker.logging_utils import logger
from sprite_maker.type_defs import ItemInfo, ItemsInfo


def _assert_no_overlap(layout: Layout, items: ItemsInfo) -> None:
    """Fail if any two placed rectangles intersect."""
    boxes = []
    for item_id in layout.get_item_ids():
        x, y = layout.get_item_coord(item_id)  # type: ignore[misc]
        info = items[item_id]
        boxes.append((item_id, x, y, x + info.width, y + info.height))
    for i, (id_a, ax0, ay0, ax1, ay1) in enumerate(boxes):
        for id_b, bx0, by0, bx1, by1 in boxes[i + 1:]:
            overlaps = ax0 < bx1 and bx0 < ax1 and ay0 < by1 and by0 < ay1
            assert not overlaps, f"{id_a} overlaps {id_b}"


def _bounding_box(layout: Layout, items: ItemsInfo) -> tuple[int, int]:
    """Return the true bounding box of all placed items."""
    max_w = 0
    max_h = 0
    for item_id in layout.get_item_ids():
        x, y = layout.get_item_coord(item_id)  # type: ignore[misc]
        max_w = max(max_w, x + items[item_id].width)
        max_h = max(max_h, y + items[item_id].height)
    return max_w, max_h


@pytest.fixture
def assert_no_overlap() -> Callable[[Layout, ItemsInfo], None]:
    """Provide a checker that fails on overlapping placements."""
    return _assert_no_overlap


@pytest.fixture
def bounding_box() -> Callable[[Layout, ItemsInfo], tuple[int, int]]:
    """Provide a helper computing the true bounding box of a layout."""
    return _bounding_box


@pytest.fixture
def make_items() -> Callable[..., ItemsInfo]:
    """Factory building an items map from (width, height) pairs."""

    def _build(*sizes: tuple[int, int], **extra: Any) -> ItemsInfo:
        return {
            str(i): ItemInfo(width=w, height=h, **extra)
            for i, (w, h) in enumerate(sizes)
        }

    return _build


@pytest.fixture
def mixed_items(make_items: Callable[..., ItemsInfo]) -> ItemsInfo:
    """A varied set of rectangles for packing tests."""
    return make_items(
        (120, 150), (64, 64), (80, 40), (100, 200), (56, 50),
        (10, 10), (200, 20), (32, 96), (64, 64), (15, 140),
    )


@pytest.fixture
def sample_image() -> Image.Image:
    """Create an opaque 16x12 RGBA image."""
    return Image.new(COLOR_MODE_RGBA, (16, 12), color=(255, 0, 0, 255))


@pytest.fixture
def padded_image() -> Image.Image:
    """Create a 10x10 transparent image with an opaque 2x2 block at (4, 3)."""
    img = Image.new(COLOR_MODE_RGBA, (10, 10), color=(0, 0, 0, 0))
    for x in (4, 5):
        for y in (3, 4):
            img.putpixel((x, y), (0, 0, 255, 255))
    return img


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """
    Create a source tree with images in two subdirectories.

    Returns:
        Path: Root of the source tree.

    """
    root = tmp_path / "images"
    (root / "arrows").mkdir(parents=True)
    (root / "icons").mkdir(parents=True)
    sizes = {
        root / "arrows" / "left.png": (20, 10),
        root / "arrows" / "right.png": (20, 10),
        root / "icons" / "home.png": (32, 32),
        root / "icons" / "user.png": (16, 24),
    }
    for path, size in sizes.items():
        Image.new(COLOR_MODE_RGBA, size, color=(0, 128, 0, 255)).save(path)
    (root / "notes.txt").write_text("not an image", encoding="utf-8")
    return root


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., SpriteMakerConfig]:
    """
    Build SpriteMakerConfig instances with optional section overrides.

    Outputs default to files under tmp_path.
    """

    def _build(
        *,
        input: dict[str, Any] | None = None,  # noqa: A002
        layout: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
    ) -> SpriteMakerConfig:
        effective_output = {"target_file": str(tmp_path / "out" / "sprite.png")}
        effective_output.update(output or {})
        data: dict[str, Any] = {
            "input": dict(input or {}),
            "layout": dict(layout or {}),
            "output": effective_output,
        }
        return SpriteMakerConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the sprite maker logger so caplog works."""
    monkeypatch.setattr(logger, "propagate", True)
