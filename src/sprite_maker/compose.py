"""Composite source images into the final sprite sheet."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from sprite_maker.constants import (
    COLOR_MODE_RGBA,
    COLOR_TRANSPARENT,
    SPRITE_FORMAT,
)
from sprite_maker.image_io import load_image
from sprite_maker.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.layout.base import Layout
    from sprite_maker.type_defs import ItemInfo


def crop_to_item(img: Image.Image, info: ItemInfo) -> Image.Image:
    """Return the part of ``img`` covered by the (possibly trimmed) item."""
    if (info.first_pixel_x, info.first_pixel_y) == (0, 0) \
            and img.size == (info.width, info.height):
        return img
    return img.crop((
        info.first_pixel_x,
        info.first_pixel_y,
        info.first_pixel_x + info.width,
        info.first_pixel_y + info.height,
    ))


def compose_sprite(
    layout: Layout,
    items: Mapping[str, ItemInfo],
    images: Mapping[str, Image.Image],
) -> Image.Image:
    """Paste every placed image at its layout coordinate."""
    canvas = Image.new(
        COLOR_MODE_RGBA,
        (max(1, layout.width()), max(1, layout.height())),
        COLOR_TRANSPARENT,
    )
    for item_id in layout.get_item_ids():
        coord = layout.get_item_coord(item_id)
        img = images.get(item_id)
        if coord is None or img is None:
            continue
        canvas.paste(crop_to_item(img, items[item_id]), coord)
    return canvas


def save_sprite(
    layout: Layout,
    items: Mapping[str, ItemInfo],
    sources: Mapping[str, Path],
    out_path: str | Path,
) -> Path:
    """Load sources, build the sprite sheet, and save it as PNG."""
    target = Path(out_path)
    target.parent.mkdir(parents=True, exist_ok=True)

    images = {
        item_id: load_image(sources[item_id])
        for item_id in layout.get_item_ids()
        if item_id in sources
    }
    sprite = compose_sprite(layout, items, images)
    sprite.save(target, format=SPRITE_FORMAT)
    logger.info("Sprite sheet saved to: %s (%dx%d)",
                target, sprite.width, sprite.height)
    return target
