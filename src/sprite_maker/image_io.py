"""Source image discovery, loading, and measurement."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from sprite_maker.config_defaults import (
    DEFAULT_BACKGROUND_ALPHA,
    DEFAULT_EXTENSIONS,
)
from sprite_maker.constants import COLOR_MODE_RGBA
from sprite_maker.logging_utils import logger
from sprite_maker.trimming import measure_image
from sprite_maker.type_defs import ItemInfo, ItemsInfo

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable


def discover_images(
    source_dir: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """
    Return every image file below ``source_dir``, sorted by path.

    Matching is case insensitive on the file suffix.

    Raises:
        FileNotFoundError: If ``source_dir`` is not a directory.

    """
    root = Path(source_dir)
    if not root.is_dir():
        msg = f"Source directory not found: {source_dir}"
        raise FileNotFoundError(msg)

    wanted = {ext.lower() if ext.startswith(".") else f".{ext.lower()}"
              for ext in extensions}
    found = sorted(
        p for p in root.rglob("*")
        if p.is_file() and p.suffix.lower() in wanted
    )
    logger.info("Found %d images in %s", len(found), root)
    return found


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from a file path and convert to RGBA.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGBA mode

    Raises:
        FileNotFoundError: If the image file does not exist
        IOError: If the image cannot be opened or processed

    """
    try:
        with Image.open(path) as img:
            return img.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def measure_item(
    img: Image.Image,
    path: Path,
    *,
    remove_padding: bool = False,
    background_alpha: int = DEFAULT_BACKGROUND_ALPHA,
) -> ItemInfo:
    """Build the layout rectangle for one decoded image."""
    width, height = img.size
    first_x = 0
    first_y = 0
    if remove_padding:
        box = measure_image(img, background_alpha)
        width, height = box.width, box.height
        first_x, first_y = box.first_left, box.first_top
    return ItemInfo(
        width=width,
        height=height,
        first_pixel_x=first_x,
        first_pixel_y=first_y,
        parent_dir=str(path.parent),
        pathname=str(path),
    )


def collect_items(
    paths: Iterable[Path],
    *,
    remove_padding: bool = False,
    background_alpha: int = DEFAULT_BACKGROUND_ALPHA,
) -> tuple[ItemsInfo, dict[str, Path]]:
    """
    Measure every image and assign sequential string ids.

    Returns the items keyed by id and the id to source path mapping.
    Images that cannot be decoded are logged and skipped.
    """
    items: ItemsInfo = {}
    sources: dict[str, Path] = {}
    for path in paths:
        try:
            img = load_image(path)
        except OSError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue
        if img.width == 0 or img.height == 0:
            logger.warning("Skipping empty image %s", path)
            continue
        item_id = str(len(items))
        items[item_id] = measure_item(
            img, path,
            remove_padding=remove_padding,
            background_alpha=background_alpha,
        )
        sources[item_id] = path
    return items, sources
