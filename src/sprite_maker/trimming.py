"""
Border trimming for source images.

Finds the tight bounding box of the visible content of an image by scanning
its alpha channel inward from both edges at once. Each scan stops as soon as
both the near and the far boundary are found, so shallow transparent borders
are measured without visiting every pixel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from sprite_maker.config_defaults import DEFAULT_BACKGROUND_ALPHA
from sprite_maker.constants import ALPHA_CHANNEL, COLOR_MODE_RGBA

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable


@dataclass(frozen=True)
class ContentBox:
    """Inclusive pixel bounds of the visible content of an image."""

    first_left: int
    first_right: int
    first_top: int
    first_bottom: int

    @property
    def width(self) -> int:
        """Trimmed width."""
        return self.first_right - self.first_left + 1

    @property
    def height(self) -> int:
        """Trimmed height."""
        return self.first_bottom - self.first_top + 1


def _scan_inward(
    has_content: Callable[[int], bool],
    size: int,
) -> tuple[int, int]:
    """
    Return the first and last line index that holds content.

    Both ends are probed on every step. Falls back to the full extent
    when no line holds content.
    """
    near: int | None = None
    far: int | None = None
    for offset in range(size):
        if near is None and has_content(offset):
            near = offset
        if far is None and has_content(size - 1 - offset):
            far = size - 1 - offset
        if near is not None and far is not None:
            return near, far
    return 0, size - 1


def find_content_box(
    alpha: np.ndarray,
    background_alpha: int = DEFAULT_BACKGROUND_ALPHA,
) -> ContentBox:
    """
    Compute the content bounding box of a 2D alpha array.

    A column (or row) holds content when at least one of its pixels has an
    alpha different from ``background_alpha``. The input array is never
    modified.

    Args:
        alpha: Array of shape (height, width) with per pixel alpha values.
        background_alpha: Alpha value of padding pixels.

    Returns:
        The inclusive content bounds. A fully transparent image yields the
        full image extent, which means no trimming.

    Raises:
        ValueError: If the array is not two dimensional or is empty.

    """
    if alpha.ndim != 2:  # noqa: PLR2004
        msg = f"Alpha channel must be 2D, got shape {alpha.shape}"
        raise ValueError(msg)
    height, width = alpha.shape
    if width == 0 or height == 0:
        msg = "Cannot trim an empty image"
        raise ValueError(msg)

    def column_has_content(x: int) -> bool:
        return bool((alpha[:, x] != background_alpha).any())

    def row_has_content(y: int) -> bool:
        return bool((alpha[y, :] != background_alpha).any())

    first_left, first_right = _scan_inward(column_has_content, width)
    first_top, first_bottom = _scan_inward(row_has_content, height)
    return ContentBox(
        first_left=first_left,
        first_right=first_right,
        first_top=first_top,
        first_bottom=first_bottom,
    )


def alpha_channel(img: Image.Image) -> np.ndarray:
    """Return the alpha channel of a PIL image as a (height, width) array."""
    rgba = img if img.mode == COLOR_MODE_RGBA else img.convert(COLOR_MODE_RGBA)
    return np.asarray(rgba.getchannel(ALPHA_CHANNEL))


def measure_image(
    img: Image.Image,
    background_alpha: int = DEFAULT_BACKGROUND_ALPHA,
) -> ContentBox:
    """Return the content box of a decoded image."""
    return find_content_box(alpha_channel(img), background_alpha)
