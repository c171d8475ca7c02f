"""
Defines shared type aliases for the sprite maker.

Centralizes reusable type hints and the rectangle descriptor handed from
the image measuring step to the layout strategies.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LayoutName = Literal["Packed", "DirectoryBased", "FixedDimension"]
Coord = tuple[int, int]
LayoutOptions = dict[str, int]


@dataclass(frozen=True, slots=True)
class ItemInfo:
    """
    Measured rectangle for one source image.

    ``width`` and ``height`` are the (possibly trimmed) dimensions used for
    layout. ``first_pixel_x``/``first_pixel_y`` locate the trimmed content
    inside the source image and stay at zero when no trimming happened.
    ``parent_dir`` and ``pathname`` are the grouping and ordering keys used
    by the directory based layout.
    """

    width: int
    height: int
    first_pixel_x: int = 0
    first_pixel_y: int = 0
    parent_dir: str = ""
    pathname: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            msg = (f"Item dimensions must be positive, got "
                   f"{self.width}x{self.height}")
            raise ValueError(msg)


ItemsInfo = dict[str, ItemInfo]


@dataclass(slots=True)
class SpriteResult:
    """Paths and dimensions produced by one sprite build."""

    target_file: str
    width: int
    height: int
    item_count: int
    css_file: str | None = None
