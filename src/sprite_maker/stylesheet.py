"""Stylesheet generation for a laid out sprite sheet."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sprite_maker.constants import CSS_ENCODING
from sprite_maker.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from sprite_maker.layout.base import Layout
    from sprite_maker.type_defs import ItemInfo


def _px(value: int) -> str:
    return "0" if value == 0 else f"{value}px"


def build_css(
    layout: Layout,
    items: Mapping[str, ItemInfo],
    class_names: Mapping[str, str],
    sprite_url: str,
) -> str:
    """
    Return the CSS text for every placed item.

    All classes share one ``background-image`` rule. Each item then gets its
    ``background-position`` (the negated layout coordinate) and its size.
    Items missing from the layout are skipped.
    """
    placed = [item_id for item_id in class_names if item_id in layout]
    if not placed:
        return ""

    selectors = ",\n".join(f".{class_names[item_id]}" for item_id in placed)
    lines = [
        f"{selectors} {{",
        f"  background-image: url('{sprite_url}');",
        "  background-repeat: no-repeat;",
        "  display: inline-block;",
        "}",
    ]
    for item_id in placed:
        coord = layout.get_item_coord(item_id)
        if coord is None:
            continue
        x, y = coord
        info = items[item_id]
        lines.extend([
            "",
            f".{class_names[item_id]} {{",
            f"  background-position: {_px(-x)} {_px(-y)};",
            f"  width: {info.width}px;",
            f"  height: {info.height}px;",
            "}",
        ])
    return "\n".join(lines) + "\n"


def write_css(css: str, css_path: str | Path) -> Path:
    """Write stylesheet text to ``css_path``, creating parent folders."""
    out_path = Path(css_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(css, encoding=CSS_ENCODING)
    logger.info("Stylesheet saved to: %s", out_path)
    return out_path
