"""Top-level orchestration for building a sprite sheet."""

from pathlib import Path

import sprite_maker.compose as sm_compose
import sprite_maker.image_io as sm_image_io
import sprite_maker.naming as sm_naming
import sprite_maker.stylesheet as sm_stylesheet
from sprite_maker.config import SpriteMakerConfig
from sprite_maker.layout import build_layout
from sprite_maker.logging_utils import logger
from sprite_maker.type_defs import SpriteResult


def make_sprite(config: SpriteMakerConfig) -> SpriteResult:
    """
    Build the sprite sheet, and optionally its stylesheet, from config.

    Raises:
        FileNotFoundError: If the source directory does not exist.
        ValueError: If no image could be loaded from the source directory.

    """
    paths = sm_image_io.discover_images(
        config.input.source_dir,
        config.input.extensions,
    )
    items, sources = sm_image_io.collect_items(
        paths,
        remove_padding=config.input.remove_source_padding,
        background_alpha=config.input.background_alpha,
    )
    if not items:
        msg = f"No images found in {config.input.source_dir}"
        raise ValueError(msg)

    layout = build_layout(
        config.layout.layout_name,
        items,
        config.layout.layout_options(),
    )
    missing = len(items) - len(layout)
    if missing:
        logger.warning("%d images could not be placed in the layout", missing)

    target = sm_compose.save_sprite(
        layout, items, sources, config.output.target_file,
    )

    css_path: Path | None = None
    if config.output.css_file:
        class_names = sm_naming.allocate_class_names(
            sources, config.output.class_prefix,
        )
        css = sm_stylesheet.build_css(
            layout,
            items,
            class_names,
            config.output.css_url or target.name,
        )
        css_path = sm_stylesheet.write_css(css, config.output.css_file)

    return SpriteResult(
        target_file=str(target),
        width=layout.width(),
        height=layout.height(),
        item_count=len(layout),
        css_file=str(css_path) if css_path else None,
    )
