"""
Configuration schema and loader for the sprite maker.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from sprite_maker.config_defaults import (
    DEFAULT_BACKGROUND_ALPHA,
    DEFAULT_CLASS_PREFIX,
    DEFAULT_EXTENSIONS,
    DEFAULT_FIXED_DIMENSION_N,
    DEFAULT_LAYOUT_NAME,
    DEFAULT_REMOVE_PADDING,
    DEFAULT_SOURCE_DIR,
    DEFAULT_TARGET_FILE,
)
from sprite_maker.constants import ALPHA_MAX, ALPHA_MIN
from sprite_maker.type_defs import LayoutName, LayoutOptions


class InputConfig(BaseModel):
    """Control where source images come from and how they are measured."""

    source_dir: str = Field(DEFAULT_SOURCE_DIR)
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
    )
    remove_source_padding: bool = DEFAULT_REMOVE_PADDING
    background_alpha: int = Field(
        DEFAULT_BACKGROUND_ALPHA,
        ge=ALPHA_MIN,
        le=ALPHA_MAX,
    )


class LayoutConfig(BaseModel):
    """Select the layout strategy and its options."""

    layout_name: LayoutName = Field(DEFAULT_LAYOUT_NAME)
    n: int = Field(DEFAULT_FIXED_DIMENSION_N, ge=1)

    def layout_options(self) -> LayoutOptions:
        """Return the strategy specific options."""
        return {"n": self.n}


class OutputConfig(BaseModel):
    """Configure the sprite image and stylesheet outputs."""

    target_file: str = Field(DEFAULT_TARGET_FILE)
    css_file: str | None = None
    css_url: str | None = None
    class_prefix: str = Field(DEFAULT_CLASS_PREFIX)


class SpriteMakerConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    # model_validate({}) populates defaults from the Field(...) declarations.
    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> SpriteMakerConfig:
        """
        Load a sprite maker configuration from a TOML file.

        Returns a validated SpriteMakerConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return SpriteMakerConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field)
_CLI_FIELDS: dict[str, tuple[str, str]] = {
    "source_dir": ("input", "source_dir"),
    "ext": ("input", "extensions"),
    "remove_padding": ("input", "remove_source_padding"),
    "background_alpha": ("input", "background_alpha"),
    "layout": ("layout", "layout_name"),
    "n": ("layout", "n"),
    "target": ("output", "target_file"),
    "css": ("output", "css_file"),
    "css_url": ("output", "css_url"),
    "class_prefix": ("output", "class_prefix"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: SpriteMakerConfig | None = None,
) -> SpriteMakerConfig:
    """
    Overlay explicitly provided CLI values on a base configuration.

    Arguments that are absent or None keep the value of ``base_config``
    (or the defaults when no base config is given).
    """
    base = base_config or SpriteMakerConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field) in _CLI_FIELDS.items():
        value = args.get(arg_name)
        if value is None:
            continue
        data[section][field] = value
    return SpriteMakerConfig.model_validate(data)
