"""CLI argument parsing and main entry point."""

import argparse
import sys
from pathlib import Path

import sprite_maker.config as sm_config
import sprite_maker.main as sm_main
from sprite_maker.config_defaults import (
    DEFAULT_BACKGROUND_ALPHA,
    DEFAULT_LAYOUT_NAME,
)
from sprite_maker.layout import LAYOUTS
from sprite_maker.logging_utils import logger


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description="Combine many small images into a single CSS sprite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Examples:\n"
            f"python {Path(__file__).name} --source-dir icons "
            f"--target sprite.png --css sprite.css\n"
            f"python {Path(__file__).name} --source-dir icons "
            f"--layout FixedDimension --n 8\n"
            f"python {Path(__file__).name} --config sprite.toml\n\n"
            "Note:\n"
            f"  The {DEFAULT_LAYOUT_NAME} layout is used by default."
        ),
    )

    inp = p.add_argument_group("input")
    inp.add_argument(
        "--source-dir", type=str,
        help="Directory scanned recursively for source images")
    inp.add_argument(
        "--ext", type=str, action="append",
        help="Image extension to include (repeatable, e.g. --ext .png)")
    inp.add_argument(
        "--remove-padding", action="store_true", default=None,
        help="Trim transparent borders from each image before layout")
    inp.add_argument(
        "--background-alpha", type=int,
        help=(
            "Alpha value treated as padding when trimming (default: "
            f"{DEFAULT_BACKGROUND_ALPHA})"
        ))

    lay = p.add_argument_group("layout")
    lay.add_argument(
        "--layout", choices=sorted(LAYOUTS),
        help="Layout strategy")
    lay.add_argument(
        "--n", type=int,
        help="Items per row for the FixedDimension layout")

    output = p.add_argument_group("output")
    output.add_argument(
        "--target", type=str, help="Path of the sprite image to write")
    output.add_argument(
        "--css", type=str, help="Path of the stylesheet to write")
    output.add_argument(
        "--css-url", type=str,
        help="URL of the sprite used in the stylesheet")
    output.add_argument(
        "--class-prefix", type=str, help="Prefix for generated class names")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building the sprite")

    return p


def log_parameters(
    cfg: sm_config.SpriteMakerConfig,
    args: argparse.Namespace,
) -> None:
    """Log all effective parameters."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Source Directory: %s", cfg.input.source_dir)
    logger.info("Extensions: %s", ", ".join(cfg.input.extensions))
    logger.info("Remove Padding: %s",
                "Enabled" if cfg.input.remove_source_padding else "Disabled")
    logger.info("Layout: %s", cfg.layout.layout_name)
    if cfg.layout.layout_name == "FixedDimension":
        logger.info("Items Per Row: %d", cfg.layout.n)
    logger.info("Target File: %s", cfg.output.target_file)
    logger.info("Stylesheet: %s", cfg.output.css_file or "(none)")


def run_from_args(args: argparse.Namespace) -> None:
    """Build a sprite sheet from command-line arguments."""
    base_cfg: sm_config.SpriteMakerConfig | None = None
    if args.config:
        base_cfg = sm_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = sm_config.build_config_from_cli(vars(args), base_config=base_cfg)
    log_parameters(cfg, args)

    result = sm_main.make_sprite(cfg)
    logger.info("Placed %d images on a %dx%d sprite",
                result.item_count, result.width, result.height)


def main() -> None:
    """Run the command-line interface for sprite generation."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args()
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")

    run_from_args(args)


if __name__ == "__main__":  # pragma: no cover
    main()
