"""CLI argument parsing and main entry point."""

import argparse
import sys
from pathlib import Path

import hsi_layout_generator.config as hlg_config
import hsi_layout_generator.main as hlg_main
from hsi_layout_generator.config_defaults import (
    DEFAULT_LAYOUT,
    DEFAULT_LAYOUT_HEIGHT,
    DEFAULT_LAYOUT_WIDTH,
    DEFAULT_NUM_CLASSES,
)
from hsi_layout_generator.logging_utils import logger, set_verbosity
from hsi_layout_generator.runtime import resolve_project_version

LAYOUT_CHOICES = [
    "horizontal-stripes",
    "vertical-stripes",
    "grid",
    "random",
    "image",
]


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description="Generate class layouts for synthetic hyperspectral images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Examples:\n"
            f"python {Path(__file__).name} --layout grid --num-classes 2 "
            f"--size 10\n"
            f"python {Path(__file__).name} --layout random --size 400 "
            f"--seed 7 --output layout.npy\n"
            f"python {Path(__file__).name} --layout image --image map.png "
            f"--num-classes 5\n\n"
            "Note:\n"
            "  A size of 0 or below picks an automatic stripe width, tile "
            "width, or blob size"
        ),
    )

    grid = p.add_argument_group("grid")
    grid.add_argument(
        "--width", type=int,
        help=f"Layout width in pixels (default: {DEFAULT_LAYOUT_WIDTH})")
    grid.add_argument(
        "--height", type=int,
        help=f"Layout height in pixels (default: {DEFAULT_LAYOUT_HEIGHT})")
    grid.add_argument(
        "--resize", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"),
        help="Resize after generating, replaying the recorded generator")

    gen = p.add_argument_group("generation")
    gen.add_argument(
        "--layout", choices=LAYOUT_CHOICES,
        help=f"Layout generator (default: {DEFAULT_LAYOUT})")
    gen.add_argument(
        "--num-classes", type=int,
        help=f"Number of classes (default: {DEFAULT_NUM_CLASSES})")
    gen.add_argument(
        "--size", type=int,
        help="Stripe width, tile width, or random blob size")
    gen.add_argument(
        "--image", type=str,
        help="Grayscale or color image for the image layout")
    gen.add_argument(
        "--seed", type=int, help="Random seed")

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str,
        help="Path of a .npy file to save the class map to")
    output.add_argument(
        "--verbose", action="store_true",
        help="Log generator details")
    output.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without generating a layout")

    return p


def log_parameters(
    cfg: hlg_config.LayoutGeneratorConfig,
    args: argparse.Namespace,
) -> None:
    """Log all user-provided parameters."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Layout: %s", cfg.generation.layout)
    logger.info("Dimensions: %dx%d", cfg.grid.width, cfg.grid.height)
    logger.info("Classes: %d", cfg.generation.num_classes)
    logger.info("Size Parameter: %s",
                cfg.generation.size_parameter
                if cfg.generation.size_parameter > 0 else "auto")
    if cfg.generation.image:
        logger.info("Layout Image: %s", cfg.generation.image)
    logger.info("Random Seed: %s",
                cfg.random.seed if cfg.random.seed is not None else "(none)")


def run_from_args(args: argparse.Namespace) -> None:
    """Generate a layout from command-line arguments."""
    base_cfg: hlg_config.LayoutGeneratorConfig | None = None
    if args.config:
        base_cfg = hlg_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = hlg_config.build_config_from_cli(vars(args), base_config=base_cfg)
    set_verbosity(verbose=cfg.output.verbose)
    log_parameters(cfg, args)

    resize_to = tuple(args.resize) if args.resize else None
    hlg_main.generate_layout(cfg, resize_to=resize_to)


def main() -> None:
    """Run the command-line interface for layout generation."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args()
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")

    run_from_args(args)


if __name__ == "__main__":  # pragma: no cover
    main()
