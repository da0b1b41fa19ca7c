"""Top-level orchestration for configured layout generation."""

from __future__ import annotations

import hsi_layout_generator.image_io as hlg_image_io
import hsi_layout_generator.runtime as hlg_runtime
from hsi_layout_generator.config import LayoutGeneratorConfig
from hsi_layout_generator.layout import LayoutController
from hsi_layout_generator.logging_utils import logger
from hsi_layout_generator.random_utils import (
    current_numpy_seed,
    get_numpy_rng,
    seed_numpy_rng,
)


def build_controller(config: LayoutGeneratorConfig) -> LayoutController:
    """Create a controller sized and seeded from ``config``."""
    if config.random.seed is not None:
        rng = seed_numpy_rng(config.random.seed)
    else:
        rng = get_numpy_rng()
    seed = current_numpy_seed()
    logger.info("Effective Seed: %s", seed if seed is not None else "(none)")
    return LayoutController(config.grid.width, config.grid.height, rng=rng)


def apply_layout(
    controller: LayoutController,
    config: LayoutGeneratorConfig,
) -> None:
    """Run the generator selected in ``config`` on ``controller``."""
    gen = config.generation
    if gen.layout == "horizontal-stripes":
        controller.generate_horizontal_stripes(
            gen.num_classes, gen.size_parameter)
    elif gen.layout == "vertical-stripes":
        controller.generate_vertical_stripes(
            gen.num_classes, gen.size_parameter)
    elif gen.layout == "grid":
        controller.generate_grid(gen.num_classes, gen.size_parameter)
    elif gen.layout == "random":
        controller.generate_random(gen.num_classes, gen.size_parameter)
    else:
        raster = hlg_image_io.load_layout_raster(
            str(gen.image), controller.width, controller.height)
        controller.generate_from_image(gen.num_classes, raster)


def generate_layout(
    config: LayoutGeneratorConfig,
    resize_to: tuple[int, int] | None = None,
) -> LayoutController:
    """
    Generate the configured layout and optionally resize it afterwards.

    Validates the configuration, builds the controller, applies the
    selected generator, replays it at ``resize_to`` when given, and saves
    the class map when an output path is configured.
    """
    hlg_runtime.validate_dimensions(config.grid.width, config.grid.height)
    hlg_runtime.validate_num_classes(config.generation.num_classes)
    hlg_runtime.validate_image_source(
        config.generation.layout, config.generation.image)
    if resize_to is not None:
        hlg_runtime.validate_dimensions(*resize_to)

    controller = build_controller(config)
    apply_layout(controller, config)

    if resize_to is not None:
        controller.resize(*resize_to)

    log_summary(controller, config.generation.num_classes)

    if config.output.output:
        hlg_runtime.save_class_map(controller.class_map, config.output.output)

    return controller


def log_summary(controller: LayoutController, num_classes: int) -> None:
    """Log the layout dimensions and per-class pixel counts."""
    counts = controller.class_counts(num_classes)
    logger.info("Layout: %dx%d (%d pixels)", controller.width,
                controller.height, controller.num_pixels)
    logger.info("Recorded generator: %s",
                controller.record.layout_kind.value)
    for class_index, count in enumerate(counts):
        logger.info("Class %d: %d pixels (%.1f%%)", class_index,
                    int(count), 100.0 * count / controller.num_pixels)
