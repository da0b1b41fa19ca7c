"""
Deterministic periodic layouts: horizontal stripes, vertical stripes, grid.

Each generator takes a grid, a class count, and a size parameter. A size
parameter of zero or below selects an automatic width that fits every
class across the relevant image dimension, capped at
``DEFAULT_MAX_STRIPE_WIDTH``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from hsi_layout_generator.constants import DEFAULT_MAX_STRIPE_WIDTH
from hsi_layout_generator.layout.grid import require_positive_classes
from hsi_layout_generator.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from hsi_layout_generator.layout.grid import LayoutGrid


def effective_band_width(
    size_parameter: int,
    extent: int,
    num_classes: int,
) -> int:
    """
    Resolve the band width in pixels for a stripe or tile layout.

    Args:
        size_parameter: Requested width; zero or below means auto.
        extent: Image dimension the classes are spread across.
        num_classes: Number of classes in the layout.

    Returns:
        ``size_parameter`` when positive, otherwise
        ``min(extent // num_classes, DEFAULT_MAX_STRIPE_WIDTH)`` raised to
        at least one pixel.

    """
    if size_parameter > 0:
        return size_parameter
    return max(1, min(extent // num_classes, DEFAULT_MAX_STRIPE_WIDTH))


def generate_horizontal_stripes(
    grid: LayoutGrid,
    num_classes: int,
    stripe_width: int,
) -> None:
    """Fill whole rows so class bands run left to right."""
    require_positive_classes(num_classes)
    band = effective_band_width(stripe_width, grid.height, num_classes)
    for row in range(grid.height):
        grid.fill_rows(row, row + 1, (row // band) % num_classes)
    logger.debug("Horizontal stripes: %d classes, band height %d",
                 num_classes, band)


def generate_vertical_stripes(
    grid: LayoutGrid,
    num_classes: int,
    stripe_width: int,
) -> None:
    """Fill whole columns so class bands run top to bottom."""
    require_positive_classes(num_classes)
    band = effective_band_width(stripe_width, grid.width, num_classes)
    for col in range(grid.width):
        grid.fill_columns(col, col + 1, (col // band) % num_classes)
    logger.debug("Vertical stripes: %d classes, band width %d",
                 num_classes, band)


def generate_grid(
    grid: LayoutGrid,
    num_classes: int,
    square_width: int,
) -> None:
    """
    Tile the grid with squares whose class steps along both axes.

    The class of a cell is ``(row // tile + col // tile) % num_classes``,
    which lines equal classes up along anti-diagonals. With two classes and
    a tile of one this is a checkerboard.
    """
    require_positive_classes(num_classes)
    tile = effective_band_width(square_width, grid.width, num_classes)
    rows = np.arange(grid.height)[:, np.newaxis] // tile
    cols = np.arange(grid.width)[np.newaxis, :] // tile
    grid.as_writable_array()[:, :] = (rows + cols) % num_classes
    logger.debug("Grid: %d classes, tile width %d", num_classes, tile)
