"""Map grayscale intensities onto class indices by equal-width binning."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from hsi_layout_generator.constants import INTENSITY_LEVELS
from hsi_layout_generator.layout.grid import require_positive_classes
from hsi_layout_generator.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from hsi_layout_generator.layout.grid import LayoutGrid


def intensity_bin_width(num_classes: int) -> int:
    """Return the number of intensity levels that share one class."""
    return max(1, INTENSITY_LEVELS // num_classes)


def quantize_intensity(
    grid: LayoutGrid,
    num_classes: int,
    raster: np.ndarray,
) -> None:
    """
    Assign each pixel the class of its intensity bin.

    The class is ``intensity // (256 // num_classes)`` clamped to
    ``num_classes - 1``. Without the clamp, intensity 255 would land one
    past the last class whenever 256 is not a multiple of ``num_classes``.

    Args:
        grid: Grid to overwrite in place.
        num_classes: Number of intensity bins.
        raster: Intensities in [0, 255], shaped (height, width) to match
            the grid exactly.

    Raises:
        ValueError: If ``num_classes`` is not positive or the raster shape
            does not match the grid.

    """
    require_positive_classes(num_classes)
    expected = (grid.height, grid.width)
    if raster.shape != expected:
        msg = (f"Raster shape {raster.shape} does not match layout "
               f"shape {expected}")
        raise ValueError(msg)

    intensities = np.asarray(raster, dtype=np.int64)
    bin_width = intensity_bin_width(num_classes)
    classes = intensities // bin_width
    grid.as_writable_array()[:, :] = np.clip(classes, 0, num_classes - 1)
    logger.debug("Image layout: %d classes, bin width %d",
                 num_classes, bin_width)
