"""
Single entry point for generating and resizing class layouts.

The controller owns the grid and remembers the last replayable generation
call as a ``GenerationRecord``. Resizing the grid replays that call at the
new dimensions so the layout keeps its kind and parameters.

The controller is not thread-safe. It assumes a single writer, and reads
through ``get_class_at`` must not overlap a generate or resize call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from hsi_layout_generator.config_defaults import (
    DEFAULT_LAYOUT_HEIGHT,
    DEFAULT_LAYOUT_WIDTH,
)
from hsi_layout_generator.layout import patterns, quantizer, region_growth
from hsi_layout_generator.layout.grid import LayoutGrid
from hsi_layout_generator.logging_utils import logger
from hsi_layout_generator.random_utils import get_numpy_rng
from hsi_layout_generator.type_defs import GenerationRecord, LayoutKind

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable


class LayoutController:
    """Generate layouts into an owned grid and replay them on resize."""

    def __init__(
        self,
        width: int = DEFAULT_LAYOUT_WIDTH,
        height: int = DEFAULT_LAYOUT_HEIGHT,
        rng: np.random.Generator | None = None,
    ) -> None:
        """
        Args:
            width: Initial grid width in pixels.
            height: Initial grid height in pixels.
            rng: Generator for random layouts. Defaults to the shared
                generator from ``random_utils``.

        """
        self._grid = LayoutGrid(width, height)
        self._record = GenerationRecord()
        self._rng = rng if rng is not None else get_numpy_rng()
        self._replay: dict[LayoutKind, Callable[[int, int], None]] = {
            LayoutKind.HORIZONTAL_STRIPES: self.generate_horizontal_stripes,
            LayoutKind.VERTICAL_STRIPES: self.generate_vertical_stripes,
            LayoutKind.GRID: self.generate_grid,
            LayoutKind.RANDOM: self.generate_random,
        }

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def num_pixels(self) -> int:
        return self._grid.size

    @property
    def record(self) -> GenerationRecord:
        """The last replayable generation call."""
        return self._record

    @property
    def class_map(self) -> np.ndarray:
        """Read-only (height, width) view of the current layout."""
        return self._grid.as_array()

    def get_class_at(self, x: int, y: int) -> int:
        """Return the class of the pixel at column ``x`` and row ``y``."""
        return self._grid.get(x, y)

    def class_counts(self, num_classes: int | None = None) -> np.ndarray:
        """
        Count pixels per class.

        ``num_classes`` defaults to the recorded class count, widened when
        needed to cover the largest index present in the map.
        """
        minlength = num_classes or self._record.num_classes
        return np.bincount(self._grid.class_map, minlength=minlength)

    def _remember(
        self,
        kind: LayoutKind,
        num_classes: int,
        size_parameter: int,
    ) -> None:
        self._record = GenerationRecord(kind, num_classes, size_parameter)
        logger.debug("Generated %s layout at %dx%d (classes=%d, size=%d)",
                     kind.value, self.width, self.height,
                     num_classes, size_parameter)

    def generate_horizontal_stripes(
        self,
        num_classes: int,
        stripe_width: int,
    ) -> None:
        patterns.generate_horizontal_stripes(
            self._grid, num_classes, stripe_width)
        self._remember(LayoutKind.HORIZONTAL_STRIPES, num_classes,
                       stripe_width)

    def generate_vertical_stripes(
        self,
        num_classes: int,
        stripe_width: int,
    ) -> None:
        patterns.generate_vertical_stripes(
            self._grid, num_classes, stripe_width)
        self._remember(LayoutKind.VERTICAL_STRIPES, num_classes,
                       stripe_width)

    def generate_grid(self, num_classes: int, square_width: int) -> None:
        patterns.generate_grid(self._grid, num_classes, square_width)
        self._remember(LayoutKind.GRID, num_classes, square_width)

    def generate_random(
        self,
        num_classes: int,
        blob_size: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        """
        Partition the grid into random connected blobs.

        ``rng`` overrides the controller's generator for this call only.
        Replays on resize always use the controller's generator.
        """
        region_growth.generate_random_blobs(
            self._grid,
            num_classes,
            blob_size,
            rng if rng is not None else self._rng,
        )
        self._remember(LayoutKind.RANDOM, num_classes, blob_size)

    def generate_from_image(
        self,
        num_classes: int,
        raster: np.ndarray,
    ) -> None:
        """
        Bin a grayscale raster of the grid's exact size into classes.

        The record is left untouched, so a later resize replays whatever
        pattern was recorded before, or leaves a blank grid if none was.
        """
        quantizer.quantize_intensity(self._grid, num_classes, raster)

    def reset(self) -> None:
        """Set every pixel to class 0. The record is kept."""
        self._grid.reset()

    def resize(self, width: int, height: int) -> None:
        """Reallocate the grid and replay the recorded generator, if any."""
        self._grid.resize(width, height)
        logger.debug("Resized layout to %dx%d", width, height)
        replay = self._replay.get(self._record.layout_kind)
        if replay is not None:
            replay(self._record.num_classes, self._record.size_parameter)
