"""
Randomized region growth that partitions a grid into connected blobs.

Blobs are grown one at a time. Each blob gets a random class, starts from
an unfilled seed pixel, and expands through 4-connected unfilled neighbours
until it reaches the target size or runs out of room. The next blob then
starts from whatever is still unfilled, so the whole grid is covered
exactly once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from hsi_layout_generator.constants import (
    DEFAULT_MAX_BLOB_SIZE,
    NEIGHBOR_OFFSETS,
)
from hsi_layout_generator.layout.grid import require_positive_classes
from hsi_layout_generator.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from hsi_layout_generator.layout.grid import LayoutGrid


def effective_blob_size(
    blob_size: int,
    num_pixels: int,
    num_classes: int,
) -> int:
    """Resolve the target blob size; zero or below means auto."""
    if blob_size > 0:
        return blob_size
    return max(1, min(num_pixels // num_classes, DEFAULT_MAX_BLOB_SIZE))


def _next_unfilled(filled: bytearray, start_index: int) -> int:
    """Scan forward from ``start_index``, wrapping, to an unfilled cell."""
    index = filled.find(0, start_index)
    if index < 0:
        index = filled.find(0, 0, start_index)
    return index


def _unfilled_neighbors(
    index: int,
    width: int,
    height: int,
    filled: bytearray,
) -> list[int]:
    """Return the in-bounds unfilled 4-neighbours of a cell."""
    row, col = divmod(index, width)
    candidates = []
    for d_row, d_col in NEIGHBOR_OFFSETS:
        n_row = row + d_row
        if n_row < 0 or n_row >= height:
            continue
        n_col = col + d_col
        if n_col < 0 or n_col >= width:
            continue
        neighbor = n_row * width + n_col
        if not filled[neighbor]:
            candidates.append(neighbor)
    return candidates


def generate_random_blobs(
    grid: LayoutGrid,
    num_classes: int,
    blob_size: int,
    rng: np.random.Generator,
) -> int:
    """
    Fill ``grid`` with random connected blobs of at most ``blob_size``.

    The seed of each blob is found by drawing a start index from
    ``[0, remaining)`` and scanning forward to the next unfilled cell. This
    favours cells that follow long filled runs.

    Args:
        grid: Grid to overwrite in place.
        num_classes: Classes are drawn uniformly from [0, num_classes).
        blob_size: Maximum pixels per blob; zero or below means auto.
        rng: Source of all random draws.

    Returns:
        The number of blobs grown.

    """
    require_positive_classes(num_classes)
    width, height = grid.width, grid.height
    target = effective_blob_size(blob_size, grid.size, num_classes)
    classes = [0] * grid.size
    filled = bytearray(grid.size)
    remaining = grid.size
    num_blobs = 0

    while remaining > 0:
        current_class = int(rng.integers(num_classes))
        seed_index = _next_unfilled(filled, int(rng.integers(remaining)))
        classes[seed_index] = current_class
        filled[seed_index] = 1
        remaining -= 1
        num_blobs += 1

        frontier = [seed_index]
        grown = 1
        while grown < target and remaining > 0 and frontier:
            edge_position = int(rng.integers(len(frontier)))
            candidates = _unfilled_neighbors(
                frontier[edge_position], width, height, filled)
            if not candidates:
                # Pruning an exhausted edge does not count as a growth step.
                del frontier[edge_position]
                continue
            neighbor = candidates[int(rng.integers(len(candidates)))]
            classes[neighbor] = current_class
            filled[neighbor] = 1
            frontier.append(neighbor)
            remaining -= 1
            grown += 1

    grid.class_map[:] = classes
    logger.debug("Random blobs: %d classes, target size %d, %d blobs",
                 num_classes, target, num_blobs)
    return num_blobs
