"""Helpers for persisting generated class maps."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from hsi_layout_generator.logging_utils import logger


def class_map_path(output: str) -> Path:
    """Return ``output`` with a ``.npy`` suffix, as ``numpy.save`` writes."""
    path = Path(output)
    return path if path.suffix == ".npy" else path.with_suffix(".npy")


def save_class_map(class_map: np.ndarray, output: str) -> Path:
    """
    Save a (height, width) class map as a NumPy array file.

    Parent directories are created as needed.

    Returns:
        The path that was written.

    """
    path = class_map_path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.save(path, np.ascontiguousarray(class_map))
    logger.info("Class map saved to: %s", path)
    return path
