"""
Layout generation split into the grid buffer, generators, and controller.

The controller is the entry point for collaborators. The generator
modules are exposed for callers that manage their own grid.
"""

from __future__ import annotations

from . import patterns, quantizer, region_growth
from .controller import LayoutController
from .grid import LayoutGrid, require_positive_classes
from .patterns import (
    effective_band_width,
    generate_grid,
    generate_horizontal_stripes,
    generate_vertical_stripes,
)
from .quantizer import intensity_bin_width, quantize_intensity
from .region_growth import effective_blob_size, generate_random_blobs

__all__ = [
    "LayoutController",
    "LayoutGrid",
    "effective_band_width",
    "effective_blob_size",
    "generate_grid",
    "generate_horizontal_stripes",
    "generate_random_blobs",
    "generate_vertical_stripes",
    "intensity_bin_width",
    "patterns",
    "quantize_intensity",
    "quantizer",
    "region_growth",
    "require_positive_classes",
]
