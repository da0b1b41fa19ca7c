"""Tests for intensity-binned image layouts."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from hsi_layout_generator.layout import quantizer
from hsi_layout_generator.layout.grid import LayoutGrid

GridFactory = Callable[[int, int], LayoutGrid]


def _ramp(width: int = 256) -> np.ndarray:
    return np.arange(width, dtype=np.uint8).reshape(1, width)


class TestIntensityBinWidth:
    @pytest.mark.parametrize(
        ("num_classes", "expected"),
        [(1, 256), (4, 64), (3, 85), (256, 1), (1000, 1)],
    )
    def test_bin_width(self, num_classes: int, expected: int) -> None:
        assert quantizer.intensity_bin_width(num_classes) == expected


class TestQuantizeIntensity:
    def test_four_classes_extremes(self, make_grid: GridFactory) -> None:
        grid = make_grid(256, 1)
        quantizer.quantize_intensity(grid, 4, _ramp())
        assert grid.get(0, 0) == 0
        assert grid.get(255, 0) == 3
        assert grid.get(64, 0) == 1

    def test_max_intensity_is_clamped(self, make_grid: GridFactory) -> None:
        grid = make_grid(256, 1)
        quantizer.quantize_intensity(grid, 3, _ramp())
        assert grid.get(254, 0) == 2
        assert grid.get(255, 0) == 2
        assert grid.class_map.max() == 2

    def test_more_classes_than_levels(self, make_grid: GridFactory) -> None:
        grid = make_grid(256, 1)
        quantizer.quantize_intensity(grid, 1000, _ramp())
        np.testing.assert_array_equal(grid.class_map, np.arange(256))

    def test_row_and_column_orientation(
        self,
        make_grid: GridFactory,
    ) -> None:
        grid = make_grid(3, 2)
        raster = np.array([[0, 0, 255], [0, 0, 0]], dtype=np.uint8)
        quantizer.quantize_intensity(grid, 2, raster)
        assert grid.get(2, 0) == 1
        assert grid.get(0, 1) == 0

    def test_shape_mismatch_raises(self, make_grid: GridFactory) -> None:
        grid = make_grid(4, 3)
        with pytest.raises(ValueError, match="does not match"):
            quantizer.quantize_intensity(
                grid, 2, np.zeros((4, 3), dtype=np.uint8))

    def test_non_positive_classes_raise(
        self,
        make_grid: GridFactory,
    ) -> None:
        grid = make_grid(2, 2)
        with pytest.raises(ValueError, match="num_classes"):
            quantizer.quantize_intensity(
                grid, 0, np.zeros((2, 2), dtype=np.uint8))
