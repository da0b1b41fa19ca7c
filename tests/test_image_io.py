"""
Tests for loading images that drive image-derived layouts.

Covers:
- Loading images and error handling
- Grayscale conversion and resampling to the layout size
"""

import tempfile
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

import hsi_layout_generator.image_io as hlg_image_io


class TestImageLoading:
    def test_load_image_valid(self, gradient_image: Path) -> None:
        img = hlg_image_io.load_image(str(gradient_image))
        assert isinstance(img, Image.Image)
        assert img.size == (256, 4)

    def test_load_image_invalid_path(self) -> None:
        with pytest.raises(FileNotFoundError):
            hlg_image_io.load_image("nonexistent_image.png")

    def test_load_image_invalid_data(self) -> None:
        with tempfile.NamedTemporaryFile(suffix=".png") as f:
            f.write(b"not an image data")
            f.flush()
            with pytest.raises(OSError, match="Error loading image"):
                hlg_image_io.load_image(f.name)


class TestLayoutRaster:
    def test_gray_image_keeps_intensities(
        self,
        gradient_image: Path,
    ) -> None:
        raster = hlg_image_io.load_layout_raster(str(gradient_image), 256, 4)
        assert raster.shape == (4, 256)
        assert raster.dtype == np.uint8
        np.testing.assert_array_equal(raster[0], np.arange(256))

    def test_color_image_is_converted_and_resampled(
        self,
        color_image: Path,
    ) -> None:
        raster = hlg_image_io.load_layout_raster(str(color_image), 8, 4)
        assert raster.shape == (4, 8)
        assert raster[:, 0].max() == 0
        assert raster[:, -1].min() == 255

    def test_to_layout_raster_from_memory(self) -> None:
        img = Image.new("RGB", (10, 10), color=(255, 255, 255))
        raster = hlg_image_io.to_layout_raster(img, 3, 5)
        assert raster.shape == (5, 3)
        assert (raster == 255).all()
