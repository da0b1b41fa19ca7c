"""Loading and resampling images that drive image-derived layouts."""
from __future__ import annotations

import numpy as np
from PIL import Image

from hsi_layout_generator.constants import COLOR_MODE_GRAYSCALE
from hsi_layout_generator.logging_utils import logger


def load_image(path: str) -> Image.Image:
    """
    Load an image from a file path.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in its stored mode

    Raises:
        FileNotFoundError: If the image file does not exist
        IOError: If the image cannot be opened or processed

    """
    try:
        img = Image.open(path)
        img.load()
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e
    return img


def to_layout_raster(
    img: Image.Image,
    width: int,
    height: int,
) -> np.ndarray:
    """
    Convert an image to a (height, width) array of 8-bit luminance.

    Color images are reduced with Pillow's ITU-R 601-2 luma transform, then
    the result is resampled to exactly match the layout dimensions.
    """
    gray = img.convert(COLOR_MODE_GRAYSCALE)
    if gray.size != (width, height):
        logger.debug("Resampling layout image from %dx%d to %dx%d",
                     gray.width, gray.height, width, height)
        gray = gray.resize((width, height))
    return np.asarray(gray, dtype=np.uint8)


def load_layout_raster(path: str, width: int, height: int) -> np.ndarray:
    """Load an image file as a luminance raster sized to the layout."""
    return to_layout_raster(load_image(path), width, height)
