"""
Test configuration and shared fixtures for hsi_layout_generator.

This module defines reusable pytest fixtures for seeded generators,
controllers, layout images, and logger setup. These fixtures support all
test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Generator
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

import hsi_layout_generator.random_utils as hlg_random_utils
from hsi_layout_generator.layout import LayoutController, LayoutGrid
from hsi_layout_generator.logging_utils import logger


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded NumPy generator for reproducible layouts."""
    return np.random.default_rng(1234)


@pytest.fixture
def make_grid() -> Callable[[int, int], LayoutGrid]:
    """Factory for empty grids of a given size."""

    def _make(width: int, height: int) -> LayoutGrid:
        return LayoutGrid(width, height)

    return _make


@pytest.fixture
def make_controller(
    rng: np.random.Generator,
) -> Callable[..., LayoutController]:
    """Factory for controllers that draw from the seeded generator."""

    def _make(width: int = 10, height: int = 10) -> LayoutController:
        return LayoutController(width, height, rng=rng)

    return _make


@pytest.fixture
def gradient_image(tmp_path: Path) -> Path:
    """
    Create and save a 256x4 grayscale image ramping from 0 to 255.

    Returns:
        Path to the saved image.

    """
    ramp = np.tile(np.arange(256, dtype=np.uint8), (4, 1))
    path = tmp_path / "gradient.png"
    Image.fromarray(ramp).save(path)
    return path


@pytest.fixture
def color_image(tmp_path: Path) -> Path:
    """
    Create and save a 32x16 RGB image, left half black, right half white.

    Returns:
        Path to the saved image.

    """
    img = Image.new("RGB", (32, 16), color="black")
    img.paste((255, 255, 255), (16, 0, 32, 16))
    path = tmp_path / "halves.png"
    img.save(path)
    return path


@pytest.fixture
def restore_rng_state() -> Generator[None, None, None]:
    """Restore the shared NumPy generator after a test seeds it."""
    prev_seed = hlg_random_utils._STATE.seed
    prev_gen = hlg_random_utils._STATE.generator
    yield
    hlg_random_utils._STATE.seed = prev_seed
    hlg_random_utils._STATE.generator = prev_gen


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the shared logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
