"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path

from hsi_layout_generator.type_defs import LayoutName


def validate_dimensions(width: int, height: int) -> None:
    """Ensure layout dimensions are positive."""
    if width < 1 or height < 1:
        msg = f"Layout dimensions must be positive, got {width}x{height}"
        raise ValueError(msg)


def validate_num_classes(num_classes: int) -> None:
    """Ensure at least one class is requested."""
    if num_classes < 1:
        msg = f"Number of classes must be at least 1, got {num_classes}"
        raise ValueError(msg)


def validate_image_source(layout: LayoutName, image: str | None) -> None:
    """Ensure an image-derived layout points at an existing file."""
    if layout != "image":
        return
    if not image:
        msg = "The image layout requires an image path"
        raise ValueError(msg)
    if not Path(image).is_file():
        msg = f"Layout image not found: {image}"
        raise FileNotFoundError(msg)
