"""Runtime utilities for output, validation, and version helpers."""

from .output import class_map_path, save_class_map
from .validation import (
    validate_dimensions,
    validate_image_source,
    validate_num_classes,
)
from .version import resolve_project_version

__all__ = [
    "class_map_path",
    "resolve_project_version",
    "save_class_map",
    "validate_dimensions",
    "validate_image_source",
    "validate_num_classes",
]
