"""Shared default values for user-facing configuration settings."""
from hsi_layout_generator.type_defs import LayoutName

# Grid
DEFAULT_LAYOUT_WIDTH = 500
DEFAULT_LAYOUT_HEIGHT = 500

# Generation
DEFAULT_LAYOUT: LayoutName = "random"
DEFAULT_NUM_CLASSES = 4
# Zero or below means auto-compute per layout
DEFAULT_SIZE_PARAMETER = 0

# Reproducibility
DEFAULT_SEED: int | None = None

# Output
DEFAULT_VERBOSE = False
