"""
Constants used internally by the layout generator.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Upper bound on an auto-computed stripe or tile width. The effective width
# is smaller when the classes would not otherwise fit across the image.
DEFAULT_MAX_STRIPE_WIDTH = 25

# Upper bound on an auto-computed random blob size (one default tile).
DEFAULT_MAX_BLOB_SIZE = DEFAULT_MAX_STRIPE_WIDTH ** 2

# Grayscale intensity levels of an 8-bit raster
INTENSITY_LEVELS = 256

# The class every cell holds after construction, resize, or reset
DEFAULT_CLASS_INDEX = 0

# Growth order for region growth: left, right, top, bottom (row, col)
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
)

# Internal image modes
COLOR_MODE_GRAYSCALE = "L"

# Storage type of the class map
CLASS_MAP_DTYPE = "int32"
