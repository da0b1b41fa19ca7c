"""Class-index buffer shared by every layout generator."""

from __future__ import annotations

import numpy as np

from hsi_layout_generator.constants import CLASS_MAP_DTYPE, DEFAULT_CLASS_INDEX


def require_positive_classes(num_classes: int) -> None:
    """Fail loudly when a generator is asked for fewer than one class."""
    if num_classes <= 0:
        msg = f"num_classes must be positive, got {num_classes}"
        raise ValueError(msg)


class LayoutGrid:
    """
    A width x height grid of class indices stored row-major.

    Index ``row * width + col`` of ``class_map`` holds the class of the
    pixel at column ``col`` and row ``row``. Every cell holds class 0 after
    construction, ``reset`` and ``resize``.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self.class_map = self._allocate(width, height)

    @staticmethod
    def _allocate(width: int, height: int) -> np.ndarray:
        return np.full(width * height, DEFAULT_CLASS_INDEX,
                       dtype=CLASS_MAP_DTYPE)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Number of pixels in the grid."""
        return self._width * self._height

    def index_of(self, x: int, y: int) -> int:
        """
        Return the linear ``class_map`` index of pixel (x, y).

        Raises:
            IndexError: If the coordinate lies outside the grid. Negative
                values are rejected rather than wrapped.

        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            msg = (f"Pixel ({x}, {y}) is outside the "
                   f"{self._width}x{self._height} layout")
            raise IndexError(msg)
        return y * self._width + x

    def get(self, x: int, y: int) -> int:
        """Return the class index at column ``x`` and row ``y``."""
        return int(self.class_map[self.index_of(x, y)])

    def reset(self) -> None:
        """Set every cell back to the default class."""
        self.class_map.fill(DEFAULT_CLASS_INDEX)

    def resize(self, width: int, height: int) -> None:
        """Reallocate the buffer at the new size, discarding old content."""
        self._width = width
        self._height = height
        self.class_map = self._allocate(width, height)

    def fill_rows(self, start: int, stop: int, class_index: int) -> None:
        """Assign ``class_index`` to every pixel of rows [start, stop)."""
        self.class_map[start * self._width:stop * self._width] = class_index

    def fill_columns(self, start: int, stop: int, class_index: int) -> None:
        """Assign ``class_index`` to every pixel of columns [start, stop)."""
        self.as_writable_array()[:, start:stop] = class_index

    def as_writable_array(self) -> np.ndarray:
        """Return a (height, width) view that writes through to the map."""
        return self.class_map.reshape(self._height, self._width)

    def as_array(self) -> np.ndarray:
        """Return a read-only (height, width) view of the class map."""
        view = self.class_map.reshape(self._height, self._width).view()
        view.flags.writeable = False
        return view
