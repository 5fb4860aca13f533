"""Regular grids of values placed in world coordinates.

Row 0 of the data is the top row. World coordinates have their origin at
the lower left corner of the grid: ``pos_x``/``pos_y`` give that corner and
``cell_size`` the edge length of one cell.
"""

from __future__ import annotations

import math
import sys
from typing import Iterator

import numpy as np

from .geometrix import BBox2D
from .log import LogLevel, log

__all__ = ["Raster", "DEFAULT_NO_DATA_VALUE"]

DEFAULT_NO_DATA_VALUE = sys.float_info.max


class Raster:
    """A two-dimensional grid of values with geo-referencing parameters."""

    def __init__(self, width: int = 0, height: int = 0, dtype=np.float64) -> None:
        self.dtype = np.dtype(dtype)
        self.pos_x = 0.0
        self.pos_y = 0.0
        self.cell_size = 1.0
        self.no_data_value = (
            DEFAULT_NO_DATA_VALUE if self.dtype.kind == "f" else self.dtype.type(0).item()
        )
        self.data = np.zeros((0, 0), dtype=self.dtype)
        if width or height:
            self.allocate(width, height)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def clone(self) -> "Raster":
        """Deep copy of data and parameters."""
        ret = Raster(dtype=self.dtype)
        ret.data = self.data.copy()
        ret.copy_parameters(self)
        return ret

    def copy_parameters(self, other: "Raster") -> None:
        """Take over position, cell size and no-data value, but not the size."""
        self.pos_x = other.pos_x
        self.pos_y = other.pos_y
        self.cell_size = other.cell_size
        self.no_data_value = other.no_data_value

    def clear(self) -> None:
        """Drop all data and reset parameters except the no-data value."""
        self.data = np.zeros((0, 0), dtype=self.dtype)
        self.pos_x = 0.0
        self.pos_y = 0.0
        self.cell_size = 0.0

    def allocate(self, width: int, height: int) -> None:
        """Replace the data with a zero-filled grid of the given size."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid raster size {width}x{height}")
        self.data = np.zeros((int(height), int(width)), dtype=self.dtype)

    def set_all(self, value) -> None:
        """Set every cell to ``value``."""
        self.data.fill(value)

    def count(self, value) -> int:
        """Number of cells equal to ``value``."""
        return int(np.count_nonzero(self.data == value))

    def crop(self, cx: int, cy: int, cw: int, ch: int) -> "Raster":
        """Sub raster with top-left origin indices, clamped to the grid.

        The result has its position set so that its cells keep their world
        coordinates.
        """
        max_x = cx + cw
        max_y = cy + ch
        min_x = cx
        min_y = cy

        if max_x > self.width:
            log(LogLevel.DEBUG, f"raster.crop - max x {max_x} larger than width {self.width}")
        if max_y > self.height:
            log(LogLevel.DEBUG, f"raster.crop - max y {max_y} larger than height {self.height}")
        if min_x < 0:
            log(LogLevel.DEBUG, f"raster.crop - min x {min_x} smaller than zero")
        if min_y < 0:
            log(LogLevel.DEBUG, f"raster.crop - min y {min_y} smaller than zero")

        max_x = min(max_x, self.width)
        max_y = min(max_y, self.height)
        min_x = max(min_x, 0)
        min_y = max(min_y, 0)

        crop_width = max(max_x - min_x, 0)
        crop_height = max(max_y - min_y, 0)

        dst = Raster(dtype=self.dtype)
        dst.allocate(crop_width, crop_height)
        dst.no_data_value = self.no_data_value
        dst.set_all(self.no_data_value)
        dst.cell_size = self.cell_size
        dst.pos_x = self.col2x(min_x) - 0.5 * self.cell_size
        dst.pos_y = self.row2y(max_y - 1) - 0.5 * self.cell_size
        if crop_width and crop_height:
            dst.data[:, :] = self.data[min_y:max_y, min_x:max_x]
        return dst

    def crop_ll(self, cx: int, cy: int, cw: int, ch: int) -> "Raster":
        """Like :meth:`crop`, with the row index counted from the bottom."""
        return self.crop(cx, self.height - (cy + ch), cw, ch)

    def get_bounding_box(self) -> BBox2D:
        """Box spanned by the centres of the outermost cells."""
        return BBox2D(
            (self.col_ll2x(0), self.row_ll2y(0)),
            (self.col_ll2x(self.width - 1), self.row_ll2y(self.height - 1)),
        )

    def value(self, r: int, c: int):
        """Value at row ``r`` (from the top) and column ``c``."""
        return self.data[r, c].item()

    def value_ll(self, r: int, c: int):
        """Value at row ``r`` (from the bottom) and column ``c``."""
        return self.data[self.height - 1 - r, c].item()

    def set_value(self, r: int, c: int, v) -> None:
        self.data[r, c] = v

    def set_value_ll(self, r: int, c: int, v) -> None:
        self.data[self.height - 1 - r, c] = v

    def col2x(self, c: int) -> float:
        """World x of the centre of column ``c``."""
        return self.pos_x + (c + 0.5) * self.cell_size

    def x2col(self, x: float) -> int:
        """Column whose centre is nearest to world x; 0 without a cell size."""
        if self.cell_size > 0:
            return int(0.5 + (x - self.pos_x - 0.5 * self.cell_size) / self.cell_size)
        return 0

    def y2row(self, y: float) -> int:
        """Row (from the top) whose centre is nearest to world y."""
        if self.cell_size > 0:
            r_ll = int(0.5 + (y - self.pos_y - 0.5 * self.cell_size) / self.cell_size)
            return self.height - r_ll - 1
        return 0

    def row2y(self, r: int) -> float:
        """World y of the centre of row ``r`` counted from the top."""
        r_ll = self.height - 1 - r
        return self.pos_y + (r_ll + 0.5) * self.cell_size

    def row_ll2y(self, r: int) -> float:
        """World y of the centre of row ``r`` counted from the bottom."""
        return self.pos_y + (r + 0.5) * self.cell_size

    def col_ll2x(self, c: int) -> float:
        return self.col2x(c)

    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def to_vertices(self) -> Iterator[tuple[float, float, float]]:
        """Yield (x, y, value) for every cell, top row first.

        Coordinates are those of the cells' lower left corners.
        """
        cs = self.cell_size
        height = self.height
        for r, row in enumerate(self.data):
            y = self.pos_y + (height - r - 1) * cs
            for c, z in enumerate(row):
                yield (self.pos_x + c * cs, y, z.item())

    def is_no_data(self, value) -> bool:
        """Return True if ``value`` is NaN or the no-data marker."""
        if isinstance(value, float) and math.isnan(value):
            return True
        return value == self.no_data_value