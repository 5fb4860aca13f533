"""Operations on height rasters: resampling, filtering, flipping and gap filling."""

from __future__ import annotations

import math
import sys
from typing import Sequence

import numpy as np

from .geometrix import BBox3D
from .raster import Raster

__all__ = [
    "MAX_AVERAGING_SAMPLES",
    "integer_downsample_mean",
    "convolution_filter",
    "max_filter",
    "flip_data_x",
    "flip_data_y",
    "find_minmax",
    "get_bounding_box3d",
    "sample_nearest_valid_avg",
]

MAX_AVERAGING_SAMPLES = 64


def _check_odd_size(size: int) -> None:
    if size < 1 or size % 2 == 0:
        raise ValueError("kernel size must be odd")


def integer_downsample_mean(src: Raster, window_size: int) -> Raster:
    """Downsample by an integer factor, taking the mean of each window.

    Cells holding the no-data value are left out of the mean. A window
    without valid cells, or whose sum is not positive, yields no-data.
    The output size is truncated to whole windows.
    """
    if window_size < 1:
        raise ValueError("window size must be at least 1")
    win = window_size
    ws = src.width // win
    hs = src.height // win
    ndv = src.no_data_value

    dst = Raster(ws, hs)
    dst.copy_parameters(src)
    dst.cell_size = src.cell_size * win
    dst.set_all(ndv)
    if ws == 0 or hs == 0:
        return dst

    blocks = src.data[: hs * win, : ws * win].reshape(hs, win, ws, win)
    valid = blocks != ndv
    counts = valid.sum(axis=(1, 3))
    sums = np.where(valid, blocks, 0.0).sum(axis=(1, 3))

    with np.errstate(invalid="ignore", divide="ignore"):
        means = sums / np.maximum(counts, 1)
        take = (counts > 0) & (sums > 0)
    dst.data[take] = means[take]
    return dst


def convolution_filter(src: Raster, kernel: Sequence[float], size: int) -> Raster:
    """Convolve with a square ``size`` x ``size`` kernel given row by row.

    No-data cells of the source contribute nothing; border cells that the
    kernel does not fully cover are set to no-data.
    """
    _check_odd_size(size)
    kernel = list(kernel)
    if len(kernel) < size * size:
        raise ValueError(f"kernel needs {size * size} values, got {len(kernel)}")

    w, h = src.width, src.height
    dst = Raster(w, h)
    dst.copy_parameters(src)
    dst.set_all(dst.no_data_value)

    s2 = size // 2
    inner_h = h - 2 * s2
    inner_w = w - 2 * s2
    if inner_h <= 0 or inner_w <= 0:
        return dst

    ndv = src.no_data_value
    acc = np.zeros((inner_h, inner_w), dtype=np.float64)
    for i in range(size):
        for j in range(size):
            window = src.data[i : i + inner_h, j : j + inner_w]
            acc += np.where(window != ndv, window * kernel[i * size + j], 0.0)
    dst.data[s2 : s2 + inner_h, s2 : s2 + inner_w] = acc
    return dst


def max_filter(src: Raster, size: int, pos: float, factor: float) -> Raster:
    """Mark local maxima: cells at least ``factor`` times their window maximum get ``pos``.

    All other cells of the result hold the default no-data value.
    """
    _check_odd_size(size)
    w, h = src.width, src.height
    dst = Raster(w, h)
    dst.set_all(dst.no_data_value)

    s2 = size // 2
    inner_h = h - 2 * s2
    inner_w = w - 2 * s2
    if inner_h <= 0 or inner_w <= 0:
        return dst

    window_max = np.full((inner_h, inner_w), -sys.float_info.max)
    for i in range(size):
        for j in range(size):
            window_max = np.fmax(window_max, src.data[i : i + inner_h, j : j + inner_w])

    centre = src.data[s2 : s2 + inner_h, s2 : s2 + inner_w]
    with np.errstate(invalid="ignore", over="ignore"):
        peaks = centre >= window_max * factor
    dst.data[s2 : s2 + inner_h, s2 : s2 + inner_w][peaks] = pos
    return dst


def flip_data_x(raster: Raster) -> None:
    """Mirror the raster data left to right in place."""
    raster.data[:] = raster.data[:, ::-1].copy()


def flip_data_y(raster: Raster) -> None:
    """Mirror the raster data top to bottom in place."""
    raster.data[:] = raster.data[::-1, :].copy()


def find_minmax(raster: Raster) -> tuple[float, float]:
    """Return the smallest and largest valid values as ``(min, max)``.

    The search starts from the top-left cell, whatever it holds.
    """
    if raster.data.size == 0:
        raise ValueError("cannot find min/max of an empty raster")

    start = raster.value(0, 0)
    data = raster.data
    valid = data[~(np.isnan(data) | (data == raster.no_data_value))]
    if valid.size == 0:
        return (start, start)

    lo = float(valid.min())
    hi = float(valid.max())
    if not math.isnan(start):
        lo = min(lo, start)
        hi = max(hi, start)
    return (lo, hi)


def get_bounding_box3d(raster: Raster) -> BBox3D:
    """Treat the raster as a DEM and return its 3D bounding box."""
    try:
        min_height, max_height = find_minmax(raster)
    except ValueError:
        min_height, max_height = 0.0, 0.0
    bbox2d = raster.get_bounding_box()
    return BBox3D(
        (bbox2d.min[0], bbox2d.min[1], min_height),
        (bbox2d.max[0], bbox2d.max[1], max_height),
    )


def _is_no_data(z: float, no_data_value: float) -> bool:
    return z == no_data_value or math.isnan(z)


def _average_ignoring_nan(values: Sequence[float]) -> float:
    valid = [v for v in values if not math.isnan(v)]
    if not valid:
        return math.nan
    return sum(valid) / len(valid)


def _subsample_3x3(src: Raster, no_data_value: float, r: int, c: int) -> float:
    """Weighted 3x3 average around (r, c); centre counts most, corners least."""
    w, h = src.width, src.height
    data = src.data

    def pixel(rr: int, cc: int) -> float:
        if 0 <= rr < h and 0 <= cc < w:
            v = float(data[rr, cc])
            return math.nan if v == no_data_value else v
        return math.nan

    centre = pixel(r, c)
    cross = [pixel(r - 1, c), pixel(r, c - 1), pixel(r, c + 1), pixel(r + 1, c)]
    diag = [pixel(r - 1, c - 1), pixel(r - 1, c + 1), pixel(r + 1, c - 1), pixel(r + 1, c + 1)]

    cross_avg = _average_ignoring_nan(cross)
    diag_avg = _average_ignoring_nan(diag)
    return _average_ignoring_nan([centre, centre, centre, cross_avg, cross_avg, diag_avg])


def sample_nearest_valid_avg(
    src: Raster, row: int, column: int, min_averaging_samples: int = 1
) -> float:
    """Return the value at (row, column), or an estimate from the nearest valid cells.

    If the cell holds no data, rings of growing radius around it are walked
    and smoothed samples are averaged until at least ``min_averaging_samples``
    (capped at 64) valid samples were found. NaN if none were found.
    Coordinates outside the raster give 0.
    """
    if row < 0 or column < 0:
        raise ValueError("row and column must not be negative")
    min_samples = min(min_averaging_samples, MAX_AVERAGING_SAMPLES)

    w, h = src.width, src.height
    max_radius = int(math.sqrt(w * w + h * h))
    no_data_value = src.no_data_value

    z = src.value(row, column) if row < h and column < w else 0.0
    if not _is_no_data(z, no_data_value):
        return z

    avg = 0.0
    avg_count = 0

    def putpixel(x: int, y: int) -> None:
        nonlocal avg, avg_count
        sample = _subsample_3x3(src, no_data_value, row + y, column + x)
        if not _is_no_data(sample, no_data_value):
            avg_count += 1
            avg += (sample - avg) / avg_count

    for radius in range(2, max_radius + 1):
        if avg_count >= min_samples:
            break
        half = radius // 2
        x = radius - 1
        y = 0
        dx = 1
        dy = 1
        err = dx - half
        while x >= y:
            for px, py in (
                (x, y), (y, x), (-y, x), (-x, y),
                (-x, -y), (-y, -x), (y, -x), (x, -y),
            ):
                putpixel(px, py)
            if err <= 0:
                y += 1
                err += dy
                dy += 2
            else:
                x -= 1
                dx += 2
                err += dx - half

    return math.nan if avg_count == 0 else avg