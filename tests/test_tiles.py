import math

import pytest

from tinterrain.tiles import (
    HALF_CIRCUMFERENCE,
    R_EARTH,
    BoundingBox,
    ZoomRange,
    tile_size_in_meters,
)


def test_tile_size_zoom_zero_is_full_circumference():
    assert tile_size_in_meters(0) == 2.0 * HALF_CIRCUMFERENCE
    assert tile_size_in_meters(0) == pytest.approx(2 * math.pi * R_EARTH)


@pytest.mark.parametrize("zoom", range(1, 22))
def test_tile_size_halves_per_zoom(zoom):
    assert tile_size_in_meters(zoom) * 2 == pytest.approx(tile_size_in_meters(zoom - 1))


def test_bounding_box_extent_is_absolute():
    box = BoundingBox(min=(5.0, 8.0), max=(1.0, 2.0))
    assert box.width() == 4.0
    assert box.height() == 6.0


def test_bounding_box_contains_is_inclusive():
    box = BoundingBox(min=(0.0, 0.0), max=(1.0, 2.0))
    assert box.contains(0.0, 0.0)
    assert box.contains(1.0, 2.0)
    assert not box.contains(1.5, 1.0)
    assert box.contains_x(0.5) and not box.contains_y(-0.1)


def test_zoom_range_normalize_swaps():
    zr = ZoomRange(min_zoom=10, max_zoom=3)
    zr.normalize()
    assert (zr.min_zoom, zr.max_zoom) == (3, 10)


def test_zoom_range_normalize_keeps_ordered():
    zr = ZoomRange(min_zoom=2, max_zoom=7)
    zr.normalize()
    assert (zr.min_zoom, zr.max_zoom) == (2, 7)