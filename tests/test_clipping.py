import math

import pytest

from tinterrain.clipping import (
    clip_25d_triangle_by_line,
    clip_25d_triangles_to_01_quadrant,
    compare_length,
    intersect_25d_linesegment_by_line,
    make_front_facing,
    sign_2d,
)
from tinterrain.geometrix import EPS, is_facing_upwards

NAN3 = pytest.approx((math.nan, math.nan, math.nan), nan_ok=True)


def test_intersection_interpolates_height():
    result = intersect_25d_linesegment_by_line((0, 0, 0), (2, 0, 2), (1, -1), (0, 1))
    assert result == pytest.approx((1.0, 0.0, 1.0))


def test_intersection_parallel_is_nan():
    result = intersect_25d_linesegment_by_line((0, 0, 0), (2, 0, 2), (0, 1), (1, 0))
    assert tuple(result) == NAN3


def test_intersection_outside_segment_is_nan():
    result = intersect_25d_linesegment_by_line((0, 0, 0), (0.5, 0, 0.5), (1, 0), (0, 1))
    assert tuple(result) == NAN3


def test_intersection_has_no_negative_zero():
    result = intersect_25d_linesegment_by_line((-1, 0, 0), (1, 0, 0), (0, 0), (0, 1))
    assert result[0] == 0.0
    assert math.copysign(1.0, result[0]) == 1.0
    assert math.copysign(1.0, result[1]) == 1.0


@pytest.mark.parametrize(
    "l_dir", [(0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-2, 3)]
)
def test_sign_flips_with_direction(l_dir):
    p = (0.3, 0.9, 0.0)
    org = (0.0, 0.0)
    reversed_dir = (-l_dir[0], -l_dir[1])
    assert sign_2d(p, org, l_dir) == -sign_2d(p, org, reversed_dir)


@pytest.mark.parametrize("l_org, l_dir", [((0, 0), (1, 0)), ((1, 0), (0, 1)),
                                          ((1, 1), (-1, 0)), ((0, 1), (0, -1))])
def test_square_center_is_left_of_ccw_edges(l_org, l_dir):
    assert sign_2d((0.5, 0.5, 0.0), l_org, l_dir) < 0
    assert sign_2d((5.0, 5.0, 0.0), l_org, l_dir) >= 0 or sign_2d(
        (-5.0, -5.0, 0.0), l_org, l_dir
    ) >= 0


def test_sign_on_axis_aligned_line_is_zero():
    assert sign_2d((0.0, 7.0, 1.0), (0.0, 0.0), (0, 1)) == 0
    assert sign_2d((3.0, 2.0, 1.0), (0.0, 2.0), (1, 0)) == 0


def test_compare_length_antisymmetric_and_equal():
    a1, a2 = (0, 0, 0), (1, 2, 3)
    b1, b2 = (0, 0, 0), (1, 1, 1)
    assert compare_length(a1, a2, b1, b2) == -compare_length(b1, b2, a1, a2)
    assert compare_length(a1, a2, a2, a1) == 0
    assert compare_length((0, 0), (3, 4), (0, 0), (1, 1)) == -compare_length(
        (0, 0), (1, 1), (0, 0), (3, 4)
    )


def test_make_front_facing():
    t = ((0, 0, 1), (0, 1, 2), (1, 0, 3))
    fixed = make_front_facing(t)
    assert is_facing_upwards(fixed)
    assert sorted(fixed) == sorted(t)
    assert make_front_facing(fixed) == fixed


def test_triangle_inside_is_unchanged():
    t = ((0.1, 0.1, 1.0), (0.9, 0.1, 2.0), (0.5, 0.9, 3.0))
    triangles = [t]
    clip_25d_triangles_to_01_quadrant(triangles)
    assert triangles == [t]


def test_triangle_outside_is_removed():
    triangles = [((2.0, 2.0, 0.0), (3.0, 2.0, 0.0), (2.5, 3.0, 0.0))]
    clip_25d_triangles_to_01_quadrant(triangles)
    assert triangles == []


def test_partial_clip_stays_inside_and_on_plane():
    # z = x + y for every vertex, so clipped vertices must keep that relation
    t = ((-0.5, 0.5, 0.0), (1.5, -0.2, 1.3), (0.6, 1.8, 2.4))
    triangles = [make_front_facing(t)]
    clip_25d_triangles_to_01_quadrant(triangles)
    assert triangles
    for tri in triangles:
        assert is_facing_upwards(tri)
        for x, y, z in tri:
            assert -EPS <= x <= 1 + EPS
            assert -EPS <= y <= 1 + EPS
            assert z == pytest.approx(x + y)


def test_two_points_left_appends_triangle():
    triangles = [((0.0, 0.0, 0.0), (2.0, 0.5, 0.0), (0.0, 1.0, 0.0))]
    clip_25d_triangle_by_line(triangles, 0, (1.0, 0.0), (0.0, 1.0))
    assert len(triangles) == 2
    for tri in triangles:
        assert is_facing_upwards(tri)
        assert all(x <= 1 + EPS for x, _, _ in tri)


def test_all_right_marks_nan():
    triangles = [((2.0, 0.0, 0.0), (3.0, 0.0, 0.0), (2.5, 1.0, 0.0))]
    clip_25d_triangle_by_line(triangles, 0, (1.0, 0.0), (0.0, 1.0))
    assert len(triangles) == 1
    assert tuple(triangles[0][0]) == NAN3


def test_nan_triangle_left_alone():
    nan_tri = ((math.nan, math.nan, math.nan), (2.0, 0.0, 0.0), (3.0, 1.0, 0.0))
    triangles = [nan_tri]
    clip_25d_triangle_by_line(triangles, 0, (1.0, 0.0), (0.0, 1.0))
    assert len(triangles) == 1
    assert triangles[0][1] == (2.0, 0.0, 0.0)