"""Clipping of 2.5D triangles (2D triangles carrying a height) against lines.

A clip line is given by an origin and a direction in the xy plane. Points to
the left of the line (negative :func:`sign_2d`) are kept. The unit square is
clipped with counter-clockwise lines, so its inside is on the left of all four.
"""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

from .geometrix import EPS, is_facing_upwards

__all__ = [
    "intersect_25d_linesegment_by_line",
    "sign_2d",
    "compare_length",
    "make_front_facing",
    "clip_25d_triangle_by_line",
    "clip_25d_triangles_to_01_quadrant",
]

Point = Sequence[float]
Triangle = Sequence[Sequence[float]]

_NAN3 = (math.nan, math.nan, math.nan)

# Bottom edge right-wards, right edge upwards, top edge left-wards,
# left edge downwards: counter-clockwise, so the inside is on the left.
_QUADRANT_EDGES = (
    ((0.0, 0.0), (1.0, 0.0)),
    ((1.0, 0.0), (0.0, 1.0)),
    ((1.0, 1.0), (-1.0, 0.0)),
    ((0.0, 1.0), (0.0, -1.0)),
)


def _no_negative_zero(v: float) -> float:
    return 0.0 if v == 0.0 else v


def _has_nans(t: Triangle) -> bool:
    return any(math.isnan(c) for vertex in t for c in vertex[:3])


def intersect_25d_linesegment_by_line(
    p0: Point, p1: Point, l_org: Point, l_dir: Point
) -> tuple[float, float, float]:
    """Intersect the segment p0-p1 (with heights in z) with a 2D line.

    The height of the intersection is interpolated along the segment. All
    three coordinates are NaN if the two are (nearly) parallel or if the
    intersection lies outside the segment.
    """
    x1, y1 = p0[0], p0[1]
    x2, y2 = p1[0], p1[1]
    x3, y3 = l_org[0], l_org[1]
    x4, y4 = l_org[0] + l_dir[0], l_org[1] + l_dir[1]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < EPS:
        return _NAN3

    a = x1 * y2 - y1 * x2
    b = x3 * y4 - y3 * x4
    c_x = (a * (x3 - x4) - (x1 - x2) * b) / denom
    c_y = (a * (y3 - y4) - (y1 - y2) * b) / denom

    d_p0p1 = math.hypot(x2 - x1, y2 - y1)
    slope = (p1[2] - p0[2]) / d_p0p1
    d_p0c = math.hypot(c_x - x1, c_y - y1)
    if d_p0c < -EPS or d_p0c > d_p0p1 + EPS:
        return _NAN3

    c_z = slope * d_p0c + p0[2]
    return (_no_negative_zero(c_x), _no_negative_zero(c_y), _no_negative_zero(c_z))


def sign_2d(p: Point, l_org: Point, l_dir: Point) -> int:
    """Side of the line a point is on: -1 left, 1 right, 0 on the line."""
    if l_dir[0] == 0.0:
        direction_sign = -1 if l_dir[1] > 0.0 else 1
        if p[0] < l_org[0]:
            return direction_sign
        if p[0] > l_org[0]:
            return -direction_sign
        return 0
    if l_dir[1] == 0.0:
        direction_sign = -1 if l_dir[0] > 0 else 1
        if p[1] < l_org[1]:
            return -direction_sign
        if p[1] > l_org[1]:
            return direction_sign
        return 0
    d = (p[0] - l_org[0]) * l_dir[1] - (p[1] - l_org[1]) * l_dir[0]
    if d < EPS:
        return -1
    if d > EPS:
        return 1
    return 0


def _squared_distance(a: Point, b: Point) -> float:
    return sum((q - p) ** 2 for p, q in zip(a, b))


def compare_length(a1: Point, a2: Point, b1: Point, b2: Point) -> int:
    """Compare the lengths of segments a1-a2 and b1-b2: -1, 0 or 1.

    Points of three components are compared in 3D, of two in 2D.
    """
    da_sq = _squared_distance(a1, a2)
    db_sq = _squared_distance(b1, b2)
    if da_sq < db_sq:
        return -1
    if da_sq == db_sq:
        return 0
    return 1


def make_front_facing(t: Triangle) -> tuple:
    """Return the triangle wound counter-clockwise in the xy plane."""
    if is_facing_upwards(t):
        return tuple(t)
    return (t[1], t[0], t[2])


def clip_25d_triangle_by_line(
    triangles: MutableSequence[Triangle], index: int, l_org: Point, l_dir: Point
) -> None:
    """Clip ``triangles[index]`` in place, keeping the part left of the line.

    A triangle entirely right of the line is marked with a NaN vertex; a
    triangle cut into a quadrilateral is replaced by one triangle and a second
    one is appended to the list. Triangles with NaNs are left alone.
    """
    t = triangles[index]
    if _has_nans(t):
        return

    left: list[Point] = []
    other: list[tuple[Point, int]] = []
    for point in t:
        d = sign_2d(point, l_org, l_dir)
        if d < 0:
            left.append(point)
        else:
            other.append((point, d))

    if not left:
        triangles[index] = (_NAN3, t[1], t[2])
    elif len(left) == 1:
        (o0, sign0), (o1, sign1) = other
        s0 = o0 if sign0 == 0 else intersect_25d_linesegment_by_line(left[0], o0, l_org, l_dir)
        s1 = o1 if sign1 == 0 else intersect_25d_linesegment_by_line(left[0], o1, l_org, l_dir)
        triangles[index] = make_front_facing((left[0], s0, s1))
    elif len(left) == 2:
        ((o0, sign0),) = other
        if sign0 == 0:
            return
        s0 = intersect_25d_linesegment_by_line(o0, left[0], l_org, l_dir)
        s1 = intersect_25d_linesegment_by_line(o0, left[1], l_org, l_dir)

        # the new inner edge is the shorter of the two possible diagonals
        cmp = compare_length(s0, left[1], s1, left[0])
        replaced = (s1 if cmp >= 0 else s0, left[0], left[1])
        added = (s1, s0, left[0] if cmp >= 0 else left[1])

        triangles[index] = make_front_facing(replaced)
        triangles.append(make_front_facing(added))


def clip_25d_triangles_to_01_quadrant(triangles: MutableSequence[Triangle]) -> None:
    """Clip all triangles in place to the unit square [0,1] x [0,1]."""
    for l_org, l_dir in _QUADRANT_EDGES:
        # triangles appended during this pass lie inside already
        for index in range(len(triangles)):
            clip_25d_triangle_by_line(triangles, index, l_org, l_dir)
    triangles[:] = [t for t in triangles if not _has_nans(t)]