"""Basic geometry: edges, 2D and 3D bounding boxes and triangle predicates.

Vertices are sequences of three floats (x, y, z); 2D points are sequences
of at least two floats. Triangles are sequences of three vertices and faces
are sequences of three vertex indices.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

__all__ = [
    "EPS",
    "Edge",
    "BBox2D",
    "BBox3D",
    "vertex_key",
    "triangle_key",
    "triangle_semantic_equal",
    "is_facing_upwards",
    "is_face_facing_upwards",
]

EPS = 0.000000001

_INF = math.inf

Point = Sequence[float]
Triangle = Sequence[Sequence[float]]


def _no_negative_zero(v: float) -> float:
    return 0.0 if v == 0.0 else v


def _epseq(a: float, b: float, epsilon: float) -> bool:
    return abs(a - b) < epsilon


@dataclass(frozen=True, order=True)
class Edge:
    """An undirected edge between two vertex indices, stored smaller first."""

    first: int
    second: int

    def __post_init__(self) -> None:
        if self.first > self.second:
            low, high = self.second, self.first
            object.__setattr__(self, "first", low)
            object.__setattr__(self, "second", high)

    def shares_point(self, other: "Edge") -> bool:
        """Return True if both edges have a vertex index in common."""
        return bool({self.first, self.second} & {other.first, other.second})

    def intersects_2d(self, other: "Edge", vertices: Sequence[Point]) -> bool:
        """Return True if the two edges cross in the xy plane."""
        p0 = vertices[self.first]
        p1 = vertices[self.second]
        l0 = vertices[other.first]
        l1 = vertices[other.second]

        e1_bbox = BBox2D.from_points(p0, p1)
        e2_bbox = BBox2D.from_points(l0, l1)
        if not e1_bbox.intersects(e2_bbox):
            return False

        point = _intersect_lines_2d(p0, p1, l0, l1)
        if point is None:
            return False
        return e1_bbox.contains(point) and e2_bbox.contains(point)


def _intersect_lines_2d(
    p0: Point, p1: Point, l0: Point, l1: Point
) -> tuple[float, float] | None:
    """Intersect the infinite lines p0-p1 and l0-l1; None if (nearly) parallel."""
    x1, y1 = p0[0], p0[1]
    x2, y2 = p1[0], p1[1]
    x3, y3 = l0[0], l0[1]
    x4, y4 = l1[0], l1[1]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < EPS:
        return None

    a = x1 * y2 - y1 * x2
    b = x3 * y4 - y3 * x4
    c_x = (a * (x3 - x4) - (x1 - x2) * b) / denom
    c_y = (a * (y3 - y4) - (y1 - y2) * b) / denom
    return (_no_negative_zero(c_x), _no_negative_zero(c_y))


@dataclass
class BBox2D:
    """Axis-aligned 2D bounding box; empty boxes have min=+inf and max=-inf."""

    min: tuple[float, float] = field(default=(_INF, _INF))
    max: tuple[float, float] = field(default=(-_INF, -_INF))

    @classmethod
    def from_points(cls, a: Point, b: Point) -> "BBox2D":
        """Box spanned by two points (2D or 3D; z is ignored)."""
        return cls(
            (min(a[0], b[0]), min(a[1], b[1])),
            (max(a[0], b[0]), max(a[1], b[1])),
        )

    @classmethod
    def from_triangle(cls, t: Triangle) -> "BBox2D":
        """Box around the xy projection of a triangle."""
        box = cls.from_points(t[0], t[1])
        box.add(t[2])
        return box

    def reset(self) -> None:
        """Make the box empty again."""
        self.min = (_INF, _INF)
        self.max = (-_INF, -_INF)

    def add(self, point: Point) -> None:
        """Grow the box to include a point (2D or 3D; z is ignored)."""
        x, y = point[0], point[1]
        self.min = (min(self.min[0], x), min(self.min[1], y))
        self.max = (max(self.max[0], x), max(self.max[1], y))

    def add_triangle(self, t: Triangle) -> None:
        """Grow the box to include all three vertices of a triangle."""
        for vertex in t:
            self.add(vertex)

    def grow(self, delta: float) -> None:
        """Move every side outwards by ``delta``."""
        self.min = (self.min[0] - delta, self.min[1] - delta)
        self.max = (self.max[0] + delta, self.max[1] + delta)

    def intersects(self, other: "BBox2D", epsilon: float = EPS) -> bool:
        """Return True if the boxes overlap; ``epsilon`` grows both boxes."""
        if self.min[1] - epsilon > other.max[1] + epsilon:
            return False
        if self.max[1] + epsilon < other.min[1] - epsilon:
            return False
        if self.max[0] + epsilon < other.min[0] - epsilon:
            return False
        if self.min[0] - epsilon > other.max[0] + epsilon:
            return False
        return True

    def contains(self, point: Point, epsilon: float = EPS) -> bool:
        """Return True if the point lies inside the box grown by ``epsilon``."""
        x, y = point[0], point[1]
        return (
            self.min[0] - epsilon <= x
            and self.min[1] - epsilon <= y
            and self.max[0] + epsilon >= x
            and self.max[1] + epsilon >= y
        )

    def is_equal(self, other: "BBox2D") -> bool:
        """Exact comparison of both corners."""
        return self.min == other.min and self.max == other.max

    def is_on_border(self, point: Point, epsilon: float = EPS) -> bool:
        """Return True if x or y is within ``epsilon`` of one of the box's sides."""
        x, y = point[0], point[1]
        return (
            _epseq(x, self.min[0], epsilon)
            or _epseq(x, self.max[0], epsilon)
            or _epseq(y, self.min[1], epsilon)
            or _epseq(y, self.max[1], epsilon)
        )

    def to_string(self) -> str:
        return (
            f"[({self.min[0]:f}, {self.min[1]:f}),"
            f"({self.max[0]:f}, {self.max[1]:f})])"
        )

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class BBox3D:
    """Axis-aligned 3D bounding box; empty boxes have min=+inf and max=-inf."""

    min: tuple[float, float, float] = field(default=(_INF, _INF, _INF))
    max: tuple[float, float, float] = field(default=(-_INF, -_INF, -_INF))

    @classmethod
    def from_points(cls, a: Point, b: Point) -> "BBox3D":
        """Box spanned by two 3D points."""
        return cls(
            (min(a[0], b[0]), min(a[1], b[1]), min(a[2], b[2])),
            (max(a[0], b[0]), max(a[1], b[1]), max(a[2], b[2])),
        )

    @classmethod
    def from_triangle(cls, t: Triangle) -> "BBox3D":
        """Box around a triangle."""
        box = cls.from_points(t[0], t[1])
        box.add(t[2])
        return box

    def reset(self) -> None:
        """Make the box empty again."""
        self.min = (_INF, _INF, _INF)
        self.max = (-_INF, -_INF, -_INF)

    def to_2d(self) -> BBox2D:
        """Projection of the box onto the xy plane."""
        return BBox2D.from_points(self.min, self.max)

    def add(self, point: Point) -> None:
        """Grow the box to include a 3D point."""
        self.min = tuple(min(m, p) for m, p in zip(self.min, point[:3]))
        self.max = tuple(max(m, p) for m, p in zip(self.max, point[:3]))

    def add_triangle(self, t: Triangle) -> None:
        """Grow the box to include all three vertices of a triangle."""
        for vertex in t:
            self.add(vertex)

    def grow(self, delta: float) -> None:
        """Move every side outwards by ``delta``."""
        self.min = tuple(m - delta for m in self.min)
        self.max = tuple(m + delta for m in self.max)

    def contains(self, point: Point, epsilon: float = EPS) -> bool:
        """Return True if the point lies inside the box grown by ``epsilon``."""
        return all(
            lo - epsilon <= p <= hi + epsilon
            for lo, hi, p in zip(self.min, self.max, point[:3])
        )

    def to_string(self) -> str:
        return (
            f"[({self.min[0]:f}, {self.min[1]:f}, {self.min[2]:f}),"
            f"({self.max[0]:f}, {self.max[1]:f}, {self.max[2]:f})])"
        )

    def __str__(self) -> str:
        return self.to_string()


def vertex_key(v: Point) -> tuple[float, float, float]:
    """Sort key ordering vertices lexicographically by x, y, z."""
    return (float(v[0]), float(v[1]), float(v[2]))


def triangle_key(t: Triangle) -> tuple[tuple[float, float, float], ...]:
    """Sort key ordering triangles lexicographically by their vertices."""
    return tuple(vertex_key(v) for v in t)


def triangle_semantic_equal(left: Triangle, right: Triangle) -> bool:
    """Return True if ``right`` is a rotation of ``left`` (same vertices, same winding)."""
    lt = triangle_key(left)
    rt = triangle_key(right)
    return any(lt == rt[i:] + rt[:i] for i in range(3))


def _facing_upwards(t0: Point, t1: Point, t2: Point) -> bool:
    n_z = (t0[0] - t1[0]) * (t0[1] - t2[1]) - (t0[0] - t2[0]) * (t0[1] - t1[1])
    return n_z >= 0


def is_facing_upwards(t: Triangle) -> bool:
    """Return True if the triangle winds counter-clockwise in the xy plane."""
    return _facing_upwards(t[0], t[1], t[2])


def is_face_facing_upwards(face: Sequence[int], vertices: Sequence[Point]) -> bool:
    """Like :func:`is_facing_upwards` for a face given as vertex indices."""
    return _facing_upwards(vertices[face[0]], vertices[face[1]], vertices[face[2]])