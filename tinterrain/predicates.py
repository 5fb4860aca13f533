"""Planar predicates, lines and height planes used by the greedy meshers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "IN_CIRCLE_EPS",
    "tri_area",
    "ccw",
    "right_of",
    "left_of",
    "in_circle",
    "Line",
    "Plane",
]

IN_CIRCLE_EPS = 1e-6

Point = Sequence[float]


def tri_area(a: Point, b: Point, c: Point) -> float:
    """Twice the signed area of triangle abc; positive when counter-clockwise."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def ccw(a: Point, b: Point, c: Point) -> bool:
    """Return True if a, b, c are in counter-clockwise order."""
    return tri_area(a, b, c) > 0


def right_of(x: Point, org: Point, dest: Point) -> bool:
    """Return True if x lies right of the directed line org -> dest."""
    return ccw(x, dest, org)


def left_of(x: Point, org: Point, dest: Point) -> bool:
    """Return True if x lies left of the directed line org -> dest."""
    return ccw(x, org, dest)


def in_circle(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return True if d lies inside the circle through a, b and c."""
    def sq(p: Point) -> float:
        return p[0] * p[0] + p[1] * p[1]

    det = (
        sq(a) * tri_area(b, c, d)
        - sq(b) * tri_area(a, c, d)
        + sq(c) * tri_area(a, b, d)
        - sq(d) * tri_area(a, b, c)
    )
    return det > IN_CIRCLE_EPS


class Line:
    """The implicit line through two points; :meth:`eval` is signed by side."""

    __slots__ = ("a", "b", "c")

    def __init__(self, p: Point, q: Point) -> None:
        tx = q[0] - p[0]
        ty = q[1] - p[1]
        # The coefficients are divided by the component count (2) rather than
        # the length; only the sign and relative magnitude of eval() matter.
        scale = 2.0
        self.a = ty / scale
        self.b = -tx / scale
        self.c = -(self.a * p[0] + self.b * p[1])

    def eval(self, p: Point) -> float:
        return self.a * p[0] + self.b * p[1] + self.c


@dataclass
class Plane:
    """The plane z = a*x + b*y + c."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    @classmethod
    def from_points(cls, p: Point, q: Point, r: Point) -> "Plane":
        """Plane through three points that are not collinear in xy."""
        ux, uy, uz = q[0] - p[0], q[1] - p[1], q[2] - p[2]
        vx, vy, vz = r[0] - p[0], r[1] - p[1], r[2] - p[2]
        den = ux * vy - uy * vx
        if den == 0:
            raise ValueError("points are collinear in the xy plane")
        a = (uz * vy - uy * vz) / den
        b = (ux * vz - uz * vx) / den
        return cls(a, b, p[2] - a * p[0] - b * p[1])

    def eval(self, x: float, y: float) -> float:
        return self.a * x + self.b * y + self.c