"""Insertion candidates for greedy mesh refinement and related helpers."""

from __future__ import annotations

import heapq
import itertools
import math
import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = [
    "Candidate",
    "CandidateList",
    "order_triangle_points",
    "is_no_data",
]


@dataclass
class Candidate:
    """A raster cell proposed for insertion, ranked by ``importance``."""

    x: int = 0
    y: int = 0
    z: float = 0.0
    importance: float = -sys.float_info.max
    token: int = 0
    triangle: Any = None

    def consider(self, sx: int, sy: int, sz: float, imp: float) -> None:
        """Take over the given cell if it is more important than the current one."""
        if imp > self.importance:
            self.x = sx
            self.y = sy
            self.z = sz
            self.importance = imp

    def __lt__(self, other: "Candidate") -> bool:
        return self.importance < other.importance

    def __gt__(self, other: "Candidate") -> bool:
        return self.importance > other.importance


@dataclass
class CandidateList:
    """Priority queue of candidates, most important first."""

    _heap: list = field(default_factory=list)
    _counter: itertools.count = field(default_factory=itertools.count)

    def push(self, candidate: Candidate) -> None:
        heapq.heappush(self._heap, (-candidate.importance, next(self._counter), candidate))

    def grab_greatest(self) -> Candidate:
        """Remove and return the most important candidate; a default one if empty."""
        if not self._heap:
            return Candidate()
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def order_triangle_points(points: Sequence[Sequence[float]]) -> list:
    """Return the three points ordered by ascending y; ties keep their order."""
    return sorted(points, key=lambda p: p[1])


def is_no_data(value: float, no_data_value: float) -> bool:
    """Return True if ``value`` is NaN or equals the no-data marker."""
    return math.isnan(value) or value == no_data_value