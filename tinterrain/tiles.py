"""Web-Mercator tile geometry: bounding boxes, zoom ranges and tile sizes."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "R_EARTH",
    "HALF_CIRCUMFERENCE",
    "TILE_SIZE",
    "BoundingBox",
    "ZoomRange",
    "tile_size_in_meters",
]

R_EARTH = 6378137.0
HALF_CIRCUMFERENCE = 20037508.342789243076571549020
TILE_SIZE = 256


@dataclass
class BoundingBox:
    """Axis-aligned box given by its ``min`` and ``max`` (x, y) corners."""

    min: tuple[float, float] = (0.0, 0.0)
    max: tuple[float, float] = (0.0, 0.0)

    def width(self) -> float:
        return abs(self.max[0] - self.min[0])

    def height(self) -> float:
        return abs(self.max[1] - self.min[1])

    def contains_x(self, x: float) -> bool:
        return self.min[0] <= x <= self.max[0]

    def contains_y(self, y: float) -> bool:
        return self.min[1] <= y <= self.max[1]

    def contains(self, x: float, y: float) -> bool:
        return self.contains_x(x) and self.contains_y(y)


@dataclass
class ZoomRange:
    """A range of zoom levels."""

    min_zoom: int = 0
    max_zoom: int = 0

    def normalize(self) -> None:
        """Swap the bounds if they are given in the wrong order."""
        if self.min_zoom > self.max_zoom:
            self.min_zoom, self.max_zoom = self.max_zoom, self.min_zoom


def tile_size_in_meters(zoom: int) -> float:
    """Edge length in meters of one tile at ``zoom``."""
    return 2.0 * HALF_CIRCUMFERENCE / (1 << zoom)