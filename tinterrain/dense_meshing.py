"""Dense regular meshing of a raster: one vertex per sampled cell."""

from __future__ import annotations

from dataclasses import dataclass, field

from .log import LogLevel, log
from .raster import Raster
from .raster_tools import sample_nearest_valid_avg

__all__ = ["GridMesh", "generate_tin_dense_quadwalk"]

Vertex = tuple[float, float, float]
Face = tuple[int, int, int]


@dataclass
class GridMesh:
    """A mesh given as a vertex list and faces of vertex indices (ccw order)."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def poly_count(self) -> int:
        """Number of triangles."""
        return len(self.faces)

    def triangles(self) -> list[tuple[Vertex, Vertex, Vertex]]:
        """The faces resolved into triples of vertex coordinates."""
        return [tuple(self.vertices[i] for i in face) for face in self.faces]


def _vertex_at(raster: Raster, r: int, c: int, y: float) -> Vertex:
    z = raster.value(r, c)
    if raster.is_no_data(z):
        z = sample_nearest_valid_avg(raster, r, c)
    return (raster.col2x(c), y, z)


def _vertex_count(extent: int, step: int) -> int:
    return (extent - 1) // step + (1 if (extent - 1) % step else 0) + 1


def generate_tin_dense_quadwalk(raster: Raster, step: int = 1) -> GridMesh:
    """Build a regular grid mesh sampling every ``step``-th cell.

    The last row and column are always included. Each grid quad is split
    into two counter-clockwise triangles. Cells without data get a value
    estimated from their nearest valid neighbours. A raster smaller than
    2x2 gives an empty mesh.
    """
    if step <= 0:
        raise ValueError("step width for dense meshing must be at least 1")
    h = raster.height
    w = raster.width
    if h < 2 or w < 2:
        log(LogLevel.ERROR, "raster to small, must have at least 2x2 cells")
        return GridMesh()

    vertices_per_column = _vertex_count(h, step)
    vertices_per_row = _vertex_count(w, step)
    log(
        LogLevel.DEBUG,
        f"generating regular mesh with {vertices_per_row}x{vertices_per_column} vertices...",
    )

    columns = [min(i * step, w - 1) for i in range(vertices_per_row)]
    mesh = GridMesh()

    for vx_r in range(vertices_per_column):
        r = min(vx_r * step, h - 1)
        y = raster.row2y(r)
        for vx_c, c in enumerate(columns):
            mesh.vertices.append(_vertex_at(raster, r, c, y))
            if vx_r == 0 or vx_c == 0:
                continue
            lower_right = vx_r * vertices_per_row + vx_c
            upper_right = lower_right - vertices_per_row
            upper_left = upper_right - 1
            lower_left = lower_right - 1
            mesh.faces.append((lower_right, upper_right, upper_left))
            mesh.faces.append((lower_right, upper_left, lower_left))

    return mesh