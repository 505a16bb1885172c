"""
Triangulation of a finished height grid.

Every grid cell becomes one face made of two triangles split along the
diagonal from ``(i, j+1)`` to ``(i+1, j)``. Triangles are wound clockwise
when viewed from above with x to the right and z up the page, so the
geometric normal ``(b - a) x (c - a)`` of a flat cell points along +y.

Vertices are not shared: each triangle carries its own three points and
the index buffer is simply ``0..N-1``.
"""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple

import numpy as np

from .height_grid import HeightGrid, Point

# (di, dj) offsets from the cell's (i, j) corner for each triangle's vertices
CELL_TRIANGLES = (
    ((0, 1), (1, 0), (0, 0)),
    ((1, 1), (1, 0), (0, 1)),
)


class Triangle(NamedTuple):
    """Three points in clockwise order."""
    a: Point
    b: Point
    c: Point

    def normal(self) -> np.ndarray:
        """Unnormalised geometric normal ``(b - a) x (c - a)``."""
        a = np.asarray(self.a)
        return np.cross(np.asarray(self.b) - a, np.asarray(self.c) - a)


class Face(NamedTuple):
    """The two triangles covering one grid cell."""
    first: Triangle
    second: Triangle

    def points(self) -> List[Point]:
        return [*self.first, *self.second]


@dataclass
class TriangleMesh:
    """Unshared-vertex triangle stream ready for upload to a renderer."""

    vertices: np.ndarray  # (N, 3) float64, three consecutive rows per triangle
    indices: np.ndarray   # (N,) uint32, indices[k] == k

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.vertices) // 3

    def triangles(self) -> np.ndarray:
        """Vertices grouped per triangle, shape ``(T, 3, 3)``."""
        return self.vertices.reshape(-1, 3, 3)

    def normals(self) -> np.ndarray:
        """Unit face normals, shape ``(T, 3)``."""
        tri = self.triangles()
        normals = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        return np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 0)


def iter_faces(grid: HeightGrid) -> Iterator[Face]:
    """Yield one face per cell, rows of ``i`` outermost."""
    cells = grid.point_count - 1
    for i in range(cells):
        for j in range(cells):
            first, second = (
                Triangle(*(grid.point_at(i + di, j + dj) for di, dj in corners))
                for corners in CELL_TRIANGLES
            )
            yield Face(first, second)


def triangulate(grid: HeightGrid) -> List[Face]:
    """Return every face of the grid in emission order."""
    return list(iter_faces(grid))


def to_points(grid: HeightGrid) -> List[Point]:
    """Flat point stream, three points per triangle."""
    points = []
    for face in iter_faces(grid):
        points.extend(face.points())
    return points


def build_mesh(grid: HeightGrid) -> TriangleMesh:
    """
    Build vertex and index buffers for the grid.

    Produces the same point order as ``to_points`` using array indexing, so
    it stays fast on large grids.

    Args:
        grid: A synthesized height grid; it is not modified

    Returns:
        Mesh with ``6 * (point_count - 1) ** 2`` vertices
    """
    cells = grid.point_count - 1
    positions = grid.positions()

    i, j = np.meshgrid(np.arange(cells), np.arange(cells), indexing="ij")
    i = i.ravel()
    j = j.ravel()

    # Shape (cells**2, 6, 3): per cell, six vertices in emission order
    corners = [corner for triangle in CELL_TRIANGLES for corner in triangle]
    per_cell = np.stack([positions[i + di, j + dj] for di, dj in corners], axis=1)

    vertices = per_cell.reshape(-1, 3)
    indices = np.arange(len(vertices), dtype=np.uint32)
    return TriangleMesh(vertices=vertices, indices=indices)
