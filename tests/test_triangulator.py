"""
Tests for grid triangulation.
"""

import numpy as np
import pytest

from fractal_terrain.core.fractal_synthesizer import FractalParameters, synthesize_heightmap
from fractal_terrain.core.height_grid import HeightGrid
from fractal_terrain.core.triangulator import (
    Face,
    Triangle,
    build_mesh,
    iter_faces,
    to_points,
    triangulate,
)


def _signed_area_xz(triangles):
    """Signed area of each triangle projected on the x-z plane."""
    a, b, c = triangles[:, 0], triangles[:, 1], triangles[:, 2]
    return (b[:, 0] - a[:, 0]) * (c[:, 2] - a[:, 2]) - (b[:, 2] - a[:, 2]) * (c[:, 0] - a[:, 0])


class TestTriangleCounts:
    """Test the size of the triangle stream."""

    @pytest.mark.parametrize("resolution", range(0, 5))
    def test_counts(self, resolution):
        """2(P-1)^2 triangles and 6(P-1)^2 points."""
        grid = HeightGrid.create(resolution, 1.0)
        cells = grid.point_count - 1
        mesh = build_mesh(grid)

        assert mesh.triangle_count == 2 * cells ** 2
        assert mesh.vertex_count == 6 * cells ** 2
        assert len(triangulate(grid)) == cells ** 2
        assert len(to_points(grid)) == 6 * cells ** 2

    def test_sequential_indices(self, seeded_grid):
        """Triangle t uses indices 3t, 3t+1, 3t+2."""
        mesh = build_mesh(seeded_grid)
        assert mesh.indices.dtype == np.uint32
        np.testing.assert_array_equal(mesh.indices, np.arange(mesh.vertex_count))
        np.testing.assert_array_equal(mesh.indices.reshape(-1, 3)[5], [15, 16, 17])

    def test_resolution_zero(self):
        """A single cell yields two triangles at the corner height."""
        grid = synthesize_heightmap(FractalParameters(resolution=0, amplitude=3.0, seed=0))
        mesh = build_mesh(grid)

        assert mesh.triangle_count == 2
        np.testing.assert_array_equal(mesh.vertices[:, 1], np.full(6, 3.0))


class TestWinding:
    """Test triangle orientation."""

    def test_flat_normals_point_up(self, flat_grid):
        """Every triangle of a flat grid faces +y."""
        normals = build_mesh(flat_grid).normals()
        np.testing.assert_allclose(normals, np.tile([0.0, 1.0, 0.0], (len(normals), 1)))

    def test_clockwise_from_above(self, seeded_grid):
        """All triangles share the same clockwise orientation in x-z."""
        areas = _signed_area_xz(build_mesh(seeded_grid).triangles())
        assert np.all(areas < 0)

    def test_synthesized_normals_upward(self, seeded_grid):
        """Heights never flip a triangle over."""
        assert np.all(build_mesh(seeded_grid).normals()[:, 1] > 0)

    def test_triangle_normal(self, flat_grid):
        face = next(iter_faces(flat_grid))
        for triangle in face:
            normal = triangle.normal()
            assert normal[1] > 0
            assert normal[0] == pytest.approx(0.0)
            assert normal[2] == pytest.approx(0.0)


class TestFaceLayout:
    """Test which points each face uses."""

    def test_first_face(self, flat_grid):
        """The first cell is split along its (0,1)-(1,0) diagonal."""
        flat_grid.set_height(1, 1, 2.0)
        face = triangulate(flat_grid)[0]

        assert isinstance(face, Face)
        assert face.first == Triangle(
            flat_grid.point_at(0, 1), flat_grid.point_at(1, 0), flat_grid.point_at(0, 0)
        )
        assert face.second == Triangle(
            flat_grid.point_at(1, 1), flat_grid.point_at(1, 0), flat_grid.point_at(0, 1)
        )

    def test_face_order(self, flat_grid):
        """Cells are emitted with the x index outermost."""
        faces = triangulate(flat_grid)
        second_face_anchor = faces[1].first.c
        fifth_face_anchor = faces[4].first.c
        assert second_face_anchor == flat_grid.point_at(0, 1)
        assert fifth_face_anchor == flat_grid.point_at(1, 0)

    def test_face_covers_cell(self, flat_grid):
        """The six points of a face are the four corners of its cell."""
        axis = list(flat_grid.axis)
        for n, face in enumerate(iter_faces(flat_grid)):
            i, j = divmod(n, flat_grid.point_count - 1)
            corners = {(axis.index(p.x), axis.index(p.z)) for p in face.points()}
            assert corners == {(i, j), (i + 1, j), (i, j + 1), (i + 1, j + 1)}

    def test_mesh_matches_point_stream(self, seeded_grid):
        """build_mesh emits the same points, in the same order, as to_points."""
        expected = np.array(to_points(seeded_grid))
        np.testing.assert_array_equal(build_mesh(seeded_grid).vertices, expected)

    def test_does_not_mutate_grid(self, seeded_grid):
        before = seeded_grid.heights.copy()
        build_mesh(seeded_grid)
        triangulate(seeded_grid)
        np.testing.assert_array_equal(seeded_grid.heights, before)
