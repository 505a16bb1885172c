"""
Square height lattice used as the canvas for fractal synthesis.

The grid stores one height per lattice point in a NumPy array. Horizontal
coordinates are fixed when the grid is created: points are spaced
``cell_size`` apart and centred on the origin in the x-z plane.
"""

import math
import numbers
from typing import List, NamedTuple, Tuple

import numpy as np

from .errors import IndexOutOfBounds, InvalidConfiguration


class Point(NamedTuple):
    """A lattice point; ``y`` is the height."""
    x: float
    y: float
    z: float


def point_count_for(resolution: int) -> int:
    """Number of points along one edge for a given resolution."""
    return 2 ** resolution + 1


def validate_grid_parameters(resolution: int, cell_size: float) -> None:
    """
    Check grid construction parameters.

    Raises:
        InvalidConfiguration: If resolution is not a non-negative integer or
            cell_size is not a positive finite number
    """
    if isinstance(resolution, bool) or not isinstance(resolution, numbers.Integral):
        raise InvalidConfiguration(f"resolution must be an integer, got {resolution!r}")
    if resolution < 0:
        raise InvalidConfiguration(f"resolution must be >= 0, got {resolution}")
    if not isinstance(cell_size, numbers.Real) or not math.isfinite(cell_size) or cell_size <= 0:
        raise InvalidConfiguration(f"cell_size must be > 0, got {cell_size}")


class HeightGrid:
    """
    ``point_count x point_count`` lattice of points with mutable heights.

    Indices are ``(ix, iz)``: ``ix`` selects the x coordinate and ``iz`` the
    z coordinate. Every accessor is bounds checked and raises
    ``IndexOutOfBounds`` rather than returning a default.
    """

    def __init__(self, resolution: int, cell_size: float):
        validate_grid_parameters(resolution, cell_size)

        self.resolution = int(resolution)
        self.cell_size = float(cell_size)
        self.point_count = point_count_for(self.resolution)

        # Offset that puts the middle of the lattice on the origin
        origin = (self.point_count - 1) * self.cell_size / 2
        self._axis = np.arange(self.point_count, dtype=np.float64) * self.cell_size - origin
        self._heights = np.zeros((self.point_count, self.point_count), dtype=np.float64)

    @classmethod
    def create(cls, resolution: int, cell_size: float) -> "HeightGrid":
        """
        Build a flat grid.

        Args:
            resolution: Number of halving subdivisions
            cell_size: Distance between neighbouring points

        Returns:
            New grid with every height at 0
        """
        return cls(resolution, cell_size)

    def __repr__(self) -> str:
        return (
            f"HeightGrid(resolution={self.resolution}, cell_size={self.cell_size}, "
            f"point_count={self.point_count})"
        )

    @property
    def heights(self) -> np.ndarray:
        """Read-only view of the height array, indexed ``[ix, iz]``."""
        view = self._heights.view()
        view.flags.writeable = False
        return view

    @property
    def axis(self) -> np.ndarray:
        """Coordinates shared by the x and z axes."""
        view = self._axis.view()
        view.flags.writeable = False
        return view

    @property
    def extent(self) -> float:
        """Width of the grid along one axis."""
        return (self.point_count - 1) * self.cell_size

    def contains(self, ix: int, iz: int) -> bool:
        """Return True when ``(ix, iz)`` addresses a lattice point."""
        return 0 <= ix < self.point_count and 0 <= iz < self.point_count

    def _check(self, ix: int, iz: int) -> None:
        if not self.contains(ix, iz):
            raise IndexOutOfBounds(ix, iz, self.point_count)

    def set_height(self, ix: int, iz: int, height: float) -> None:
        """Assign the height of one lattice point."""
        self._check(ix, iz)
        self._heights[ix, iz] = height

    def get_height(self, ix: int, iz: int) -> float:
        """Return the height of one lattice point."""
        self._check(ix, iz)
        return float(self._heights[ix, iz])

    def point_at(self, ix: int, iz: int) -> Point:
        """Return the full point at ``(ix, iz)``."""
        self._check(ix, iz)
        return Point(float(self._axis[ix]), float(self._heights[ix, iz]), float(self._axis[iz]))

    def corner_indices(self) -> List[Tuple[int, int]]:
        """Indices of the four corners, NW, NE, SE, SW."""
        last = self.point_count - 1
        return [(0, 0), (0, last), (last, last), (last, 0)]

    def positions(self) -> np.ndarray:
        """
        All points as an array of shape ``(point_count, point_count, 3)``.

        ``positions()[ix, iz]`` holds ``(x, y, z)`` for that lattice point.
        """
        xs, zs = np.meshgrid(self._axis, self._axis, indexing="ij")
        return np.stack([xs, self._heights, zs], axis=-1)
