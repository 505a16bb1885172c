"""Exceptions raised by terrain generation."""


class TerrainError(Exception):
    """Base class for terrain generation errors."""


class InvalidConfiguration(TerrainError, ValueError):
    """Raised when grid or fractal parameters are out of range."""


class IndexOutOfBounds(TerrainError, IndexError):
    """Raised when a lattice index falls outside the height grid."""

    def __init__(self, ix: int, iz: int, point_count: int):
        self.ix = ix
        self.iz = iz
        self.point_count = point_count
        super().__init__(
            f"Grid index ({ix}, {iz}) outside [0, {point_count}) for a "
            f"{point_count}x{point_count} grid"
        )
