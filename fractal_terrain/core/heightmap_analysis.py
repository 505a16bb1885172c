"""Summary statistics for synthesized heightmaps."""

from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np

from .height_grid import HeightGrid


@dataclass(frozen=True)
class HeightmapStatistics:
    """Height distribution of a grid."""

    point_count: int
    min_height: float
    max_height: float
    mean_height: float
    std_height: float

    @property
    def relief(self) -> float:
        """Difference between the highest and lowest point."""
        return self.max_height - self.min_height

    def to_dict(self) -> Dict[str, float]:
        data = asdict(self)
        data["relief"] = self.relief
        return data


def analyze_heightmap(grid: HeightGrid) -> HeightmapStatistics:
    """
    Compute height statistics over every lattice point.

    Args:
        grid: Height grid to summarise

    Returns:
        HeightmapStatistics for the grid
    """
    heights = grid.heights
    return HeightmapStatistics(
        point_count=grid.point_count,
        min_height=float(np.min(heights)),
        max_height=float(np.max(heights)),
        mean_height=float(np.mean(heights)),
        std_height=float(np.std(heights)),
    )
