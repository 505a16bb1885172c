"""
End-to-end terrain building.

Runs grid creation, diamond-square synthesis and triangulation in sequence
and bundles the results for exporters, the CLI and the API.
"""

import time
from dataclasses import dataclass

import structlog

from .fractal_synthesizer import FractalParameters, FractalSynthesizer
from .height_grid import HeightGrid
from .heightmap_analysis import HeightmapStatistics, analyze_heightmap
from .triangulator import TriangleMesh, build_mesh

logger = structlog.get_logger()


@dataclass
class TerrainResult:
    """A synthesized grid together with its mesh and statistics."""

    params: FractalParameters
    grid: HeightGrid
    mesh: TriangleMesh
    statistics: HeightmapStatistics


def build_terrain(params: FractalParameters) -> TerrainResult:
    """
    Generate a terrain mesh from fractal parameters.

    Args:
        params: Validated fractal parameters

    Returns:
        TerrainResult with the final grid, its mesh and statistics
    """
    t_start = time.perf_counter()

    grid = FractalSynthesizer(params).synthesize()
    mesh = build_mesh(grid)
    statistics = analyze_heightmap(grid)

    logger.info(
        "Terrain built",
        resolution=params.resolution,
        point_count=grid.point_count,
        triangle_count=mesh.triangle_count,
        relief=round(statistics.relief, 4),
        elapsed_ms=round((time.perf_counter() - t_start) * 1000, 2),
    )
    return TerrainResult(params=params, grid=grid, mesh=mesh, statistics=statistics)
