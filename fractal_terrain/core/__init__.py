"""
Core terrain generation functionality.
"""

from .errors import TerrainError, InvalidConfiguration, IndexOutOfBounds
from .alea_prng import AleaPRNG
from .height_grid import HeightGrid, Point
from .fractal_synthesizer import FractalParameters, FractalSynthesizer, synthesize_heightmap
from .triangulator import Face, Triangle, TriangleMesh, build_mesh, iter_faces, to_points, triangulate
from .heightmap_analysis import HeightmapStatistics, analyze_heightmap
from .terrain import TerrainResult, build_terrain

__all__ = ['TerrainError', 'InvalidConfiguration', 'IndexOutOfBounds', 'AleaPRNG',
           'HeightGrid', 'Point', 'FractalParameters', 'FractalSynthesizer', 'synthesize_heightmap',
           'Face', 'Triangle', 'TriangleMesh', 'build_mesh', 'iter_faces', 'to_points', 'triangulate',
           'HeightmapStatistics', 'analyze_heightmap', 'TerrainResult', 'build_terrain']
