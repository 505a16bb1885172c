"""
Fractal terrain generation: diamond-square heightmaps and triangle meshes.
"""

__version__ = "0.1.0"
