#!/usr/bin/env python3
"""
Simple demo script showing terrain generation capabilities.
"""

from fractal_terrain.core import FractalParameters, build_terrain


def main():
    """Demonstrate diamond-square terrain generation."""
    print("Fractal Terrain Demo")
    print("=" * 40)

    for decay in (0.3, 0.5, 0.8):
        params = FractalParameters(resolution=6, cell_size=10.0, amplitude=40.0, decay=decay, seed=2024)
        result = build_terrain(params)
        stats = result.statistics

        print(f"\nDecay {decay}:")
        print("-" * 30)
        print(f"  Grid: {result.grid.point_count}x{result.grid.point_count} points")
        print(f"  Triangles: {result.mesh.triangle_count}")
        print(f"  Height range: {stats.min_height:.2f} .. {stats.max_height:.2f}")
        print(f"  Mean height: {stats.mean_height:.2f} (std {stats.std_height:.2f})")

    flat = build_terrain(FractalParameters(resolution=4, amplitude=10.0, seed=0))
    print(f"\nSeed 0 relief: {flat.statistics.relief:.2f}")


if __name__ == "__main__":
    main()
