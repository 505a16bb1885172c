"""
Command line entry point.

Builds one terrain and writes any of OBJ, JSON and PNG outputs.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from .config import settings
from .core.errors import InvalidConfiguration
from .core.fractal_synthesizer import FractalParameters
from .core.terrain import build_terrain
from .export import write_json, write_obj
from .logging_config import configure_logging

logger = structlog.get_logger()

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def resolve_output(path: Optional[Path], output_dir: Path) -> Optional[Path]:
    """Place relative output paths under ``output_dir``."""
    if path is None or path.is_absolute():
        return path
    return output_dir / path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fractal-terrain",
        description="Generate a diamond-square terrain mesh",
    )
    parser.add_argument("--resolution", type=int, default=settings.default_resolution,
                        help="Number of subdivisions (points per edge = 2^r + 1)")
    parser.add_argument("--cell-size", type=float, default=settings.default_cell_size,
                        help="Distance between neighbouring points")
    parser.add_argument("--amplitude", type=float, default=settings.default_amplitude,
                        help="Initial amplitude and corner height")
    parser.add_argument("--decay", type=float, default=settings.default_decay,
                        help="Amplitude multiplier applied after each level")
    parser.add_argument("--seed", type=int, default=settings.default_seed,
                        help="Random seed; 0 disables random displacement")
    parser.add_argument("--output-dir", type=Path, default=Path(settings.output_dir),
                        help="Directory that relative output paths are written under")
    parser.add_argument("--obj", type=Path, help="Write the mesh as Wavefront OBJ")
    parser.add_argument("--json", type=Path, help="Write vertex/index buffers as JSON")
    parser.add_argument("--png", type=Path, help="Write a heightmap image")
    parser.add_argument("--log-level", type=str.upper, default=settings.log_level.upper(),
                        choices=LOG_LEVELS)
    parser.add_argument("--log-format", default=settings.log_format, choices=["json", "plain"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI; returns a process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    try:
        params = FractalParameters(
            resolution=args.resolution,
            cell_size=args.cell_size,
            amplitude=args.amplitude,
            decay=args.decay,
            seed=args.seed,
        )
    except InvalidConfiguration as e:
        logger.error("Invalid terrain parameters", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = build_terrain(params)

    obj_path = resolve_output(args.obj, args.output_dir)
    json_path = resolve_output(args.json, args.output_dir)
    png_path = resolve_output(args.png, args.output_dir)

    if obj_path:
        write_obj(result.mesh, obj_path)
    if json_path:
        write_json(result.mesh, json_path)
    if png_path:
        from .visualize import render_heightmap

        render_heightmap(result.grid, png_path, title=f"seed {params.seed}, resolution {params.resolution}")

    stats = result.statistics
    print(
        f"{result.grid.point_count}x{result.grid.point_count} points, "
        f"{result.mesh.triangle_count} triangles, "
        f"heights {stats.min_height:.3f}..{stats.max_height:.3f}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
