"""
Mesh serialisation.

Writes a ``TriangleMesh`` as Wavefront OBJ or as JSON vertex/index buffers,
the two forms handed to external renderers.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import structlog

from .core.triangulator import TriangleMesh

logger = structlog.get_logger()

PathLike = Union[str, Path]


def mesh_to_obj(mesh: TriangleMesh, name: str = "terrain") -> str:
    """
    Render a mesh as Wavefront OBJ text.

    Each vertex gets its own ``v`` line; faces use 1-based indices taken
    from the index buffer, keeping the clockwise winding.
    """
    lines = [f"# {mesh.vertex_count} vertices, {mesh.triangle_count} triangles", f"o {name}"]
    lines.extend(f"v {x:.6f} {y:.6f} {z:.6f}" for x, y, z in mesh.vertices)
    for a, b, c in mesh.indices.reshape(-1, 3):
        lines.append(f"f {a + 1} {b + 1} {c + 1}")
    return "\n".join(lines) + "\n"


def mesh_to_dict(mesh: TriangleMesh) -> Dict[str, Any]:
    """Vertex and index buffers as plain lists."""
    return {
        "vertex_count": mesh.vertex_count,
        "triangle_count": mesh.triangle_count,
        "vertices": mesh.vertices.tolist(),
        "indices": mesh.indices.tolist(),
    }


def write_obj(mesh: TriangleMesh, path: PathLike, name: str = "terrain") -> Path:
    """Write OBJ text to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(mesh_to_obj(mesh, name=name))
    logger.info("Wrote OBJ mesh", path=str(path), triangles=mesh.triangle_count)
    return path


def write_json(mesh: TriangleMesh, path: PathLike) -> Path:
    """Write JSON buffers to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(mesh_to_dict(mesh), f)
    logger.info("Wrote JSON mesh", path=str(path), triangles=mesh.triangle_count)
    return path
