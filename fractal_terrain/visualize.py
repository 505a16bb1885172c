"""
Heightmap rendering with matplotlib.
"""

from pathlib import Path
from typing import Optional, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import structlog

from .core.height_grid import HeightGrid

logger = structlog.get_logger()


def render_heightmap(
    grid: HeightGrid,
    path: Union[str, Path],
    title: Optional[str] = None,
    cmap: str = "terrain",
    dpi: int = 150,
) -> Path:
    """
    Save a top-down colour image of the grid heights.

    Args:
        grid: Height grid to draw
        path: Output image path (format from suffix, e.g. ``.png``)
        title: Optional figure title
        cmap: Matplotlib colour map name
        dpi: Output resolution

    Returns:
        Path of the written image
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    half = grid.extent / 2
    fig, ax = plt.subplots(figsize=(6, 5))
    try:
        # Transpose so x runs left to right and z bottom to top
        image = ax.imshow(
            grid.heights.T,
            origin="lower",
            cmap=cmap,
            extent=(-half, half, -half, half),
            interpolation="nearest",
        )
        fig.colorbar(image, ax=ax, label="Height")
        ax.set_xlabel("x")
        ax.set_ylabel("z")
        if title:
            ax.set_title(title)
        fig.tight_layout()
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)

    logger.info("Saved heightmap image", path=str(path))
    return path
