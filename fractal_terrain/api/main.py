"""FastAPI application exposing terrain generation."""

from typing import Dict, List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.errors import InvalidConfiguration
from ..core.fractal_synthesizer import FractalParameters
from ..core.terrain import TerrainResult, build_terrain
from ..export import mesh_to_obj
from ..logging_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Fractal Terrain API",
    description="Diamond-square heightmaps and triangle meshes",
    version=__version__,
)


# Request/Response models
class TerrainRequest(BaseModel):
    """Parameters for one terrain."""

    resolution: int = Field(settings.default_resolution, ge=0, le=settings.max_resolution,
                            description="Number of subdivisions")
    cell_size: float = Field(settings.default_cell_size, gt=0, description="Distance between points")
    amplitude: float = Field(settings.default_amplitude, ge=0, description="Initial amplitude")
    decay: float = Field(settings.default_decay, gt=0, le=1, description="Amplitude decay per level")
    seed: int = Field(settings.default_seed, description="Random seed; 0 disables randomness")
    include_mesh: bool = Field(False, description="Return vertex and index buffers")

    def to_parameters(self) -> FractalParameters:
        return FractalParameters(
            resolution=self.resolution,
            cell_size=self.cell_size,
            amplitude=self.amplitude,
            decay=self.decay,
            seed=self.seed,
        )


class MeshBuffers(BaseModel):
    vertices: List[List[float]]
    indices: List[int]


class TerrainResponse(BaseModel):
    """Generated terrain summary."""

    point_count: int
    triangle_count: int
    statistics: Dict[str, float]
    heights: List[List[float]]
    mesh: Optional[MeshBuffers] = None


def _generate(request: TerrainRequest) -> TerrainResult:
    try:
        params = request.to_parameters()
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))
    return build_terrain(params)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Fractal Terrain API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/terrain/generate", response_model=TerrainResponse)
def generate_terrain(request: TerrainRequest):
    """Synthesize a heightmap and return its heights, statistics and optionally its mesh."""
    logger.info("Terrain generation requested", request=request.model_dump())
    result = _generate(request)

    mesh = None
    if request.include_mesh:
        mesh = MeshBuffers(
            vertices=result.mesh.vertices.tolist(),
            indices=result.mesh.indices.tolist(),
        )

    return TerrainResponse(
        point_count=result.grid.point_count,
        triangle_count=result.mesh.triangle_count,
        statistics=result.statistics.to_dict(),
        heights=result.grid.heights.tolist(),
        mesh=mesh,
    )


@app.post("/terrain/obj", response_class=PlainTextResponse)
def generate_terrain_obj(request: TerrainRequest):
    """Synthesize a terrain and return it as Wavefront OBJ text."""
    logger.info("OBJ export requested", request=request.model_dump())
    result = _generate(request)
    return PlainTextResponse(mesh_to_obj(result.mesh), media_type="text/plain")


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
