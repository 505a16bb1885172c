"""Shared fixtures for terrain tests."""

import pytest

from fractal_terrain.core.fractal_synthesizer import FractalParameters, FractalSynthesizer
from fractal_terrain.core.height_grid import HeightGrid


@pytest.fixture
def flat_grid():
    """A 5x5 grid with unit spacing."""
    return HeightGrid.create(2, 1.0)


@pytest.fixture
def seeded_params():
    """Randomised parameters for a 17x17 grid."""
    return FractalParameters(resolution=4, cell_size=10.0, amplitude=10.0, decay=0.5, seed=42)


@pytest.fixture
def seeded_grid(seeded_params):
    """A synthesized 17x17 grid."""
    return FractalSynthesizer(seeded_params).synthesize()
