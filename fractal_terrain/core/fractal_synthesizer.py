"""
Diamond-square heightmap synthesis.

The synthesizer runs one pass over a ``HeightGrid``: the four corners are
set to the initial amplitude, then each subdivision level runs a diamond
step (cell centres) followed by a square step (edge midpoints). Random
displacement is drawn from an Alea generator owned by the synthesizer and
shrinks by the decay factor after every level.
"""

import math
import numbers
import time
from dataclasses import dataclass
from typing import Optional

import structlog

from .alea_prng import AleaPRNG
from .errors import InvalidConfiguration
from .height_grid import HeightGrid, validate_grid_parameters

logger = structlog.get_logger()

# Seed value that switches random displacement off
NO_RANDOM_SEED = 0

# Heights stay below amplitude * (1 + resolution / 2), so sums of four
# neighbours remain finite for any practical resolution
MAX_AMPLITUDE = 1e300


@dataclass(frozen=True)
class FractalParameters:
    """Parameters for one diamond-square pass."""

    resolution: int
    cell_size: float = 1.0
    amplitude: float = 1.0
    decay: float = 0.5
    seed: int = NO_RANDOM_SEED

    def __post_init__(self):
        validate_grid_parameters(self.resolution, self.cell_size)

        if not isinstance(self.amplitude, numbers.Real) or not math.isfinite(self.amplitude):
            raise InvalidConfiguration(f"amplitude must be a finite number, got {self.amplitude!r}")
        if not 0 <= self.amplitude <= MAX_AMPLITUDE:
            raise InvalidConfiguration(
                f"amplitude must be in [0, {MAX_AMPLITUDE:g}], got {self.amplitude}"
            )
        if not isinstance(self.decay, numbers.Real) or not math.isfinite(self.decay):
            raise InvalidConfiguration(f"decay must be a finite number, got {self.decay!r}")
        if not 0 < self.decay <= 1:
            raise InvalidConfiguration(f"decay must be in (0, 1], got {self.decay}")
        if isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral):
            raise InvalidConfiguration(f"seed must be an integer, got {self.seed!r}")

    @property
    def randomized(self) -> bool:
        """False when the seed disables random displacement."""
        return self.seed != NO_RANDOM_SEED


class FractalSynthesizer:
    """
    Single-pass diamond-square state machine over one grid.

    The instance owns its grid and its random source. ``synthesize`` may be
    called once; afterwards the grid is final and should only be read.
    """

    def __init__(self, params: FractalParameters, grid: Optional[HeightGrid] = None):
        """
        Initialize the synthesizer.

        Args:
            params: Fractal parameters
            grid: Optional flat grid to mutate; built from ``params`` if omitted

        Raises:
            InvalidConfiguration: If ``grid`` does not match ``params``
        """
        self.params = params

        if grid is None:
            grid = HeightGrid.create(params.resolution, params.cell_size)
        elif grid.resolution != params.resolution:
            raise InvalidConfiguration(
                f"grid resolution {grid.resolution} does not match parameters "
                f"resolution {params.resolution}"
            )
        self.grid = grid

        # Seeded once; every draw for this pass comes from here
        self._prng = AleaPRNG(params.seed) if params.randomized else None
        self._complete = False

    @property
    def complete(self) -> bool:
        """True once the pass has finished."""
        return self._complete

    @property
    def draws(self) -> int:
        """Number of random values consumed so far."""
        return self._prng.draws if self._prng is not None else 0

    def _offset(self, amplitude: float) -> float:
        """Random displacement in [-amplitude/2, amplitude/2)."""
        if self._prng is None:
            return 0.0
        return self._prng.centered(amplitude)

    def spacing_at(self, level: int) -> int:
        """Side length, in lattice steps, of the cells split at ``level``."""
        self._check_level(level)
        return (self.grid.point_count - 1) // (2 ** (level - 1))

    def amplitude_at(self, level: int) -> float:
        """Displacement amplitude in effect during ``level``."""
        self._check_level(level)
        return self.params.amplitude * self.params.decay ** (level - 1)

    def _check_level(self, level: int) -> None:
        if not 1 <= level <= self.params.resolution:
            raise ValueError(f"level must be in [1, {self.params.resolution}], got {level}")

    def initialise_corners(self) -> None:
        """Set the four corner heights to the initial amplitude."""
        for ix, iz in self.grid.corner_indices():
            self.grid.set_height(ix, iz, self.params.amplitude)

    def diamond_step(self, level: int, amplitude: float) -> int:
        """
        Set the centre of every cell at ``level``.

        Each centre becomes the mean of its NW, NE, SE and SW corners plus a
        random offset.

        Args:
            level: Subdivision level, starting at 1
            amplitude: Displacement amplitude for this level

        Returns:
            Number of points assigned
        """
        grid = self.grid
        spacing = self.spacing_at(level)
        half = spacing // 2
        assigned = 0

        for i in range(0, grid.point_count - 1, spacing):
            for j in range(0, grid.point_count - 1, spacing):
                height_nw = grid.get_height(i, j)
                height_ne = grid.get_height(i, j + spacing)
                height_se = grid.get_height(i + spacing, j + spacing)
                height_sw = grid.get_height(i + spacing, j)
                average = (height_nw + height_ne + height_se + height_sw) / 4
                grid.set_height(i + half, j + half, average + self._offset(amplitude))
                assigned += 1

        return assigned

    def square_step(self, level: int, amplitude: float) -> int:
        """
        Set every edge midpoint introduced at ``level``.

        Each midpoint becomes the mean of its N, E, S and W neighbours at
        half-spacing distance plus a random offset. Neighbours that fall
        outside the grid are left out of the mean.

        Args:
            level: Subdivision level, starting at 1
            amplitude: Displacement amplitude for this level

        Returns:
            Number of points assigned
        """
        grid = self.grid
        spacing = self.spacing_at(level)
        half = spacing // 2
        assigned = 0

        for row, i in enumerate(range(0, grid.point_count, half)):
            # Rows holding cell corners have their midpoints between corners
            first_j = half if row % 2 == 0 else 0
            for j in range(first_j, grid.point_count, spacing):
                total = 0.0
                count = 0
                for ni, nj in ((i - half, j), (i, j + half), (i + half, j), (i, j - half)):
                    if grid.contains(ni, nj):
                        total += grid.get_height(ni, nj)
                        count += 1
                grid.set_height(i, j, total / count + self._offset(amplitude))
                assigned += 1

        return assigned

    def synthesize(self) -> HeightGrid:
        """
        Run the full pass.

        Returns:
            The synthesized grid

        Raises:
            RuntimeError: If the pass has already run
        """
        if self._complete:
            raise RuntimeError("FractalSynthesizer has already run; create a new instance")

        params = self.params
        log = logger.bind(
            resolution=params.resolution,
            point_count=self.grid.point_count,
            seed=params.seed,
        )
        log.info("Starting diamond-square synthesis")
        t_start = time.perf_counter()

        self.initialise_corners()

        amplitude = params.amplitude
        for level in range(1, params.resolution + 1):
            centres = self.diamond_step(level, amplitude)
            midpoints = self.square_step(level, amplitude)
            log.debug(
                "Level complete",
                level=level,
                spacing=self.spacing_at(level),
                amplitude=amplitude,
                centres=centres,
                midpoints=midpoints,
            )
            amplitude *= params.decay

        self._complete = True
        log.info(
            "Diamond-square synthesis complete",
            draws=self.draws,
            elapsed_ms=round((time.perf_counter() - t_start) * 1000, 2),
        )
        return self.grid


def synthesize_heightmap(params: FractalParameters) -> HeightGrid:
    """Build a grid from ``params`` and run one synthesis pass over it."""
    return FractalSynthesizer(params).synthesize()
