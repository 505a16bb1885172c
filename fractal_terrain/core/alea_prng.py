"""
Alea pseudo-random number generator.

Based on Johannes Baagøe's Alea algorithm. The generator is pure Python and
produces the same sequence on every platform for the same seed, which makes
heightmaps reproducible bit for bit.
"""

import numbers
from typing import Iterable, Union

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10

Seed = Union[int, str, Iterable[Union[int, str]]]


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hash, used only while seeding."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Seeded Alea generator.

    Each instance carries its own state; nothing is shared between
    instances, so two generators built from the same seed always agree.
    """

    def __init__(self, seed: Seed):
        """
        Initialize the generator.

        Args:
            seed: Integer, string, or an iterable of either
        """
        if isinstance(seed, (numbers.Integral, str)):
            parts = [seed]
        else:
            parts = list(seed)
        # NumPy integers hash the same as the equal Python int
        parts = [str(int(part)) if isinstance(part, numbers.Integral) else part for part in parts]

        self.seed = seed
        self.draws = 0

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for part in parts:
            self.s0 = self._wrap(self.s0 - mash(part))
            self.s1 = self._wrap(self.s1 - mash(part))
            self.s2 = self._wrap(self.s2 - mash(part))

    @staticmethod
    def _wrap(value: float) -> float:
        return value + 1 if value < 0 else value

    def random(self) -> float:
        """Return the next value in [0, 1)."""
        self.draws += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def centered(self, magnitude: float) -> float:
        """
        Return a value drawn uniformly from [-magnitude/2, magnitude/2).

        Args:
            magnitude: Width of the interval

        Returns:
            Offset centred on zero
        """
        return self.random() * magnitude - magnitude / 2

    def state(self) -> tuple:
        """Snapshot of the internal state, for comparing generators."""
        return (self.s0, self.s1, self.s2, self.c)
