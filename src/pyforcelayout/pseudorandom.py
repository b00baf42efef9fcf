"""
Random sources for initial placement.

Placement draws coordinates through a RandomSource so callers can pass a
seeded generator and get reproducible layouts.
"""

from __future__ import annotations

from typing import Optional, Protocol
import numpy as np


class RandomSource(Protocol):
    """Anything that can draw a uniform real in [low, high)."""

    def uniform(self, low: float, high: float) -> float:
        ...


class PseudoRandom:
    """
    Linear congruential pseudo random number generator.

    Produces the same sequence on every platform for a given seed.
    """

    def __init__(self, seed: int = 1):
        self.seed = seed
        self.a = 214013
        self.c = 2531011
        self.m = 2147483648
        self.range = 32768

    def get_next(self) -> float:
        """Get random real in [0, 1)."""
        self.seed = (self.seed * self.a + self.c) % self.m
        return (self.seed >> 16) / self.range

    def uniform(self, low: float, high: float) -> float:
        """Get random real between low and high."""
        return low + self.get_next() * (high - low)


class NumpyRandom:
    """Random source backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None):
        self.generator = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(low + self.generator.random() * (high - low))


def default_source(seed: Optional[int] = None) -> RandomSource:
    """Entropy-backed source, or a reproducible one when a seed is given."""
    return NumpyRandom(seed)
