"""Uniform random number source for sampling."""

from __future__ import annotations

import random as _random
import time


class Random:
    """Draws uniformly distributed floats from the half-open range [low, high)."""

    __slots__ = ("low", "high", "_generator")

    def __init__(self, low: float = 0.0, high: float = 1.0, seed: int | None = None) -> None:
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        self.low = float(low)
        self.high = float(high)
        if seed is None:
            seed = time.time_ns()
        self._generator = _random.Random(seed)

    def sample(self) -> float:
        """Return the next value in [low, high)."""
        return self.low + (self.high - self.low) * self._generator.random()

    def __repr__(self) -> str:
        return f"Random(low={self.low}, high={self.high})"