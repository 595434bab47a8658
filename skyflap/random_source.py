"""Uniform random numbers in a fixed range."""

from __future__ import annotations

import random


class UniformRNG:
    """Generates floats uniformly distributed in [low, high)."""

    def __init__(self, low: float, high: float, seed: int | None = None) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        self._low = float(low)
        self._high = float(high)
        self._random = random.Random(seed)

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def generate(self) -> float:
        """Return the next random value."""
        return self._low + (self._high - self._low) * self._random.random()