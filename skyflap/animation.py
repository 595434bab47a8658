"""A position that advances at a fixed speed and wraps around."""

from __future__ import annotations

import math


class LoopAnimator:
    """Advances a position by speed * dt, wrapping it into [0, loop_end)."""

    def __init__(self, speed: float, loop_end: float) -> None:
        if loop_end <= 0:
            raise ValueError("loop_end must be positive")
        self._speed = speed
        self._loop_end = loop_end
        self._position = 0.0

    def step(self, dt: float) -> None:
        """Advance the position by dt seconds."""
        self._position += dt * self._speed
        if self._position >= self._loop_end:
            self._position = math.fmod(self._position, self._loop_end)

    @property
    def position(self) -> float:
        return self._position

    @property
    def loop_end(self) -> float:
        return self._loop_end