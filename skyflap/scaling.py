"""Scaling of integer sizes by a float factor."""

from __future__ import annotations

import math


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_scale_integer(value: int, factor: float) -> int:
    """Scale value by factor, rounding halves away from zero."""
    return _round_half_away(value * factor)


def floor_scale_integer(value: int, factor: float) -> int:
    """Scale value by factor, rounding down."""
    return math.floor(value * factor)