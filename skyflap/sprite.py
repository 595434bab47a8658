"""Sprites: named rectangles of an atlas image."""

from __future__ import annotations

import math
from dataclasses import dataclass

from skyflap.image import Image
from skyflap.surface import Surface
from skyflap.vector2 import Vector2


def _round(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Coordinates:
    """A rectangle within an atlas."""

    x: int
    y: int
    width: int
    height: int


class Sprite:
    """A rectangular region of an atlas that can be drawn onto a surface."""

    def __init__(self, atlas: Image, coordinates: Coordinates) -> None:
        self._atlas = atlas
        self._coordinates = coordinates

    @property
    def coordinates(self) -> Coordinates:
        return self._coordinates

    @property
    def width(self) -> int:
        return self._coordinates.width

    @property
    def height(self) -> int:
        return self._coordinates.height

    def blit(self, target: Surface, position: Vector2, alpha_blending: bool = False) -> None:
        """Draw with the top-left corner at position."""
        c = self._coordinates
        self._atlas.blit(
            target,
            _round(position.x),
            _round(position.y),
            c.x,
            c.x + c.width,
            c.y,
            c.y + c.height,
            alpha_blending,
        )

    def blit_centered(
        self, target: Surface, position: Vector2, alpha_blending: bool = False
    ) -> None:
        """Draw with the sprite's centre at position."""
        half = Vector2(float(self.width), float(self.height)) * 0.5
        self.blit(target, position - half, alpha_blending)