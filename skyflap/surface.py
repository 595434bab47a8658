"""Pixel surfaces of 32-bit ARGB colours."""

from __future__ import annotations

import numpy as np

_AMASK = 0xFF000000
_RBMASK = 0x00FF00FF
_GMASK = 0x0000FF00
_AGMASK = _AMASK | _GMASK
_ONEALPHA = 0x01000000
_MAX_SIDE = 0xFFFF


def alpha_blend_pixels(p1, p2):
    """Blend p2 over p1 using p2's alpha. Works on ints and uint64 arrays."""
    a = (p2 & _AMASK) >> 24
    na = 255 - a
    rb = ((na * (p1 & _RBMASK)) + (a * (p2 & _RBMASK))) >> 8
    ag = (na * ((p1 & _AGMASK) >> 8)) + (a * (_ONEALPHA | ((p2 & _GMASK) >> 8)))
    return (rb & _RBMASK) | (ag & _AGMASK)


class Surface:
    """A width x height grid of uint32 pixels, stored row by row."""

    def __init__(self, width: int = 0, height: int = 0, pixels=None) -> None:
        if not (0 <= width <= _MAX_SIDE and 0 <= height <= _MAX_SIDE):
            raise ValueError(f"invalid surface size {width}x{height}")
        if pixels is None:
            pixels = np.zeros((height, width), dtype=np.uint32)
        else:
            pixels = np.asarray(pixels, dtype=np.uint32)
            if pixels.shape != (height, width):
                raise ValueError(
                    f"pixel array shape {pixels.shape} does not match {width}x{height}"
                )
        self._width = width
        self._height = height
        self._pixels = pixels

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    def blit(
        self,
        target: Surface,
        x: int,
        y: int,
        x_from: int = 0,
        x_to: int | None = None,
        y_from: int = 0,
        y_to: int | None = None,
        alpha_blend: bool = False,
    ) -> None:
        """Copy the region [x_from, x_to) x [y_from, y_to) onto target at (x, y)."""
        if x_to is None:
            x_to = self._width
        if y_to is None:
            y_to = self._height
        if x_from < 0:
            x -= x_from
            x_from = 0
        if y_from < 0:
            y -= y_from
            y_from = 0
        if x < 0:
            x_from -= x
            x = 0
        if y < 0:
            y_from -= y
            y = 0

        x_to = min(x_to, target.width - (x - x_from), self._width)
        y_to = min(y_to, target.height - (y - y_from), self._height)
        if x_to <= x_from or y_to <= y_from:
            return

        source = self._pixels[y_from:y_to, x_from:x_to]
        dest = target.pixels[y : y + (y_to - y_from), x : x + (x_to - x_from)]
        if alpha_blend:
            blended = alpha_blend_pixels(dest.astype(np.uint64), source.astype(np.uint64))
            dest[...] = blended.astype(np.uint32)
        else:
            dest[...] = source

    def vertical_flip(self) -> None:
        """Reverse the order of the rows in place."""
        self._pixels[...] = self._pixels[::-1].copy()

    def clear(self) -> None:
        """Set every pixel to zero."""
        self._pixels.fill(0)


class Screen(Surface):
    """A surface drawn to the display; a given uint32 array is used in place."""