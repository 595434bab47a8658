"""Images held in memory, with run-length decoding and scaling."""

from __future__ import annotations

import numpy as np

from skyflap.scaling import floor_scale_integer
from skyflap.surface import Surface

_BYTES_PER_PIXEL = 4
_RUN_FLAG = 0x80


def rle_decode(rle_data: bytes, pixel_count: int) -> np.ndarray:
    """Decode run-length encoded 32-bit pixels.

    A header byte with the high bit set repeats the following pixel
    (header & 0x7F) times; otherwise it is followed by that many literal pixels.
    """
    data = bytes(rle_data)
    total = pixel_count * _BYTES_PER_PIXEL
    out = bytearray()
    pos = 0
    while len(out) < total:
        if pos >= len(data):
            raise ValueError("RLE data ends before the image is complete")
        header = data[pos]
        pos += 1
        if header & _RUN_FLAG:
            count = header & ~_RUN_FLAG
            if count == 0:
                raise ValueError("RLE run of zero pixels")
            pixel = data[pos : pos + _BYTES_PER_PIXEL]
            if len(pixel) < _BYTES_PER_PIXEL:
                raise ValueError("RLE data ends inside a run")
            out += pixel * count
            pos += _BYTES_PER_PIXEL
        else:
            size = header * _BYTES_PER_PIXEL
            chunk = data[pos : pos + size]
            if len(chunk) < size:
                raise ValueError("RLE data ends inside a literal block")
            out += chunk
            pos += size
    if len(out) > total:
        raise ValueError("RLE data holds more pixels than the image")
    return np.frombuffer(bytes(out), dtype="<u4").astype(np.uint32)


class Image(Surface):
    """A surface that owns its pixels."""

    @classmethod
    def from_rle(cls, width: int, height: int, rle_data: bytes) -> Image:
        """Build an image from run-length encoded pixel data."""
        pixels = rle_decode(rle_data, width * height).reshape(height, width)
        return cls(width, height, pixels)

    def scaled(self, factor: float) -> Image:
        """Return a nearest-neighbour copy scaled by factor."""
        if factor <= 0:
            raise ValueError("scale factor must be positive")
        width = floor_scale_integer(self.width, factor)
        height = floor_scale_integer(self.height, factor)
        if width == 0 or height == 0:
            return Image(width, height)
        rfactor = np.float32(1.0) / np.float32(factor)
        half = np.float32(0.5)
        ys = np.floor((np.arange(height, dtype=np.float32) + half) * rfactor).astype(np.intp)
        xs = np.floor((np.arange(width, dtype=np.float32) + half) * rfactor).astype(np.intp)
        ys = np.minimum(ys, self.height - 1)
        xs = np.minimum(xs, self.width - 1)
        return Image(width, height, self.pixels[np.ix_(ys, xs)])