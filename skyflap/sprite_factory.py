"""Loading of the sprite atlas and its list of named sprites."""

from __future__ import annotations

import struct
from os import PathLike
from pathlib import Path

from skyflap.image import Image
from skyflap.scaling import round_scale_integer
from skyflap.sprite import Coordinates, Sprite

_HEADER = struct.Struct("<HHI")
_FIELDS_PER_ENTRY = 5
_MAX_COORDINATE = 0xFFFF


def load_atlas(path: str | PathLike) -> Image:
    """Read an atlas file: width, height, data size, then RLE pixel data."""
    with open(path, "rb") as file:
        header = file.read(_HEADER.size)
        if len(header) < _HEADER.size:
            raise ValueError(f"{path}: atlas header is truncated")
        width, height, data_size = _HEADER.unpack(header)
        data = file.read(data_size)
    if len(data) < data_size:
        raise ValueError(f"{path}: atlas data is truncated")
    return Image.from_rle(width, height, data)


def _parse_coordinate(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"invalid sprite coordinate {token!r}") from None
    if not 0 <= value <= _MAX_COORDINATE:
        raise ValueError(f"sprite coordinate {value} out of range")
    return value


def load_coordinates(path: str | PathLike) -> dict[str, Coordinates]:
    """Read whitespace-separated entries of name x y width height.

    When a name repeats, the first entry wins.
    """
    tokens = Path(path).read_text().split()
    if len(tokens) % _FIELDS_PER_ENTRY:
        raise ValueError(f"{path}: incomplete sprite entry")
    result: dict[str, Coordinates] = {}
    for start in range(0, len(tokens), _FIELDS_PER_ENTRY):
        name, *fields = tokens[start : start + _FIELDS_PER_ENTRY]
        coords = Coordinates(*(_parse_coordinate(f) for f in fields))
        result.setdefault(name, coords)
    return result


class SpriteFactory:
    """Creates sprites from a scaled atlas by name."""

    def __init__(
        self,
        atlas_path: str | PathLike,
        sprite_list_path: str | PathLike,
        scale_factor: float = 1.0,
    ) -> None:
        self._atlas = load_atlas(atlas_path).scaled(scale_factor)
        self._coordinates = load_coordinates(sprite_list_path)
        self._scale = scale_factor

    @property
    def scale(self) -> float:
        return self._scale

    def create(self, name: str) -> Sprite:
        """Return the sprite called name, in scaled atlas coordinates."""
        try:
            coords = self._coordinates[name]
        except KeyError:
            raise KeyError(f"unknown sprite {name!r}") from None
        factor = self._scale
        scaled = Coordinates(
            round_scale_integer(coords.x, factor),
            round_scale_integer(coords.y, factor),
            round_scale_integer(coords.width, factor),
            round_scale_integer(coords.height, factor),
        )
        return Sprite(self._atlas, scaled)