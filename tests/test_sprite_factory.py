import struct

import numpy as np
import pytest

from skyflap.scaling import round_scale_integer
from skyflap.sprite import Coordinates
from skyflap.sprite_factory import SpriteFactory, load_atlas, load_coordinates
from skyflap.surface import Surface
from skyflap.vector2 import Vector2

VALUES = [0xFF000011, 0xFF000022, 0xFF000033, 0xFF000044]


def _write_atlas(path):
    data = bytes([4]) + struct.pack("<4I", *VALUES)
    path.write_bytes(struct.pack("<HHI", 2, 2, len(data)) + data)
    return path


def _write_list(path, text="a 0 0 2 2\nb 1 0 1 2\n"):
    path.write_text(text)
    return path


@pytest.fixture
def files(tmp_path):
    return _write_atlas(tmp_path / "atlas.bin"), _write_list(tmp_path / "atlas.txt")


def test_load_atlas_reads_pixels(files):
    atlas = load_atlas(files[0])
    assert atlas.pixels.tolist() == [VALUES[0:2], VALUES[2:4]]


def test_load_atlas_truncated(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(struct.pack("<HHI", 2, 2, 17) + bytes([4]))
    with pytest.raises(ValueError):
        load_atlas(path)


def test_load_coordinates(files):
    coords = load_coordinates(files[1])
    assert coords == {"a": Coordinates(0, 0, 2, 2), "b": Coordinates(1, 0, 1, 2)}


def test_duplicate_name_keeps_first(tmp_path):
    path = _write_list(tmp_path / "dup.txt", "a 0 0 2 2\na 1 1 1 1\n")
    assert load_coordinates(path)["a"] == Coordinates(0, 0, 2, 2)


@pytest.mark.parametrize("text", ["a 0 0 2\n", "a 0 0 2 x\n", "a 0 0 -2 2\n"])
def test_malformed_list_rejected(tmp_path, text):
    with pytest.raises(ValueError):
        load_coordinates(_write_list(tmp_path / "bad.txt", text))


def test_create_at_unit_scale(files):
    factory = SpriteFactory(files[0], files[1], 1.0)
    sprite = factory.create("b")
    assert (sprite.width, sprite.height) == (1, 2)
    target = Surface(1, 2)
    sprite.blit(target, Vector2())
    assert target.pixels.tolist() == [[VALUES[1]], [VALUES[3]]]


def test_create_at_double_scale(files):
    factory = SpriteFactory(files[0], files[1], 2.0)
    assert factory.scale == 2.0
    sprite = factory.create("a")
    assert sprite.width == round_scale_integer(2, 2.0)
    target = Surface(sprite.width, sprite.height)
    sprite.blit(target, Vector2())
    assert target.pixels[0, 0] == VALUES[0]
    assert target.pixels[-1, -1] == VALUES[3]
    assert np.array_equal(target.pixels[0:2, 0:2], np.full((2, 2), VALUES[0], dtype=np.uint32))


def test_unknown_sprite_raises(files):
    factory = SpriteFactory(files[0], files[1], 1.0)
    with pytest.raises(KeyError):
        factory.create("missing")