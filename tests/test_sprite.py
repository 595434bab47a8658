import numpy as np

from skyflap.image import Image
from skyflap.sprite import Coordinates, Sprite
from skyflap.surface import Surface
from skyflap.vector2 import Vector2


def _atlas():
    return Image(4, 4, np.arange(1, 17, dtype=np.uint32).reshape(4, 4))


def test_size_comes_from_coordinates():
    sprite = Sprite(_atlas(), Coordinates(1, 2, 3, 2))
    assert (sprite.width, sprite.height) == (3, 2)


def test_blit_copies_region():
    atlas = _atlas()
    sprite = Sprite(atlas, Coordinates(1, 1, 2, 3))
    target = Surface(4, 4)
    sprite.blit(target, Vector2(0.0, 0.0))
    assert np.array_equal(target.pixels[0:3, 0:2], atlas.pixels[1:4, 1:3])
    assert not target.pixels[:, 2:].any()
    assert not target.pixels[3, :].any()


def test_blit_rounds_small_offset_down():
    sprite = Sprite(_atlas(), Coordinates(0, 0, 2, 2))
    a = Surface(4, 4)
    b = Surface(4, 4)
    sprite.blit(a, Vector2(0.4, 0.0))
    sprite.blit(b, Vector2(0.0, 0.0))
    assert np.array_equal(a.pixels, b.pixels)


def test_blit_rounds_half_away_from_zero():
    sprite = Sprite(_atlas(), Coordinates(0, 0, 2, 2))
    a = Surface(4, 4)
    b = Surface(4, 4)
    sprite.blit(a, Vector2(0.5, 0.0))
    sprite.blit(b, Vector2(1.0, 0.0))
    assert np.array_equal(a.pixels, b.pixels)


def test_centered_equals_corner_offset():
    sprite = Sprite(_atlas(), Coordinates(0, 0, 2, 2))
    a = Surface(4, 4)
    b = Surface(4, 4)
    sprite.blit_centered(a, Vector2(2.0, 2.0))
    sprite.blit(b, Vector2(2.0, 2.0) - Vector2(sprite.width, sprite.height) * 0.5)
    assert np.array_equal(a.pixels, b.pixels)
    assert a.pixels.any()


def test_alpha_blit_of_opaque_atlas_sets_alpha():
    atlas = Image(1, 1, np.array([[0xFF102030]], dtype=np.uint32))
    target = Surface(1, 1)
    Sprite(atlas, Coordinates(0, 0, 1, 1)).blit(target, Vector2(), alpha_blending=True)
    assert int(target.pixels[0, 0]) & 0xFF000000 == 0xFF000000