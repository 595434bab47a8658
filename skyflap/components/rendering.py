"""Camera and components that draw sprites."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable

from skyflap.animation import LoopAnimator
from skyflap.ecs import Component
from skyflap.sprite import Sprite
from skyflap.surface import Surface
from skyflap.vector2 import Vector2


class Camera(Component):
    """Maps world positions onto a target surface."""

    def __init__(self, target: Surface, scale: float) -> None:
        super().__init__()
        self._target = target
        self._scale = scale

    @property
    def target(self) -> Surface:
        return self._target

    def position_on_target(self, world_position: Vector2) -> Vector2:
        """Return the target pixel position of world_position."""
        return (world_position - self.game_object.position) * self._scale


class Renderer(Component, ABC):
    """A component drawn by the render processor, lowest order first."""

    def __init__(self, order: int) -> None:
        super().__init__()
        self._order = order

    @property
    def order(self) -> int:
        return self._order

    @abstractmethod
    def render(self, camera: Camera) -> None:
        """Draw onto the camera's target."""


class SpriteRenderer(Renderer):
    """Draws one sprite centred on its game object."""

    def __init__(self, sprite: Sprite, order: int) -> None:
        super().__init__(order)
        self._sprite = sprite

    @property
    def sprite(self) -> Sprite:
        return self._sprite

    def render(self, camera: Camera) -> None:
        position = camera.position_on_target(self.game_object.position)
        self._sprite.blit_centered(camera.target, position, True)

    def set_sprite(self, sprite: Sprite) -> None:
        self._sprite = sprite


class TiledRenderer(Renderer):
    """Repeats a sprite to cover an area whose top-left corner is the object."""

    def __init__(self, sprite: Sprite, order: int, area_size: Vector2) -> None:
        super().__init__(order)
        self._sprite = sprite
        self._x_copies = math.ceil(area_size.x / sprite.width)
        self._y_copies = math.ceil(area_size.y / sprite.height)

    def render(self, camera: Camera) -> None:
        corner = camera.position_on_target(self.game_object.position)
        sprite = self._sprite
        for i in range(self._x_copies):
            for j in range(self._y_copies):
                offset = Vector2(float(i * sprite.width), float(j * sprite.height))
                sprite.blit(camera.target, corner + offset)


class CounterRenderer(Renderer):
    """Draws a non-negative number centred on its game object."""

    def __init__(self, digit_sprites: Iterable[Sprite], order: int) -> None:
        super().__init__(order)
        self._digit_sprites = list(digit_sprites)
        if len(self._digit_sprites) != 10:
            raise ValueError("a counter needs exactly ten digit sprites")
        self._digits: list[int] = []

    def set_number(self, number: int) -> None:
        """Show number; digits are kept least significant first."""
        if number < 0:
            raise ValueError("the counter cannot show negative numbers")
        if number == 0:
            self._digits = [0]
            return
        digits = []
        while number > 0:
            number, digit = divmod(number, 10)
            digits.append(digit)
        self._digits = digits

    @property
    def digits(self) -> tuple[int, ...]:
        """The shown digits, least significant first."""
        return tuple(self._digits)

    @property
    def width(self) -> int:
        """Total pixel width of the shown digits."""
        return sum(self._digit_sprites[d].width for d in self._digits)

    def render(self, camera: Camera) -> None:
        position = camera.position_on_target(self.game_object.position)
        position.x += self.width * 0.5
        for digit in self._digits:
            sprite = self._digit_sprites[digit]
            half_width = sprite.width * 0.5
            position.x -= half_width
            sprite.blit_centered(camera.target, position, True)
            position.x -= half_width


class SpriteAnimator(Component):
    """Cycles the sprite of the object's SpriteRenderer through frames."""

    def __init__(self, frames: Iterable[Sprite], fps: float) -> None:
        super().__init__()
        self._frames = list(frames)
        if not self._frames:
            raise ValueError("an animation needs at least one frame")
        self._animator = LoopAnimator(fps, float(len(self._frames)))
        self._renderer: SpriteRenderer | None = None

    def awake(self) -> None:
        self._renderer = self._require_component(SpriteRenderer)

    def update(self, dt: float) -> None:
        if self._renderer is None:
            raise RuntimeError("SpriteAnimator updated before awake")
        self._animator.step(dt)
        index = min(int(self._animator.position), len(self._frames) - 1)
        self._renderer.set_sprite(self._frames[index])