"""A scene: the game objects of one level and the systems that run them."""

from __future__ import annotations

from typing import TypeVar

from skyflap.ecs import Component, GameObject
from skyflap.processors import PhysicsProcessor, RenderProcessor
from skyflap.vector2 import Vector2

ComponentT = TypeVar("ComponentT", bound=Component)


class Scene:
    """Holds game objects, steps physics, updates objects and draws them."""

    def __init__(self) -> None:
        self._objects: list[GameObject] = []
        self._render = RenderProcessor()
        self._physics = PhysicsProcessor()

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """The scene's objects in creation order."""
        return tuple(self._objects)

    @property
    def physics_time_scale(self) -> float:
        return self._physics.time_scale

    def create_object(self, position: Vector2 | None = None) -> GameObject:
        """Add a new game object at position (the origin by default)."""
        game_object = GameObject(position)
        self._objects.append(game_object)
        return game_object

    def initialize(self) -> None:
        """Wake every object, then collect renderers, bodies and colliders."""
        for game_object in self._objects:
            game_object.awake()
        self._render.initialize(self)
        self._physics.initialize(self)

    def clear(self) -> None:
        """Remove every object and forget what the processors collected."""
        self._objects.clear()
        self._render.clear()
        self._physics.clear()

    def update(self, dt: float) -> None:
        """Step physics, then update every object."""
        self._physics.step(dt)
        for game_object in self._objects:
            game_object.update(dt)

    def draw(self) -> None:
        self._render.render()

    def set_physics_time_scale(self, value: float) -> None:
        """Scale the physics time step; zero pauses physics."""
        self._physics.time_scale = value

    def get_component(self, kind: type[ComponentT]) -> ComponentT | None:
        """Return the first component of kind found on any object, or None."""
        for game_object in self._objects:
            component = game_object.get_component(kind)
            if component is not None:
                return component
        return None

    def get_components(self, kind: type[ComponentT]) -> list[ComponentT]:
        """Return every component of kind, object by object."""
        return [
            component
            for game_object in self._objects
            for component in game_object.get_components(kind)
        ]