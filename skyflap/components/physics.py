"""Rigid bodies and box colliders."""

from __future__ import annotations

from typing import Callable, Optional

from skyflap.ecs import Component
from skyflap.vector2 import Vector2

CollisionCallback = Callable[["BoxCollider"], None]


class Rigidbody(Component):
    """Moves its game object by a velocity that gravity accelerates."""

    def __init__(self, velocity: Vector2 | None = None, gravity: Vector2 | None = None) -> None:
        super().__init__()
        self.velocity = velocity.copy() if velocity is not None else Vector2()
        self.gravity = gravity.copy() if gravity is not None else Vector2()

    def step(self, dt: float) -> None:
        """Advance the simulation by dt seconds."""
        self.velocity += self.gravity * dt
        self.game_object.position += self.velocity * dt


class BoxCollider(Component):
    """An axis-aligned box centred on its game object.

    Intersections between colliders of the same group are not processed.
    """

    def __init__(self, size: Vector2, collision_group: int) -> None:
        super().__init__()
        self.size = size.copy()
        self._collision_group = collision_group
        self._callback: Optional[CollisionCallback] = None

    @property
    def collision_group(self) -> int:
        return self._collision_group

    def intersects(self, other: BoxCollider) -> bool:
        """Return whether the two boxes overlap; touching edges do not count."""
        offset = self.game_object.position - other.game_object.position
        combined = (self.size + other.size) * 0.5
        return abs(offset.x) < combined.x and abs(offset.y) < combined.y

    def set_collision_callback(self, callback: Optional[CollisionCallback]) -> None:
        """Call callback with the other collider whenever this one collides."""
        self._callback = callback

    @staticmethod
    def on_collision(c1: BoxCollider, c2: BoxCollider) -> None:
        """Notify both colliders of a collision between them."""
        if c1._callback is not None:
            c1._callback(c2)
        if c2._callback is not None:
            c2._callback(c1)