"""Systems that step physics and draw renderers over a whole scene."""

from __future__ import annotations

from typing import Protocol, TypeVar

from skyflap.components.physics import BoxCollider, Rigidbody
from skyflap.components.rendering import Camera, Renderer
from skyflap.ecs import Component

ComponentT = TypeVar("ComponentT", bound=Component)


class ComponentSource(Protocol):
    """Anything that can look up components, such as a scene."""

    def get_component(self, kind: type[ComponentT]) -> ComponentT | None: ...

    def get_components(self, kind: type[ComponentT]) -> list[ComponentT]: ...


class PhysicsProcessor:
    """Steps rigid bodies and reports collisions between collider groups."""

    def __init__(self) -> None:
        self._bodies: list[Rigidbody] = []
        self._groups: dict[int, list[BoxCollider]] = {}
        self._time_scale = 1.0

    @property
    def time_scale(self) -> float:
        """Multiplier on dt; zero pauses physics entirely."""
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        self._time_scale = value

    def initialize(self, scene: ComponentSource) -> None:
        """Collect the scene's rigid bodies and colliders."""
        self._bodies.extend(scene.get_components(Rigidbody))
        for collider in scene.get_components(BoxCollider):
            self._groups.setdefault(collider.collision_group, []).append(collider)

    def clear(self) -> None:
        self._bodies.clear()
        self._groups.clear()

    def step(self, dt: float) -> None:
        """Move enabled bodies, then check every pair of distinct groups."""
        if self._time_scale == 0:
            return
        scaled = dt * self._time_scale
        for body in self._bodies:
            if body.enabled:
                body.step(scaled)

        ordered = sorted(self._groups.items())
        for index, (_, first_group) in enumerate(ordered):
            for _, second_group in ordered[index + 1 :]:
                for col1 in first_group:
                    if not col1.enabled:
                        continue
                    for col2 in second_group:
                        if col2.enabled and col1.intersects(col2):
                            BoxCollider.on_collision(col1, col2)


class RenderProcessor:
    """Clears the camera's target and draws enabled renderers in order."""

    def __init__(self) -> None:
        self._renderers: list[Renderer] = []
        self._camera: Camera | None = None

    def initialize(self, scene: ComponentSource) -> None:
        """Find the scene's camera and its renderers, sorted by order."""
        self._camera = scene.get_component(Camera)
        self._renderers.extend(scene.get_components(Renderer))
        self._renderers.sort(key=lambda renderer: renderer.order)

    def clear(self) -> None:
        self._renderers.clear()
        self._camera = None

    def render(self) -> None:
        if self._camera is None:
            raise RuntimeError("the scene has no camera")
        self._camera.target.clear()
        for renderer in self._renderers:
            if renderer.enabled:
                renderer.render(self._camera)