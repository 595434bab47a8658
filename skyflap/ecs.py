"""Game objects and the components attached to them."""

from __future__ import annotations

from typing import TypeVar

from skyflap.vector2 import Vector2

ComponentT = TypeVar("ComponentT", bound="Component")


class Component:
    """A piece of behaviour or data attached to a game object."""

    def __init__(self) -> None:
        self.enabled = True
        self._game_object: GameObject | None = None

    @property
    def game_object(self) -> GameObject:
        """The game object this component is attached to."""
        if self._game_object is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to a game object")
        return self._game_object

    def get_component(self, kind: type[ComponentT]) -> ComponentT | None:
        """Return the first component of kind on the same game object."""
        return self.game_object.get_component(kind)

    def _require_component(self, kind: type[ComponentT]) -> ComponentT:
        component = self.get_component(kind)
        if component is None:
            raise LookupError(
                f"{type(self).__name__} needs a {kind.__name__} on the same game object"
            )
        return component

    def awake(self) -> None:
        """Called once when the scene is initialised."""

    def update(self, dt: float) -> None:
        """Called every frame while the component is enabled."""


class GameObject:
    """A positioned container of components."""

    def __init__(self, position: Vector2 | None = None) -> None:
        self.position = position.copy() if position is not None else Vector2()
        self._components: list[Component] = []

    def awake(self) -> None:
        """Wake every component, enabled or not."""
        for component in self._components:
            component.awake()

    def update(self, dt: float) -> None:
        """Update the enabled components in the order they were added."""
        for component in self._components:
            if component.enabled:
                component.update(dt)

    def get_component(self, kind: type[ComponentT]) -> ComponentT | None:
        """Return the first component that is an instance of kind, or None."""
        return next((c for c in self._components if isinstance(c, kind)), None)

    def get_components(self, kind: type[ComponentT]) -> list[ComponentT]:
        """Return every component that is an instance of kind."""
        return [c for c in self._components if isinstance(c, kind)]

    def add_component(self, component: ComponentT) -> ComponentT:
        """Attach component to this object and return it."""
        if component._game_object is not None and component._game_object is not self:
            raise ValueError("component is already attached to another game object")
        component._game_object = self
        self._components.append(component)
        return component