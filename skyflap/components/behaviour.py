"""Components that drive the game's rules."""

from __future__ import annotations

from typing import Callable, Optional

from skyflap.components.physics import Rigidbody
from skyflap.components.rendering import CounterRenderer
from skyflap.ecs import Component, GameObject
from skyflap.keys import InputState, Key
from skyflap.random_source import UniformRNG
from skyflap.vector2 import Vector2

Callback = Callable[[], None]


class BirdController(Component):
    """Sets the rigidbody's vertical speed on a jump and caps its fall speed."""

    def __init__(
        self,
        jump_key: Key | int,
        jump_y_speed: float,
        max_y_speed: float,
        input_state: InputState,
    ) -> None:
        super().__init__()
        self._jump_key = jump_key
        self._jump_y_speed = jump_y_speed
        self._max_y_speed = max_y_speed
        self._input = input_state
        self._jump_was_pressed = False
        self._rigidbody: Rigidbody | None = None

    def awake(self) -> None:
        self._rigidbody = self._require_component(Rigidbody)

    def update(self, dt: float) -> None:
        if self._rigidbody is None:
            raise RuntimeError("BirdController updated before awake")
        pressed = self._input.is_key_pressed(self._jump_key)
        velocity = self._rigidbody.velocity
        if pressed and not self._jump_was_pressed:
            velocity.y = self._jump_y_speed
        else:
            velocity.y = min(self._max_y_speed, velocity.y)
        self._jump_was_pressed = pressed


class DelayedCallback(Component):
    """Calls a callback once, when the delay has run out."""

    def __init__(self, delay_seconds: float) -> None:
        super().__init__()
        self._time_left = delay_seconds
        self._callback: Optional[Callback] = None

    @property
    def time_left(self) -> float:
        return self._time_left

    def set_callback(self, callback: Optional[Callback]) -> None:
        self._callback = callback

    def reset(self, new_delay: float) -> None:
        """Start counting down again from new_delay."""
        self._time_left = new_delay

    def update(self, dt: float) -> None:
        if self._time_left <= 0:
            return
        self._time_left -= dt
        if self._callback is not None and self._time_left <= 0:
            self._callback()


class KeyTrigger(Component):
    """Calls a callback on every update while a key is held."""

    def __init__(self, key: Key | int, input_state: InputState) -> None:
        super().__init__()
        self._key = key
        self._input = input_state
        self._callback: Optional[Callback] = None

    def set_callback(self, callback: Optional[Callback]) -> None:
        self._callback = callback

    def update(self, dt: float) -> None:
        if self._callback is not None and self._input.is_key_pressed(self._key):
            self._callback()


class PositionRecycler(Component):
    """Moves the object right by a displacement once it passes a threshold."""

    def __init__(self, threshold_x: float, displacement_x: float) -> None:
        super().__init__()
        self._threshold_x = threshold_x
        self._displacement_x = displacement_x
        self._callback: Optional[Callback] = None

    def set_recycle_callback(self, callback: Optional[Callback]) -> None:
        self._callback = callback

    def update(self, dt: float) -> None:
        position = self.game_object.position
        if position.x < self._threshold_x:
            position.x += self._displacement_x
            if self._callback is not None:
                self._callback()


class PipeHeightRandomizer(Component):
    """Places this object and a second one a fixed vertical interval apart.

    The gap between them is centred on a random height, drawn again each
    time the object's PositionRecycler recycles it.
    """

    def __init__(
        self, interval_y: float, generator_y: UniformRNG, second_part: GameObject
    ) -> None:
        super().__init__()
        self._interval_y = interval_y
        self._generator = generator_y
        self._second_part = second_part

    def awake(self) -> None:
        self.randomize_height()
        self._require_component(PositionRecycler).set_recycle_callback(self.randomize_height)

    def randomize_height(self) -> None:
        """Draw a new height for both parts, keeping their x positions."""
        first = self.game_object
        position = Vector2(
            first.position.x, self._generator.generate() - self._interval_y * 0.5
        )
        first.position = position
        self._second_part.position = position + Vector2(0.0, self._interval_y)


class PositionResetter(Component):
    """Remembers the object's position at awake and can restore it."""

    def __init__(self) -> None:
        super().__init__()
        self._original = Vector2()

    def awake(self) -> None:
        self._original = self.game_object.position.copy()

    def reset_position(self) -> None:
        self.game_object.position = self._original.copy()


class ScoreManager(Component):
    """Keeps the score and best score, shown by the object's CounterRenderer."""

    def __init__(self) -> None:
        super().__init__()
        self._score = 0
        self._highscore = 0
        self._renderer: CounterRenderer | None = None

    @property
    def score(self) -> int:
        return self._score

    @property
    def highscore(self) -> int:
        return self._highscore

    def _show(self) -> None:
        if self._renderer is None:
            raise RuntimeError("ScoreManager used before awake")
        self._renderer.set_number(self._score)

    def awake(self) -> None:
        self._renderer = self._require_component(CounterRenderer)
        self._show()

    def increment(self) -> None:
        self._score += 1
        self._highscore = max(self._highscore, self._score)
        self._show()

    def reset(self) -> None:
        self._score = 0
        self._show()