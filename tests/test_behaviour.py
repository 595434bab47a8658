import numpy as np
import pytest

from skyflap.components.behaviour import (
    BirdController,
    DelayedCallback,
    KeyTrigger,
    PipeHeightRandomizer,
    PositionRecycler,
    PositionResetter,
    ScoreManager,
)
from skyflap.components.physics import Rigidbody
from skyflap.components.rendering import CounterRenderer
from skyflap.ecs import GameObject
from skyflap.image import Image
from skyflap.keys import InputState, Key
from skyflap.random_source import UniformRNG
from skyflap.sprite import Coordinates, Sprite
from skyflap.vector2 import Vector2

JUMP = -160.0
MAX_FALL = 220.0


def _bird():
    inputs = InputState()
    obj = GameObject()
    body = obj.add_component(Rigidbody(Vector2(), Vector2()))
    controller = obj.add_component(BirdController(Key.SPACE, JUMP, MAX_FALL, inputs))
    obj.awake()
    return inputs, body, controller


def test_bird_jumps_on_press():
    inputs, body, controller = _bird()
    inputs.set_key(Key.SPACE, True)
    controller.update(0.01)
    assert body.velocity.y == JUMP


def test_bird_does_not_jump_again_while_held():
    inputs, body, controller = _bird()
    inputs.set_key(Key.SPACE, True)
    controller.update(0.01)
    body.velocity.y = 1000.0
    controller.update(0.01)
    assert body.velocity.y == MAX_FALL


def test_bird_jumps_after_release_and_press():
    inputs, body, controller = _bird()
    inputs.set_key(Key.SPACE, True)
    controller.update(0.01)
    inputs.set_key(Key.SPACE, False)
    body.velocity.y = 50.0
    controller.update(0.01)
    assert body.velocity.y == 50.0
    inputs.set_key(Key.SPACE, True)
    controller.update(0.01)
    assert body.velocity.y == JUMP


def test_bird_needs_rigidbody():
    obj = GameObject()
    obj.add_component(BirdController(Key.SPACE, JUMP, MAX_FALL, InputState()))
    with pytest.raises(LookupError):
        obj.awake()


def test_delayed_callback_fires_once_when_time_runs_out():
    calls = []
    delayed = DelayedCallback(1.0)
    delayed.set_callback(lambda: calls.append(1))
    delayed.update(0.5)
    assert calls == []
    delayed.update(0.5)
    assert calls == [1]
    delayed.update(0.5)
    assert calls == [1]


def test_delayed_callback_reset_rearms():
    calls = []
    delayed = DelayedCallback(0.1)
    delayed.set_callback(lambda: calls.append(1))
    delayed.update(0.2)
    delayed.reset(0.1)
    assert delayed.time_left == 0.1
    delayed.update(0.2)
    assert calls == [1, 1]


def test_key_trigger_fires_while_held():
    inputs = InputState()
    calls = []
    trigger = KeyTrigger(Key.SPACE, inputs)
    trigger.set_callback(lambda: calls.append(1))
    trigger.update(0.1)
    assert calls == []
    inputs.set_key(Key.SPACE, True)
    trigger.update(0.1)
    trigger.update(0.1)
    assert calls == [1, 1]


def test_recycler_moves_object_past_threshold():
    obj = GameObject(Vector2(-1.0, 3.0))
    calls = []
    recycler = obj.add_component(PositionRecycler(0.0, 10.0))
    recycler.set_recycle_callback(lambda: calls.append(1))
    recycler.update(0.1)
    assert obj.position == Vector2(9.0, 3.0)
    assert calls == [1]
    recycler.update(0.1)
    assert calls == [1]


def _pipe(low, high, interval, seed=1):
    second = GameObject(Vector2(30.0, 0.0))
    first = GameObject(Vector2(30.0, 0.0))
    first.add_component(PositionRecycler(0.0, 100.0))
    randomizer = first.add_component(
        PipeHeightRandomizer(interval, UniformRNG(low, high, seed), second)
    )
    return first, second, randomizer


def test_pipe_parts_keep_interval_around_random_centre():
    interval = 20.0
    first, second, _ = _pipe(10.0, 90.0, interval)
    first.awake()
    assert second.position.y - first.position.y == pytest.approx(interval)
    centre = (first.position.y + second.position.y) / 2
    assert 10.0 <= centre < 90.0
    assert first.position.x == second.position.x == 30.0


def test_pipe_fixed_centre():
    first, second, randomizer = _pipe(50.0, 50.0, 20.0)
    randomizer.randomize_height()
    assert first.position.y == pytest.approx(40.0)
    assert second.position.y == pytest.approx(60.0)


def test_pipe_rerandomizes_when_recycled():
    interval = 20.0
    first, second, _ = _pipe(10.0, 90.0, interval)
    first.awake()
    first.position.x = -5.0
    first.update(0.1)
    assert first.position.x == pytest.approx(95.0)
    assert second.position.x == pytest.approx(95.0)
    assert second.position.y - first.position.y == pytest.approx(interval)


def test_pipe_needs_recycler():
    obj = GameObject()
    obj.add_component(PipeHeightRandomizer(1.0, UniformRNG(0.0, 1.0), GameObject()))
    with pytest.raises(LookupError):
        obj.awake()


def test_position_resetter_restores_awake_position():
    start = Vector2(4.0, 5.0)
    obj = GameObject(start)
    resetter = obj.add_component(PositionResetter())
    obj.awake()
    obj.position.x = 100.0
    resetter.reset_position()
    assert obj.position == start
    obj.position.y = -1.0
    resetter.reset_position()
    assert obj.position == start


def _score_object():
    atlas = Image(10, 1, np.full((1, 10), 0xFFFFFFFF, dtype=np.uint32))
    sprites = [Sprite(atlas, Coordinates(d, 0, 1, 1)) for d in range(10)]
    obj = GameObject()
    counter = obj.add_component(CounterRenderer(sprites, 0))
    manager = obj.add_component(ScoreManager())
    obj.awake()
    return counter, manager


def test_score_manager_shows_zero_on_awake():
    counter, manager = _score_object()
    assert counter.digits == (0,)
    assert manager.score == 0


def test_score_manager_increment_and_reset():
    counter, manager = _score_object()
    manager.increment()
    manager.increment()
    assert manager.score == 2
    assert counter.digits == (2,)
    manager.reset()
    assert manager.score == 0
    assert manager.highscore == 2
    assert counter.digits == (0,)


def test_score_manager_needs_counter():
    obj = GameObject()
    obj.add_component(ScoreManager())
    with pytest.raises(LookupError):
        obj.awake()