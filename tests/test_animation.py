import random

import pytest

from skyflap.animation import LoopAnimator


def test_starts_at_zero():
    assert LoopAnimator(10.0, 4.0).position == 0.0


def test_loop_end_is_kept():
    assert LoopAnimator(10.0, 4.0).loop_end == 4.0


def test_step_advances_by_speed():
    anim = LoopAnimator(2.0, 10.0)
    anim.step(0.5)
    assert anim.position == pytest.approx(1.0)


def test_step_wraps_past_end():
    anim = LoopAnimator(1.0, 4.0)
    anim.step(5.0)
    assert anim.position == pytest.approx(1.0)


def test_full_loop_returns_to_start():
    anim = LoopAnimator(4.0, 4.0)
    anim.step(1.0)
    assert anim.position == 0.0


def test_position_stays_in_range():
    rng = random.Random(3)
    anim = LoopAnimator(10.0, 4.0)
    for _ in range(500):
        anim.step(rng.uniform(0.0, 0.1))
        assert 0.0 <= anim.position < anim.loop_end


def test_non_positive_loop_end_rejected():
    with pytest.raises(ValueError):
        LoopAnimator(1.0, 0.0)