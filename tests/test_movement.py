"""Tests for snakes_ladders.movement."""

from snakes_ladders.clock import ManualClock
from snakes_ladders.movement import MovementAnimator


def _animator():
    clock = ManualClock()
    steps: list[tuple[int, int, float]] = []
    anim = MovementAnimator(clock, on_step=lambda p, c: steps.append((p, c, clock.now)))
    return clock, anim, steps


def test_zero_steps_arrives_immediately():
    clock, anim, steps = _animator()
    arrived = []
    anim.advance(0, 12, 0, arrived.append)
    assert arrived == [12]
    assert steps == []
    assert clock.pending() == 0


def test_one_cell_per_step_delay():
    clock, anim, steps = _animator()
    arrived = []
    anim.advance(1, 5, 3, arrived.append)

    # first step is immediate
    assert steps == [(1, 6, 0)]
    assert arrived == []

    clock.run_until_idle()
    assert steps == [(1, 6, 0), (1, 7, 200), (1, 8, 400)]
    assert arrived == [8]


def test_arrive_called_once():
    clock, anim, steps = _animator()
    arrived = []
    anim.advance(0, 0, 6, arrived.append)
    clock.run_until_idle()
    assert arrived == [6]


def test_clamped_at_100():
    clock, anim, steps = _animator()
    arrived = []
    anim.advance(0, 98, 5, arrived.append)
    clock.run_until_idle()
    assert [c for _, c, _ in steps] == [99, 100]
    assert arrived == [100]


def test_cancel_stops_walk():
    clock, anim, steps = _animator()
    arrived = []
    anim.advance(0, 0, 4, arrived.append)
    clock.advance(250)
    anim.cancel()
    clock.run_until_idle()
    assert [c for _, c, _ in steps] == [1, 2]
    assert arrived == []
    assert not anim.active
