"""Tests for snakes_ladders.config."""

import pytest

from snakes_ladders.config import DEFAULT_TIMINGS, Timings


def test_default_timings():
    t = DEFAULT_TIMINGS
    assert (t.spin_interval, t.settle_delay, t.step_delay) == (70, 300, 200)
    assert (t.transpose_delay, t.rotate_delay, t.cpu_delay) == (350, 300, 850)
    assert t.spin_ticks == (12, 17)


def test_scaled_divides_delays_only():
    fast = DEFAULT_TIMINGS.scaled(10)
    assert fast.step_delay == 20
    assert fast.cpu_delay == 85
    assert fast.spin_ticks == (12, 17)


def test_scaled_rejects_non_positive_speed():
    with pytest.raises(ValueError):
        DEFAULT_TIMINGS.scaled(0)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Timings(step_delay=-1)


def test_bad_tick_range_rejected():
    with pytest.raises(ValueError):
        Timings(spin_ticks=(5, 3))
