"""Tests for snakes_ladders.clock."""

import asyncio

from snakes_ladders.clock import AsyncioScheduler, ManualClock


def test_nothing_fires_until_advanced():
    clock = ManualClock()
    fired = []
    clock.call_later(100, lambda: fired.append("a"))
    assert fired == []
    assert clock.pending() == 1


def test_advance_fires_due_timers_in_order():
    clock = ManualClock()
    fired = []
    clock.call_later(200, lambda: fired.append("b"))
    clock.call_later(100, lambda: fired.append("a"))
    clock.call_later(300, lambda: fired.append("c"))

    assert clock.advance(250) == 2
    assert fired == ["a", "b"]
    assert clock.now == 250


def test_same_deadline_fires_in_scheduling_order():
    clock = ManualClock()
    fired = []
    clock.call_later(50, lambda: fired.append(1))
    clock.call_later(50, lambda: fired.append(2))
    clock.advance(50)
    assert fired == [1, 2]


def test_cancelled_timer_never_fires():
    clock = ManualClock()
    fired = []
    timer = clock.call_later(100, lambda: fired.append("x"))
    timer.cancel()
    clock.advance(1000)
    assert fired == []
    assert clock.pending() == 0


def test_timers_scheduled_by_callbacks_fire_within_window():
    clock = ManualClock()
    fired = []

    def first():
        fired.append(clock.now)
        clock.call_later(100, lambda: fired.append(clock.now))

    clock.call_later(100, first)
    clock.advance(250)
    assert fired == [100, 200]


def test_run_until_idle_drains_queue():
    clock = ManualClock()
    fired = []
    clock.call_later(10, lambda: clock.call_later(10, lambda: fired.append(clock.now)))
    clock.run_until_idle()
    assert fired == [20]
    assert clock.pending() == 0


def test_run_until_idle_respects_limit():
    clock = ManualClock()
    fired = []
    clock.call_later(100, lambda: fired.append("early"))
    clock.call_later(5000, lambda: fired.append("late"))
    clock.run_until_idle(max_ms=1000)
    assert fired == ["early"]
    assert clock.pending() == 1


def test_asyncio_scheduler_uses_milliseconds():
    async def scenario():
        fired = []
        scheduler = AsyncioScheduler()
        scheduler.call_later(10, lambda: fired.append("ok"))
        cancelled = scheduler.call_later(10, lambda: fired.append("nope"))
        cancelled.cancel()
        await asyncio.sleep(0.05)
        return fired

    assert asyncio.run(scenario()) == ["ok"]
