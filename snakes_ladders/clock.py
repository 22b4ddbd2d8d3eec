"""Single-queue timer scheduling.

Everything that waits in the game goes through a :class:`Scheduler`:
dice spin ticks, movement steps, transition and rotation delays, and
the CPU auto-roll. Callbacks run one at a time on the same queue, so
no locking is needed anywhere in the engine.

Two implementations:

* :class:`AsyncioScheduler` — real time, on a running asyncio loop.
* :class:`ManualClock` — virtual time advanced explicitly; used by the
  tests and the headless simulator.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol


class Timer(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Structural interface — asyncio loops and ManualClock both fit."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> Timer: ...


# ── asyncio ─────────────────────────────────────────────────────────

class AsyncioScheduler:
    """Schedule on an asyncio event loop; delays are in milliseconds."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000.0, callback)


# ── virtual clock ───────────────────────────────────────────────────

@dataclass(order=True)
class ManualTimer:
    when: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """Deterministic clock: nothing fires until :meth:`advance` is called."""

    def __init__(self):
        self.now: float = 0.0
        self._queue: list[ManualTimer] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + max(delay_ms, 0.0), next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        return timer

    def pending(self) -> int:
        return sum(1 for t in self._queue if not t.cancelled)

    def next_deadline(self) -> float | None:
        self._drop_cancelled()
        return self._queue[0].when if self._queue else None

    def advance(self, ms: float) -> int:
        """Move time forward by *ms*, firing every timer that comes due.

        Timers scheduled by callbacks fire too if they fall inside the
        window. Returns the number of callbacks run.
        """
        deadline = self.now + ms
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].when > deadline:
                break
            timer = heapq.heappop(self._queue)
            self.now = timer.when
            timer.callback()
            fired += 1
        self.now = deadline
        return fired

    def run_until_idle(self, max_ms: float = float("inf")) -> int:
        """Fire timers in order until the queue is empty or *max_ms* passes."""
        limit = self.now + max_ms
        fired = 0
        while True:
            when = self.next_deadline()
            if when is None or when > limit:
                break
            fired += self.advance(when - self.now)
        return fired

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
