"""Step-by-step token movement."""

from __future__ import annotations

from typing import Callable

from snakes_ladders.clock import Scheduler, Timer
from snakes_ladders.config import BOARD_SIZE, DEFAULT_TIMINGS, Timings


class MovementAnimator:
    """Walk a player forward one cell per ``step_delay``.

    The first step is taken immediately. ``on_step(player, cell)`` is
    called after every step and ``on_arrive(cell)`` once after the last.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        timings: Timings = DEFAULT_TIMINGS,
        on_step: Callable[[int, int], None] | None = None,
    ):
        self.scheduler = scheduler
        self.timings = timings
        self.on_step = on_step or (lambda player, cell: None)
        self._timer: Timer | None = None

    @property
    def active(self) -> bool:
        return self._timer is not None

    def advance(
        self,
        player: int,
        start: int,
        steps: int,
        on_arrive: Callable[[int], None],
    ) -> None:
        if steps <= 0:
            on_arrive(start)
            return
        target = min(start + steps, BOARD_SIZE)
        self._step(player, start, target, on_arrive)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None

    def _step(self, player: int, pos: int, target: int, on_arrive: Callable[[int], None]) -> None:
        self._timer = None
        pos += 1
        self.on_step(player, pos)
        if pos < target:
            self._timer = self.scheduler.call_later(
                self.timings.step_delay,
                lambda: self._step(player, pos, target, on_arrive),
            )
        else:
            on_arrive(pos)
