"""Dice roll with a timed spin before the face settles."""

from __future__ import annotations

import logging
import random
from typing import Callable

from snakes_ladders.clock import Scheduler, Timer
from snakes_ladders.config import DEFAULT_TIMINGS, Timings

logger = logging.getLogger(__name__)


def next_spin_face(face: int | None) -> int:
    """Cycle 1→2→…→6→1; the spin is churn, not randomness."""
    return face % 6 + 1 if face else 1


class DiceResolver:
    """Drive the spin animation and draw the real face at the end.

    The spin shows ``randint(*timings.spin_ticks)`` cycling faces, one
    every ``spin_interval``. The last tick replaces the shown face with
    a uniform draw from *rng*; ``on_settled`` gets it ``settle_delay``
    later.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        timings: Timings = DEFAULT_TIMINGS,
        on_face: Callable[[int, bool], None] | None = None,
    ):
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.timings = timings
        self.on_face = on_face or (lambda face, final: None)
        self.face: int | None = None
        self._timer: Timer | None = None
        self._ticks_left = 0
        self._on_settled: Callable[[int], None] | None = None

    @property
    def active(self) -> bool:
        return self._timer is not None

    def roll(self, on_settled: Callable[[int], None]) -> bool:
        """Start a spin sequence. Returns False if one is already running."""
        if self.active:
            return False
        self._ticks_left = self.rng.randint(*self.timings.spin_ticks)
        self._on_settled = on_settled
        logger.debug("spinning for %d ticks", self._ticks_left)
        self._timer = self.scheduler.call_later(self.timings.spin_interval, self._tick)
        return True

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._on_settled = None

    def reset(self) -> None:
        self.cancel()
        self.face = None

    def _tick(self) -> None:
        self.face = next_spin_face(self.face)
        self.on_face(self.face, False)
        self._ticks_left -= 1
        if self._ticks_left > 0:
            self._timer = self.scheduler.call_later(self.timings.spin_interval, self._tick)
            return

        final = self.rng.randint(1, 6)
        self.face = final
        self.on_face(final, True)
        logger.debug("settled on %d", final)
        self._timer = self.scheduler.call_later(self.timings.settle_delay, self._settle)

    def _settle(self) -> None:
        callback = self._on_settled
        self._timer = None
        self._on_settled = None
        if callback is not None:
            callback(self.face)
