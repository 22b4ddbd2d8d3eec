"""Automatic rolls for computer-controlled players."""

from __future__ import annotations

import logging

from snakes_ladders.clock import Timer
from snakes_ladders.config import DEFAULT_TIMINGS, Timings
from snakes_ladders.engine import EngineEvent, TurnEngine

logger = logging.getLogger(__name__)


class CPUAutoplay:
    """Roll for a CPU player once its turn has sat idle for ``cpu_delay``.

    Re-evaluated after every engine event and roster change. Whenever the
    watched state (current player, rolling flag, winner, roster, reset
    generation) differs from what the pending trigger was scheduled
    against, the trigger is cancelled and, if still eligible, scheduled
    again. At most one trigger is ever pending.
    """

    def __init__(self, engine: TurnEngine, timings: Timings = DEFAULT_TIMINGS):
        self.engine = engine
        self.timings = timings
        self._timer: Timer | None = None
        self._key: tuple | None = None
        self._stopped = False
        engine.subscribe(self)

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def on_event(self, event: EngineEvent) -> None:
        self.refresh()

    def refresh(self) -> None:
        if self._stopped:
            return
        key = self._watch_key()
        if key == self._key:
            return
        self._key = key
        self._cancel()
        if self._eligible():
            logger.debug("cpu roll scheduled for player %d", self.engine.state.current)
            self._timer = self.engine.scheduler.call_later(self.timings.cpu_delay, self._fire)

    def stop(self) -> None:
        self._stopped = True
        self._cancel()

    def _watch_key(self) -> tuple:
        st = self.engine.state
        return (st.current, st.rolling, st.winner, self.engine.roster.version, st.generation)

    def _eligible(self) -> bool:
        st = self.engine.state
        roster = self.engine.roster
        if not st.can_roll or st.current >= len(roster):
            return False
        return roster[st.current].is_cpu

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None

    def _fire(self) -> None:
        self._timer = None
        logger.debug("cpu rolls for player %d", self.engine.state.current)
        self.engine.request_roll()
