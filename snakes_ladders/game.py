"""Game facade — the surface a renderer or CLI talks to."""

from __future__ import annotations

import random
from dataclasses import dataclass

from snakes_ladders.autoplay import CPUAutoplay
from snakes_ladders.clock import Scheduler
from snakes_ladders.config import DEFAULT_TIMINGS, Timings
from snakes_ladders.engine import EngineObserver, Phase, TurnEngine, TurnState
from snakes_ladders.roster import Player, PlayerRoster


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot for rendering."""

    players: tuple[Player, ...]
    positions: tuple[int, ...]
    current: int
    dice: int | None
    rolling: bool
    winner: int | None
    phase: Phase
    log: tuple[str, ...]
    can_roll: bool


class Game:
    """Roster, engine and CPU autoplay wired together on one scheduler."""

    def __init__(
        self,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        timings: Timings = DEFAULT_TIMINGS,
        roster: PlayerRoster | None = None,
    ):
        self.rng = rng or random.Random()
        self.roster = roster if roster is not None else PlayerRoster(rng=self.rng)
        self.engine = TurnEngine(self.roster, scheduler, self.rng, timings)
        self.autoplay = CPUAutoplay(self.engine, timings)
        self.autoplay.refresh()

    @property
    def state(self) -> TurnState:
        return self.engine.state

    def subscribe(self, observer: EngineObserver) -> None:
        self.engine.subscribe(observer)

    # ── intents ──

    def request_roll(self) -> bool:
        return self.engine.request_roll()

    def request_reset(self) -> None:
        self.engine.reset()

    def add_player(self) -> bool:
        return self._roster_changed(self.roster.add_player())

    def remove_player(self) -> bool:
        return self._roster_changed(self.roster.remove_player())

    def rename_player(self, player_id: int, name: str) -> bool:
        return self._roster_changed(self.roster.rename_player(player_id, name))

    def set_cpu(self, player_id: int, is_cpu: bool) -> bool:
        return self._roster_changed(self.roster.set_cpu(player_id, is_cpu))

    def close(self) -> None:
        """Tear down: cancel every outstanding timer."""
        self.autoplay.stop()
        self.engine.cancel_timers()

    def _roster_changed(self, changed: bool) -> bool:
        if changed:
            self.engine.sync_roster()
            self.autoplay.refresh()
        return changed

    # ── observation ──

    def view(self) -> GameView:
        st = self.engine.state
        return GameView(
            players=tuple(Player(p.id, p.name, p.color, p.is_cpu) for p in self.roster),
            positions=tuple(st.positions),
            current=st.current,
            dice=st.dice,
            rolling=st.rolling,
            winner=st.winner,
            phase=st.phase,
            log=tuple(st.log),
            can_roll=st.can_roll,
        )
