"""Turn engine — the roll → move → transpose → rotate state machine."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from snakes_ladders.board import transition_for
from snakes_ladders.clock import Scheduler, Timer
from snakes_ladders.config import BOARD_SIZE, DEFAULT_TIMINGS, LOG_LIMIT, Timings
from snakes_ladders.dice import DiceResolver
from snakes_ladders.movement import MovementAnimator
from snakes_ladders.roster import PlayerRoster

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    ROLLING = "rolling"
    MOVING = "moving"
    RESOLVING = "resolving"
    FINISHED = "finished"


# ── Structured types ────────────────────────────────────────────────

@dataclass
class EngineEvent:
    """One observable change.

    kind is one of: roll_started, spin, rolled, step, exact_roll,
    ladder, snake, teleport, turn, win, reset, roster.
    """

    kind: str
    player: int | None = None
    value: int | None = None
    message: str | None = None


@dataclass
class TurnState:
    """Everything a renderer needs; mutated only by TurnEngine."""

    positions: list[int] = field(default_factory=list)
    current: int = 0
    dice: int | None = None
    rolling: bool = False
    winner: int | None = None
    phase: Phase = Phase.IDLE
    log: deque[str] = field(default_factory=lambda: deque(maxlen=LOG_LIMIT))
    generation: int = 0  # bumped on every reset

    @property
    def can_roll(self) -> bool:
        return not self.rolling and self.winner is None and self.phase is not Phase.FINISHED


# ── Observer ────────────────────────────────────────────────────────

class EngineObserver(Protocol):
    """Receives events as the engine changes state."""

    def on_event(self, event: EngineEvent) -> None: ...


@dataclass
class ListObserver:
    """Collects events into a list."""

    events: list[EngineEvent] = field(default_factory=list)

    def on_event(self, event: EngineEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]


# ── Engine ──────────────────────────────────────────────────────────

class TurnEngine:
    """Owns TurnState and advances it on scheduler callbacks.

    Intents (:meth:`request_roll`, :meth:`reset`, :meth:`sync_roster`)
    are synchronous; everything after a roll is accepted happens in
    timer callbacks. A turn holds ``rolling`` from the roll request
    until the turn has rotated to the next player (or the game is won),
    so no second roll can sneak in while the turn is still resolving.
    """

    def __init__(
        self,
        roster: PlayerRoster,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        timings: Timings = DEFAULT_TIMINGS,
    ):
        self.roster = roster
        self.scheduler = scheduler
        self.timings = timings
        self.state = TurnState(positions=[0] * len(roster))
        self.observers: list[EngineObserver] = []
        self.dice = DiceResolver(scheduler, rng, timings, on_face=self._on_face)
        self.animator = MovementAnimator(scheduler, timings, on_step=self._on_step)
        self._timer: Timer | None = None
        self._mover: int | None = None  # id of the player whose roll is in flight
        self._winner_id: int | None = None

    def subscribe(self, observer: EngineObserver) -> None:
        self.observers.append(observer)

    # ── intents ──

    def request_roll(self) -> bool:
        if not self.state.can_roll:
            logger.debug(
                "roll ignored (rolling=%s, winner=%s)",
                self.state.rolling, self.state.winner,
            )
            return False
        self._mover = self.roster[self.state.current].id
        self.state.rolling = True
        self.state.phase = Phase.ROLLING
        self.dice.roll(self._on_settled)
        self._emit("roll_started", player=self.state.current)
        return True

    def reset(self) -> None:
        """Back to a fresh game from any phase, dropping in-flight timers."""
        self.cancel_timers()
        self.dice.reset()
        st = self.state
        st.positions[:] = [0] * len(self.roster)
        st.current = 0
        st.dice = None
        st.rolling = False
        st.winner = None
        st.phase = Phase.IDLE
        st.log.clear()
        self._mover = None
        self._winner_id = None
        st.generation += 1
        logger.info("game reset")
        self._emit("reset")

    def sync_roster(self) -> None:
        """Realign positions with the roster after players were added or removed."""
        st = self.state
        count = len(self.roster)
        st.positions[:] = [st.positions[i] if i < len(st.positions) else 0 for i in range(count)]
        if not st.rolling and st.current >= count:
            st.current = 0
        if st.winner is not None:
            st.winner = self._seat_of(self._winner_id)
        self._emit("roster", value=count)

    def cancel_timers(self) -> None:
        self.dice.cancel()
        self.animator.cancel()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None

    # ── helpers ──

    def _emit(self, kind: str, player: int | None = None,
              value: int | None = None, message: str | None = None) -> None:
        event = EngineEvent(kind, player, value, message)
        for observer in list(self.observers):
            observer.on_event(event)

    def _log(self, kind: str, player: int, message: str, value: int | None = None) -> None:
        self.state.log.appendleft(message)
        logger.info(message)
        self._emit(kind, player=player, value=value, message=message)

    def _name(self, player: int) -> str:
        if player < len(self.roster):
            return self.roster[player].name
        return f"Player {player + 1}"

    def _seat_of(self, player_id: int | None) -> int | None:
        for i, p in enumerate(self.roster):
            if p.id == player_id:
                return i
        return None

    def _holds_mover(self, player: int) -> bool:
        """True while seat ``player`` still belongs to whoever rolled."""
        return (
            player < len(self.state.positions)
            and player < len(self.roster)
            and self.roster[player].id == self._mover
        )

    def _later(self, delay: float, callback) -> None:
        self._timer = self.scheduler.call_later(delay, callback)

    # ── turn sequence ──

    def _on_face(self, face: int, final: bool) -> None:
        self.state.dice = face
        self._emit("rolled" if final else "spin", player=self.state.current, value=face)

    def _on_settled(self, roll: int) -> None:
        st = self.state
        pi = st.current
        if not self._holds_mover(pi):
            # the player who rolled left the seat mid-spin
            self._schedule_rotate()
            return
        start = st.positions[pi]
        if start + roll > BOARD_SIZE:
            self._log(
                "exact_roll", pi,
                f"{self._name(pi)} rolled {roll} but needs an exact roll to finish.",
                value=roll,
            )
            st.phase = Phase.IDLE
            self._schedule_rotate()
            return
        st.phase = Phase.MOVING
        logger.debug("player %d moves %d from %d", pi, roll, start)
        self.animator.advance(pi, start, roll, lambda cell: self._on_landed(pi, cell))

    def _on_step(self, player: int, cell: int) -> None:
        if not self._holds_mover(player):
            return
        self.state.positions[player] = cell
        self._emit("step", player=player, value=cell)

    def _on_landed(self, player: int, cell: int) -> None:
        self.state.phase = Phase.RESOLVING
        special = transition_for(cell)
        if special is None or not self._holds_mover(player):
            self._finalize(player, cell)
            return
        arrow = "ladder ↑" if special.kind == "ladder" else "snake ↓"
        self._log(
            special.kind, player,
            f"{self._name(player)} hit a {arrow} from {cell} to {special.destination}.",
            value=special.destination,
        )
        self._later(self.timings.transpose_delay,
                    lambda: self._teleport(player, special.destination))

    def _teleport(self, player: int, destination: int) -> None:
        self._timer = None
        if self._holds_mover(player):
            self.state.positions[player] = destination
            self._emit("teleport", player=player, value=destination)
        self._finalize(player, destination)

    def _finalize(self, player: int, pos: int) -> None:
        st = self.state
        if pos == BOARD_SIZE and self._holds_mover(player):
            st.winner = player
            self._winner_id = self._mover
            st.rolling = False
            st.phase = Phase.FINISHED
            self._log("win", player, f"{self._name(player)} wins! ✨", value=pos)
            return
        st.phase = Phase.IDLE
        self._schedule_rotate()

    def _schedule_rotate(self) -> None:
        self._later(self.timings.rotate_delay, self._rotate)

    def _rotate(self) -> None:
        self._timer = None
        st = self.state
        count = len(self.roster)
        st.current = (st.current + 1) % count if st.current < count else 0
        st.rolling = False
        st.phase = Phase.IDLE
        logger.debug("turn passes to player %d", st.current)
        self._emit("turn", player=st.current)
