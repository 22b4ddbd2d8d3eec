"""Headless all-CPU games on a virtual clock, plus batch statistics."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field

from snakes_ladders.clock import ManualClock
from snakes_ladders.config import DEFAULT_TIMINGS, MAX_PLAYERS, MIN_PLAYERS, Timings
from snakes_ladders.engine import EngineEvent
from snakes_ladders.game import Game

# One hour of virtual time; a real game takes a few minutes.
DEFAULT_MAX_TIME_MS = 60 * 60 * 1000


@dataclass
class GameSummary:
    """What happened in one simulated game."""

    players: int
    winner: int | None
    turns: int = 0  # rolls taken by the winner
    rolls: int = 0  # rolls taken by everyone
    ladders: int = 0
    snakes: int = 0
    exact_roll_misses: int = 0
    elapsed_ms: float = 0.0

    @property
    def finished(self) -> bool:
        return self.winner is not None


@dataclass
class _Tally:
    rolls_by_player: Counter = field(default_factory=Counter)
    ladders: int = 0
    snakes: int = 0
    exact_roll_misses: int = 0

    def on_event(self, event: EngineEvent) -> None:
        if event.kind == "roll_started":
            self.rolls_by_player[event.player] += 1
        elif event.kind == "exact_roll":
            self.exact_roll_misses += 1
        elif event.kind == "ladder":
            self.ladders += 1
        elif event.kind == "snake":
            self.snakes += 1


def play_headless(
    players: int = 2,
    seed: int | None = None,
    timings: Timings = DEFAULT_TIMINGS,
    max_time_ms: float = DEFAULT_MAX_TIME_MS,
) -> GameSummary:
    """Play one game where every seat is computer-controlled."""
    if not MIN_PLAYERS <= players <= MAX_PLAYERS:
        raise ValueError(f"players must be in {MIN_PLAYERS}..{MAX_PLAYERS}, got {players}")

    clock = ManualClock()
    game = Game(clock, rng=random.Random(seed), timings=timings)
    while len(game.roster) < players:
        game.add_player()
    for p in list(game.roster):
        game.set_cpu(p.id, True)

    tally = _Tally()
    game.subscribe(tally)
    clock.run_until_idle(max_ms=max_time_ms)
    game.close()

    winner = game.state.winner
    return GameSummary(
        players=players,
        winner=winner,
        turns=tally.rolls_by_player[winner] if winner is not None else 0,
        rolls=sum(tally.rolls_by_player.values()),
        ladders=tally.ladders,
        snakes=tally.snakes,
        exact_roll_misses=tally.exact_roll_misses,
        elapsed_ms=clock.now,
    )


def run_batch(
    games: int,
    players: int = 2,
    seed: int | None = None,
    timings: Timings = DEFAULT_TIMINGS,
) -> list[GameSummary]:
    """Play *games* headless games; *seed* makes the whole batch repeatable."""
    seeds = random.Random(seed)
    return [
        play_headless(players, seed=seeds.randrange(2**32), timings=timings)
        for _ in range(games)
    ]


@dataclass
class BatchStats:
    games: int
    finished: int
    wins_by_seat: dict[int, int]
    mean_turns: float
    min_turns: int
    max_turns: int
    mean_ladders: float
    mean_snakes: float


def summarize(summaries: list[GameSummary]) -> BatchStats:
    done = [s for s in summaries if s.finished]
    turns = [s.turns for s in done]
    n = len(summaries)
    return BatchStats(
        games=n,
        finished=len(done),
        wins_by_seat=dict(sorted(Counter(s.winner for s in done).items())),
        mean_turns=sum(turns) / len(turns) if turns else 0.0,
        min_turns=min(turns, default=0),
        max_turns=max(turns, default=0),
        mean_ladders=sum(s.ladders for s in summaries) / n if n else 0.0,
        mean_snakes=sum(s.snakes for s in summaries) / n if n else 0.0,
    )
