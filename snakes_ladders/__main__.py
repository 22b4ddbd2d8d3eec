"""CLI entry point: python -m snakes_ladders {play,simulate,chart}."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys

from snakes_ladders.chart import make_length_chart
from snakes_ladders.clock import AsyncioScheduler
from snakes_ladders.config import DEFAULT_TIMINGS, MAX_PLAYERS, MIN_PLAYERS
from snakes_ladders.engine import EngineEvent
from snakes_ladders.game import Game
from snakes_ladders.logs import configure_logging
from snakes_ladders.simulate import run_batch, summarize

logger = logging.getLogger("snakes_ladders.cli")


# ── play ─────────────────────────────────────────────────────────────

class _TurnAnnouncer:
    """Prints whose turn it is and where everyone stands."""

    def __init__(self, game: Game, turn_started: asyncio.Event):
        self.game = game
        self.turn_started = turn_started

    def on_event(self, event: EngineEvent) -> None:
        if event.kind == "rolled":
            logger.info("%s rolled a %d", self.game.roster[event.player].name, event.value)
        if event.kind in ("turn", "reset", "roster", "win"):
            view = self.game.view()
            standings = ", ".join(
                f"{p.name}: {pos}" for p, pos in zip(view.players, view.positions)
            )
            logger.info("[%s]", standings)
            self.turn_started.set()


async def _play(args: argparse.Namespace) -> None:
    game = Game(
        AsyncioScheduler(),
        rng=random.Random(args.seed),
        timings=DEFAULT_TIMINGS.scaled(args.speed),
    )
    while len(game.roster) < args.players:
        game.add_player()
    for i, p in enumerate(list(game.roster)):
        game.set_cpu(p.id, i >= args.humans)

    turn_started = asyncio.Event()
    game.subscribe(_TurnAnnouncer(game, turn_started))
    loop = asyncio.get_running_loop()

    try:
        while game.state.winner is None:
            view = game.view()
            player = view.players[view.current]
            if player.is_cpu or not view.can_roll:
                turn_started.clear()
                await turn_started.wait()
                continue
            line = await loop.run_in_executor(
                None, input, f"{player.name}: Enter to roll, r to reset, q to quit > ",
            )
            command = line.strip().lower()
            if command == "q":
                return
            if command == "r":
                game.request_reset()
                continue
            turn_started.clear()
            if game.request_roll():
                await turn_started.wait()
        print(f"{game.roster[game.state.winner].name} has reached 100! Game over.")
    finally:
        game.close()


def cmd_play(args: argparse.Namespace) -> None:
    """Play a live game in the terminal."""
    try:
        asyncio.run(_play(args))
    except (KeyboardInterrupt, EOFError):
        print()


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play all-CPU games headlessly and print statistics."""
    summaries = run_batch(args.games, players=args.players, seed=args.seed)
    stats = summarize(summaries)

    print(f"\n{stats.games} games, {args.players} players")
    print("=" * 40)
    print(f"  finished            {stats.finished}")
    print(f"  turns to win (mean) {stats.mean_turns:7.1f}")
    print(f"  turns to win (min)  {stats.min_turns:5d}")
    print(f"  turns to win (max)  {stats.max_turns:5d}")
    print(f"  ladders per game    {stats.mean_ladders:7.1f}")
    print(f"  snakes per game     {stats.mean_snakes:7.1f}")
    for seat, wins in stats.wins_by_seat.items():
        print(f"  seat {seat + 1} wins         {wins:5d}")


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Simulate a batch and save a histogram of game lengths."""
    summaries = run_batch(args.games, players=args.players, seed=args.seed)
    if not any(s.finished for s in summaries):
        print("No simulated game finished.", file=sys.stderr)
        sys.exit(1)
    out = args.output or "game_lengths.png"
    make_length_chart(summaries, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--players", type=int, default=2, help="Number of players (2-4)")
    p.add_argument("--seed", type=int, help="Random seed for repeatable games")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders turn engine",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every state transition")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play a live game in the terminal")
    _add_common(p_play)
    p_play.add_argument("--humans", type=int, default=1, help="Seats played by humans (default 1)")
    p_play.add_argument("--speed", type=float, default=1.0, help="Animation speed multiplier")

    p_sim = sub.add_parser("simulate", help="Simulate all-CPU games")
    _add_common(p_sim)
    p_sim.add_argument("--games", type=int, default=1000, help="Games to simulate (default 1000)")

    p_chart = sub.add_parser("chart", help="Chart the length of simulated games")
    _add_common(p_chart)
    p_chart.add_argument("--games", type=int, default=1000, help="Games to simulate (default 1000)")
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return
    if not MIN_PLAYERS <= args.players <= MAX_PLAYERS:
        parser.error(f"--players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
    if args.command == "play":
        if not 0 <= args.humans <= args.players:
            parser.error("--humans must be between 0 and --players")
        if args.speed <= 0:
            parser.error("--speed must be positive")
    elif args.games < 1:
        parser.error("--games must be at least 1")

    if args.verbose:
        configure_logging(logging.DEBUG)
    elif args.command == "play":
        configure_logging(logging.INFO)
    else:
        # headless batches would otherwise print every ladder of every game
        configure_logging(logging.WARNING)
    if args.command == "play":
        cmd_play(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "chart":
        cmd_chart(args)


if __name__ == "__main__":
    main()
