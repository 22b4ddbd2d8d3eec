"""Player roster: who is playing and whether the computer plays for them."""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field

from snakes_ladders.config import DEFAULT_PLAYERS, MAX_PLAYERS, MIN_PLAYERS, PALETTE

logger = logging.getLogger(__name__)


@dataclass
class Player:
    id: int
    name: str
    color: str
    is_cpu: bool = False


@dataclass
class PlayerRoster:
    """Mutable list of 2–4 players.

    ``version`` is bumped on every successful mutation so watchers can
    tell the roster changed without diffing it.
    """

    rng: random.Random = field(default_factory=random.Random)
    cpu_default_for_extra_players: bool = True
    players: list[Player] = field(default_factory=list)
    version: int = 0
    _ids: itertools.count = field(init=False, repr=False)

    def __post_init__(self):
        self._ids = itertools.count(max((p.id for p in self.players), default=0) + 1)
        if not self.players:
            self.players = [
                Player(next(self._ids), name, color, is_cpu)
                for name, color, is_cpu in DEFAULT_PLAYERS
            ]

    def __len__(self) -> int:
        return len(self.players)

    def __getitem__(self, index: int) -> Player:
        return self.players[index]

    def __iter__(self):
        return iter(self.players)

    def get(self, player_id: int) -> Player | None:
        return next((p for p in self.players if p.id == player_id), None)

    def add_player(self) -> bool:
        if len(self.players) >= MAX_PLAYERS:
            logger.debug("add_player ignored: already %d players", len(self.players))
            return False
        count = len(self.players)
        player = Player(
            id=next(self._ids),
            name=f"Player {count + 1}",
            color=self.rng.choice(PALETTE),
            is_cpu=self.cpu_default_for_extra_players and count >= 2,
        )
        self.players.append(player)
        self.version += 1
        logger.debug("added %s (cpu=%s)", player.name, player.is_cpu)
        return True

    def remove_player(self) -> bool:
        """Drop the most recently added player."""
        if len(self.players) <= MIN_PLAYERS:
            logger.debug("remove_player ignored: only %d players", len(self.players))
            return False
        removed = self.players.pop()
        self.version += 1
        logger.debug("removed %s", removed.name)
        return True

    def rename_player(self, player_id: int, name: str) -> bool:
        player = self.get(player_id)
        if player is None:
            logger.debug("rename_player ignored: no player %s", player_id)
            return False
        player.name = name
        self.version += 1
        return True

    def set_cpu(self, player_id: int, is_cpu: bool) -> bool:
        player = self.get(player_id)
        if player is None:
            logger.debug("set_cpu ignored: no player %s", player_id)
            return False
        player.is_cpu = is_cpu
        self.version += 1
        return True
