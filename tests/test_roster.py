"""Tests for snakes_ladders.roster."""

import random

from snakes_ladders.config import PALETTE
from snakes_ladders.roster import Player, PlayerRoster


def test_default_roster():
    roster = PlayerRoster(rng=random.Random(0))
    assert [p.name for p in roster] == ["Player 1", "Player 2"]
    assert [p.is_cpu for p in roster] == [False, True]
    assert [p.color for p in roster] == ["#2563eb", "#16a34a"]
    assert roster[0].id != roster[1].id


def test_add_player_defaults():
    roster = PlayerRoster(rng=random.Random(0))
    assert roster.add_player() is True
    added = roster[2]
    assert added.name == "Player 3"
    assert added.color in PALETTE
    assert added.is_cpu is True
    assert added.id not in (roster[0].id, roster[1].id)


def test_add_player_cpu_default_can_be_disabled():
    roster = PlayerRoster(rng=random.Random(0), cpu_default_for_extra_players=False)
    roster.add_player()
    assert roster[2].is_cpu is False


def test_add_player_caps_at_four():
    roster = PlayerRoster(rng=random.Random(0))
    assert roster.add_player()
    assert roster.add_player()
    version = roster.version
    assert roster.add_player() is False
    assert len(roster) == 4
    assert roster.version == version


def test_remove_player_takes_last():
    roster = PlayerRoster(rng=random.Random(0))
    roster.add_player()
    third = roster[2]
    assert roster.remove_player() is True
    assert third not in roster.players
    assert len(roster) == 2


def test_remove_player_keeps_two():
    roster = PlayerRoster(rng=random.Random(0))
    assert roster.remove_player() is False
    assert len(roster) == 2


def test_rename_is_in_place():
    roster = PlayerRoster(rng=random.Random(0))
    player = roster[0]
    assert roster.rename_player(player.id, "Ada") is True
    assert roster[0] is player
    assert player.name == "Ada"


def test_set_cpu():
    roster = PlayerRoster(rng=random.Random(0))
    assert roster.set_cpu(roster[0].id, True) is True
    assert roster[0].is_cpu is True


def test_unknown_id_is_ignored():
    roster = PlayerRoster(rng=random.Random(0))
    version = roster.version
    assert roster.rename_player(999, "Nobody") is False
    assert roster.set_cpu(999, True) is False
    assert roster.version == version


def test_every_mutation_bumps_version():
    roster = PlayerRoster(rng=random.Random(0))
    roster.add_player()
    roster.rename_player(roster[0].id, "A")
    roster.set_cpu(roster[0].id, True)
    roster.remove_player()
    assert roster.version == 4


def test_ids_continue_after_given_players():
    roster = PlayerRoster(players=[Player(7, "X", "#000"), Player(9, "Y", "#fff")])
    roster.add_player()
    assert roster[2].id == 10
