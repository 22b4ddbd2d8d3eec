"""Tests for snakes_ladders.simulate."""

import pytest

from snakes_ladders.simulate import GameSummary, play_headless, run_batch, summarize


def test_headless_game_finishes():
    summary = play_headless(players=2, seed=1)
    assert summary.finished
    assert summary.winner in (0, 1)
    assert summary.turns > 0
    assert summary.rolls >= summary.turns
    assert summary.elapsed_ms > 0


def test_headless_game_is_repeatable():
    assert play_headless(players=3, seed=42) == play_headless(players=3, seed=42)


def test_headless_four_players():
    summary = play_headless(players=4, seed=5)
    assert summary.players == 4
    assert summary.winner in range(4)


def test_player_count_validated():
    with pytest.raises(ValueError):
        play_headless(players=1)
    with pytest.raises(ValueError):
        play_headless(players=5)


def test_time_limit_leaves_game_unfinished():
    summary = play_headless(players=2, seed=1, max_time_ms=5000)
    assert not summary.finished
    assert summary.turns == 0


def test_run_batch():
    summaries = run_batch(5, players=2, seed=9)
    assert len(summaries) == 5
    assert summaries == run_batch(5, players=2, seed=9)


def test_summarize():
    summaries = [
        GameSummary(players=2, winner=0, turns=10, ladders=2, snakes=1),
        GameSummary(players=2, winner=1, turns=20, ladders=4, snakes=3),
        GameSummary(players=2, winner=0, turns=30, ladders=0, snakes=2),
        GameSummary(players=2, winner=None, ladders=2, snakes=2),
    ]
    stats = summarize(summaries)
    assert stats.games == 4
    assert stats.finished == 3
    assert stats.wins_by_seat == {0: 2, 1: 1}
    assert stats.mean_turns == 20
    assert stats.min_turns == 10
    assert stats.max_turns == 30
    assert stats.mean_ladders == 2
    assert stats.mean_snakes == 2


def test_summarize_empty():
    stats = summarize([])
    assert stats.games == 0
    assert stats.mean_turns == 0.0
