"""Tests for snakes_ladders.chart."""

import pytest

from snakes_ladders.chart import make_length_chart
from snakes_ladders.simulate import GameSummary


def test_chart_written(tmp_path):
    summaries = [
        GameSummary(players=2, winner=0, turns=12),
        GameSummary(players=2, winner=1, turns=12),
        GameSummary(players=2, winner=0, turns=25),
        GameSummary(players=2, winner=None),
    ]
    out = tmp_path / "lengths.png"
    assert make_length_chart(summaries, output_path=str(out)) == str(out)
    assert out.exists()
    assert out.stat().st_size > 0


def test_chart_needs_finished_games(tmp_path):
    with pytest.raises(ValueError):
        make_length_chart([GameSummary(players=2, winner=None)], str(tmp_path / "x.png"))
