"""Histogram of simulated game lengths."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from snakes_ladders.simulate import GameSummary


def make_length_chart(
    summaries: list[GameSummary],
    output_path: str = "game_lengths.png",
    title: str = "Snakes & Ladders — turns to win",
) -> str:
    """Bar chart of how many turns the winner needed, one bar per length.

    Unfinished games are left out. Returns the path to the saved PNG.
    """
    counts = Counter(s.turns for s in summaries if s.finished)
    if not counts:
        raise ValueError("no finished games to chart")
    lengths = sorted(counts)
    freq = [counts[n] for n in lengths]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(lengths, freq, width=0.85, color="#4A90D9", edgecolor="white")

    mean = sum(n * c for n, c in counts.items()) / sum(freq)
    ax.axvline(mean, color="#ef4444", linestyle="--", linewidth=1.5)
    ax.text(
        mean, max(freq), f" mean {mean:.1f}",
        color="#ef4444", va="top", fontsize=11, fontweight="bold",
    )

    ax.set_xlabel("Turns taken by the winner")
    ax.set_ylabel("Games")
    ax.set_title(f"{title} ({sum(freq)} games)", fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
