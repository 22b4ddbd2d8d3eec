"""Compiled-in game constants and animation timings."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

BOARD_SIZE = 100
BOARD_DIM = 10

MIN_PLAYERS = 2
MAX_PLAYERS = 4
LOG_LIMIT = 40

PALETTE: tuple[str, ...] = (
    "#0ea5e9", "#22c55e", "#eab308", "#f97316",
    "#ef4444", "#8b5cf6", "#06b6d4", "#10b981",
)

# (name, color, is_cpu) for the roster a fresh game starts with
DEFAULT_PLAYERS: tuple[tuple[str, str, bool], ...] = (
    ("Player 1", "#2563eb", False),
    ("Player 2", "#16a34a", True),
)


@dataclass(frozen=True)
class Timings:
    """Delays between animation ticks, in milliseconds."""

    spin_interval: float = 70
    spin_ticks: tuple[int, int] = (12, 17)
    settle_delay: float = 300
    step_delay: float = 200
    transpose_delay: float = 350
    rotate_delay: float = 300
    cpu_delay: float = 850

    def __post_init__(self):
        for f in fields(self):
            if f.name == "spin_ticks":
                continue
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be non-negative")
        lo, hi = self.spin_ticks
        if lo < 1 or hi < lo:
            raise ValueError(f"spin_ticks must satisfy 1 <= lo <= hi, got {self.spin_ticks}")

    def scaled(self, speed: float) -> Timings:
        """Copy with every delay divided by *speed* (tick counts unchanged)."""
        if speed <= 0:
            raise ValueError("speed must be positive")
        return replace(
            self,
            spin_interval=self.spin_interval / speed,
            settle_delay=self.settle_delay / speed,
            step_delay=self.step_delay / speed,
            transpose_delay=self.transpose_delay / speed,
            rotate_delay=self.rotate_delay / speed,
            cpu_delay=self.cpu_delay / speed,
        )


DEFAULT_TIMINGS = Timings()
