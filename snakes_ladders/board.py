"""Fixed snake and ladder tables for the 100-cell board."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from snakes_ladders.config import BOARD_DIM, BOARD_SIZE

# fmt: off
LADDERS: MappingProxyType[int, int] = MappingProxyType({
     2: 38,   7: 14,   8: 31,  15: 26,  21: 42,
    28: 84,  36: 44,  51: 67,  71: 91,  78: 98,
})
SNAKES: MappingProxyType[int, int] = MappingProxyType({
    16:  6,  46: 25,  49: 11,  62: 19,  64: 60,
    74: 53,  89: 68,  92: 88,  95: 75,  99: 80,
})
# fmt: on


@dataclass(frozen=True)
class Transition:
    """Where a special cell sends a player."""

    destination: int
    kind: Literal["ladder", "snake"]


def is_ladder(cell: int) -> bool:
    return cell in LADDERS


def is_snake(cell: int) -> bool:
    return cell in SNAKES


def transition_for(cell: int) -> Transition | None:
    if is_ladder(cell):
        return Transition(destination=LADDERS[cell], kind="ladder")
    if is_snake(cell):
        return Transition(destination=SNAKES[cell], kind="snake")
    return None


def cell_to_row_col(cell: int) -> tuple[int, int]:
    """Grid coordinates of *cell*, row 0 at the top.

    Cell 1 sits bottom-left and the numbering snakes back and forth,
    so every other row (counting from the bottom) runs right-to-left.
    """
    if not 1 <= cell <= BOARD_SIZE:
        raise ValueError(f"cell must be in 1..{BOARD_SIZE}, got {cell}")
    index = cell - 1
    row_from_bottom = index // BOARD_DIM
    col = index % BOARD_DIM
    if row_from_bottom % 2:
        col = BOARD_DIM - 1 - col
    return BOARD_DIM - 1 - row_from_bottom, col
