"""
A cell on the board, plus the diagonal bookkeeping that depends only on coordinates

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Fixed for every game. Change this to play on a bigger board.
BOARD_SIZE = 3

MAIN_DIAGONAL = 0
ANTI_DIAGONAL = 1


@dataclass(frozen=True)
class Square:
    x: int  # row
    y: int  # column

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_SIZE) and (0 <= self.y < BOARD_SIZE)

    def diagonals(self) -> tuple[int, ...]:
        return diagonals_through(self.x, self.y)


def diagonals_through(x: int, y: int) -> tuple[int, ...]:
    """
    All diagonals the cell lies on.
    ---

    Both conditions are tested independently: on an odd sized board the center cell lies on both diagonals.
    """
    diagonals: list[int] = []
    if x == y:
        diagonals.append(MAIN_DIAGONAL)
    if x + y == BOARD_SIZE - 1:
        diagonals.append(ANTI_DIAGONAL)
    return tuple(diagonals)


def classify_diagonal(x: int, y: int) -> Optional[int]:
    """Single diagonal index for the cell (main diagonal wins for the center cell), None if not on a diagonal."""
    diagonals = diagonals_through(x, y)
    return diagonals[0] if diagonals else None
