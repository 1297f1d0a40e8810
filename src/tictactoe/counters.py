"""
Per-player tally of pieces in every line of the board.

If a player ever holds BOARD_SIZE pieces in a single row, column, or diagonal, that player wins.
Keeping the counts up to date on every move means a win check only has to look at the lines through the new piece,
instead of rescanning the whole board.
"""

from dataclasses import dataclass, field
from typing import Self

from src.tictactoe.board import Board
from src.tictactoe.pieces import Piece
from src.tictactoe.square import BOARD_SIZE, Square


def _zeros(length: int) -> list[int]:
    return [0] * length


@dataclass
class LineCounters:
    rows: list[int] = field(default_factory=lambda: _zeros(BOARD_SIZE))
    cols: list[int] = field(default_factory=lambda: _zeros(BOARD_SIZE))
    diags: list[int] = field(default_factory=lambda: _zeros(2))

    @classmethod
    def from_board(cls, board: Board, piece: Piece) -> Self:
        """Rebuild the counts of one player from a board (when restoring a stored game)."""
        counters = cls()
        for square in board.locate(piece):
            counters.record(square)
        return counters

    def record(self, square: Square) -> None:
        """A piece of this player was placed on the square."""
        self.rows[square.x] += 1
        self.cols[square.y] += 1
        for diagonal in square.diagonals():
            self.diags[diagonal] += 1

    def completes_line(self, square: Square) -> bool:
        """Does any line through the square hold BOARD_SIZE pieces of this player?"""
        row_win = self.rows[square.x] == BOARD_SIZE
        col_win = self.cols[square.y] == BOARD_SIZE
        diag_win = any(self.diags[d] == BOARD_SIZE for d in square.diagonals())
        return row_win or col_win or diag_win
