"""The Game board only stores which piece occupies which cell. All rules live in the Game class."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import GameStateError
from src.tictactoe.pieces import Piece
from src.tictactoe.square import BOARD_SIZE, Square

ROW_SEPARATOR = "/"


@dataclass
class Board:
    cells: list[list[Piece]]  # cells[x][y], row-major

    @classmethod
    def empty(cls) -> Self:
        """Fill the board with blanks."""
        return cls([[Piece.BLANK for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)])

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Construct a board from its string notation.

        Rows are separated by slashes, one character per cell:
        "OX./.O./..X"
        means:
        * first row: O on (0, 0), X on (0, 1), (0, 2) empty
        * second row: only (1, 1) holds an O
        * third row: only (2, 2) holds an X
        """
        rows = board_str.split(ROW_SEPARATOR)
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise GameStateError(
                f"Board notation {board_str!r} does not describe a {BOARD_SIZE}x{BOARD_SIZE} board."
            )
        try:
            cells = [[Piece.from_char(character) for character in row] for row in rows]
        except ValueError as e:
            raise GameStateError(
                f"Board notation {board_str!r} contains an unknown piece. Use one of {','.join(p.to_char() for p in Piece)}"
            ) from e
        return cls(cells)

    def to_string(self) -> str:
        return ROW_SEPARATOR.join(self.rows())

    def rows(self) -> list[str]:
        """Every row as a string of piece characters (used for rendering)."""
        return ["".join(piece.to_char() for piece in row) for row in self.cells]

    def piece(self, square: Square) -> Piece:
        """NOTE: no bounds checking. The caller validates the square first."""
        return self.cells[square.x][square.y]

    def place_piece(self, square: Square, piece: Piece) -> None:
        """NOTE: no bounds / occupancy checking. The caller validates the square first."""
        self.cells[square.x][square.y] = piece

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) == Piece.BLANK

    def locate(self, piece: Piece) -> list[Square]:
        return [
            Square(x, y)
            for x, row in enumerate(self.cells)
            for y, cell in enumerate(row)
            if cell == piece
        ]

    def empty_squares(self) -> list[Square]:
        """Convenience method: cells still available to play"""
        return self.locate(Piece.BLANK)

    def count(self, piece: Piece) -> int:
        return len(self.locate(piece))

    def is_full(self) -> bool:
        return not self.empty_squares()
