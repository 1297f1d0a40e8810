"""Defines the pieces that can occupy a cell, and the possible outcomes of a move"""

from enum import Enum, auto
from typing import Self


class Piece(Enum):
    FIRST = "O"
    SECOND = "X"
    BLANK = "."

    @classmethod
    def from_char(cls, character: str) -> Self:
        return cls(character.upper())

    def to_char(self) -> str:
        return self.value

    @property
    def opponent(self) -> "Piece":
        # NOTE: Blank has no opponent, asking for one is a programming error
        if self == Piece.BLANK:
            raise ValueError("A blank cell has no opponent.")
        return Piece.SECOND if self == Piece.FIRST else Piece.FIRST


PLAYER_PIECES: tuple[Piece, Piece] = (Piece.FIRST, Piece.SECOND)


class GameResult(Enum):
    FIRST_PLAYER_WIN = auto()
    SECOND_PLAYER_WIN = auto()
    TIE = auto()
    PENDING = auto()

    @classmethod
    def win_for(cls, piece: Piece) -> Self:
        return cls.FIRST_PLAYER_WIN if piece == Piece.FIRST else cls.SECOND_PLAYER_WIN

    @property
    def is_terminal(self) -> bool:
        return self != GameResult.PENDING


class Status(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()
