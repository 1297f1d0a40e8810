"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class Result(StrEnum):
    FIRST_PLAYER_WIN = "first player win"
    SECOND_PLAYER_WIN = "second player win"
    TIE = "tie"
    PENDING = "pending"


# --- NOTE the domain layer has its own Piece / GameResult / Status enums (src/tictactoe/pieces.py).
# --- These string versions are what crosses the layer boundaries (GameModel, DB rows, responses).


class PieceSymbol(StrEnum):
    FIRST = "O"
    SECOND = "X"
