"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, the API layer (higher) and domain/registry layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
PieceSymbol = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe game used between API, Service, registry, and Game layers."""

    board: str  # rows joined by '/', e.g. "OX./.O./..X"
    players: dict[PieceSymbol, PlayerName]
    piece_to_move: str
    status: str
    result: str
