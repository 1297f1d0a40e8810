"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PieceSymbol, Result, Status

PlayerName = str


# --- REQUEST MODELS ---
class PairRequest(BaseModel):
    """Every request addresses the game between two players."""

    player_name: str
    opponent_name: str

    @field_validator(*["player_name", "opponent_name"])
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player names cannot be blank.")
        return value

    @model_validator(mode="after")
    def validate_distinct_players(self) -> "PairRequest":
        if self.player_name == self.opponent_name:
            raise InvalidRequestError(
                f"A player cannot play against themselves: {self.player_name!r}"
            )
        return self


class StartGameRequest(PairRequest):
    """player_name moves first."""


class MoveRequest(PairRequest):
    """player_name wants to place a piece on (x, y). Bounds are checked by the game itself."""

    x: int
    y: int


class GetGameRequest(PairRequest):
    pass


class ClearGameRequest(PairRequest):
    pass


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    key: str
    players: dict[PieceSymbol, PlayerName]
    board: list[str]
    current_player: PlayerName
    status: Status
    result: Result


class MoveResponse(GameResponse):
    winner: Optional[PlayerName]
