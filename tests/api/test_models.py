import pytest

from src.api.models import (
    ClearGameRequest,
    GameResponse,
    MoveRequest,
    MoveResponse,
    StartGameRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PieceSymbol, Result, Status


# -- Validation - player names --
def test_valid_pair() -> None:
    request = StartGameRequest(player_name="alice", opponent_name="bob")
    assert request.player_name == "alice"
    assert request.opponent_name == "bob"


@pytest.mark.parametrize(
    "player_name, opponent_name",
    [
        ("", "bob"),
        ("alice", "   "),
    ],
)
def test_blank_names(player_name: str, opponent_name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = StartGameRequest(player_name=player_name, opponent_name=opponent_name)


def test_cannot_play_yourself() -> None:
    with pytest.raises(InvalidRequestError):
        _ = ClearGameRequest(player_name="alice", opponent_name="alice")


# -- Validation - MoveRequest --
def test_move_request_keeps_out_of_range_coordinates() -> None:
    """Bounds are the game's business: the request only checks these are integers."""
    request = MoveRequest(player_name="alice", opponent_name="bob", x=-1, y=7)
    assert (request.x, request.y) == (-1, 7)


def test_move_request_coerces_numeric_strings() -> None:
    request = MoveRequest(player_name="alice", opponent_name="bob", x="1", y="2")
    assert (request.x, request.y) == (1, 2)


# -- Responses --
def test_move_response_fields() -> None:
    response = MoveResponse(
        key="alice$$bob",
        players={"O": "alice", "X": "bob"},
        board=["OOO", "XX.", "..."],
        current_player="alice",
        status="finished",
        result="first player win",
        winner="alice",
    )
    assert isinstance(response, GameResponse)
    assert response.players[PieceSymbol.FIRST] == "alice"
    assert response.status == Status.FINISHED
    assert response.result == Result.FIRST_PLAYER_WIN
