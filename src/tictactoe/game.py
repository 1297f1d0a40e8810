"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for the business logic required to play a turn -->
validate the move, update the board and the line counters, decide whether the game is over, and pass the turn on.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core import shared_types
from src.core.exceptions import (
    CellOccupiedError,
    GameAlreadyFinishedError,
    GameStateError,
    NotYourTurnError,
    OutOfRangeError,
)
from src.core.models import GameModel
from src.tictactoe.board import Board
from src.tictactoe.counters import LineCounters
from src.tictactoe.pieces import PLAYER_PIECES, GameResult, Piece, Status
from src.tictactoe.square import BOARD_SIZE, Square


def _fresh_counters() -> dict[Piece, LineCounters]:
    return {piece: LineCounters() for piece in PLAYER_PIECES}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[Piece, str]
    current_piece: Piece = Piece.FIRST
    counters: dict[Piece, LineCounters] = field(default_factory=_fresh_counters)
    total_pieces: int = 0
    status: Status = Status.IN_PROGRESS
    result: GameResult = GameResult.PENDING

    @classmethod
    def new_game(cls, player_a: str, player_b: str) -> Self:
        """player_a plays the FIRST piece and moves first."""
        return cls(
            board=Board.empty(),
            players={Piece.FIRST: player_a, Piece.SECOND: player_b},
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([s.name.lower() for s in Status])}"
            )
        result_name = model.result.replace(" ", "_").upper()
        if result_name not in GameResult.__members__:
            raise GameStateError(
                f"Invalid result: {model.result!r}. \nPick one from {','.join([r.name.lower() for r in GameResult])}"
            )
        try:
            piece_to_move = Piece.from_char(model.piece_to_move)
            players = {piece: model.players[piece.to_char()] for piece in PLAYER_PIECES}
        except (ValueError, KeyError) as e:
            raise GameStateError(f"Cannot restore players / turn from {model!r}") from e
        if piece_to_move == Piece.BLANK:
            raise GameStateError("A blank piece cannot be the piece to move.")

        # create the Game (counters and piece count are derived from the board)
        board = Board.from_string(model.board)
        first_count = board.count(Piece.FIRST)
        second_count = board.count(Piece.SECOND)
        if first_count - second_count not in (0, 1):
            raise GameStateError(
                f"Impossible board {model.board!r}: {first_count} first player pieces vs {second_count} second player pieces."
            )

        status = Status[status_name]
        result = GameResult[result_name]
        if (status == Status.IN_PROGRESS) == result.is_terminal:
            raise GameStateError(
                f"Status {model.status!r} does not match result {model.result!r}."
            )

        # In progress: the player with fewer pieces moves next. Finished: the turn stays with the last mover.
        if status == Status.IN_PROGRESS:
            expected_piece = Piece.FIRST if first_count == second_count else Piece.SECOND
        else:
            expected_piece = Piece.FIRST if first_count > second_count else Piece.SECOND
        if piece_to_move != expected_piece:
            raise GameStateError(
                f"It cannot be {piece_to_move.to_char()}'s turn on board {model.board!r} (status: {model.status})."
            )

        return cls(
            board=board,
            players=players,
            current_piece=piece_to_move,
            counters={piece: LineCounters.from_board(board, piece) for piece in PLAYER_PIECES},
            total_pieces=first_count + second_count,
            status=status,
            result=result,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self.board.to_string(),
            players={piece.to_char(): name for piece, name in self.players.items()},
            piece_to_move=self.current_piece.to_char(),
            status=shared_types.Status[self.status.name],
            result=shared_types.Result[self.result.name],
        )

    @property
    def current_player(self) -> str:
        return self.players[self.current_piece]

    @property
    def next_player(self) -> str:
        return self.players[self.current_piece.opponent]

    @property
    def winner(self) -> Optional[str]:
        """Name of the player who completed a line, None while pending or after a tie."""
        if self.result == GameResult.FIRST_PLAYER_WIN:
            return self.players[Piece.FIRST]
        if self.result == GameResult.SECOND_PLAYER_WIN:
            return self.players[Piece.SECOND]
        return None

    def render(self) -> str:
        """Board as text, one row per line."""
        return "\n".join(self.board.rows())

    def make_move(self, player: str, x: int, y: int) -> GameResult:
        """
        Attempt to place the current player's piece on (x, y)
        -----

        1. the game must still be in progress
        2. it must be your turn
        3. the cell must be on the board
        4. the cell must be empty
        5. place the piece and update your line counters
        6. check if you won / the board is full
        7. otherwise pass the turn to the other player

        Steps 1-4 raise before anything gets modified.
        """
        # make sure the game is (still) in progress
        if self.status != Status.IN_PROGRESS:
            raise GameAlreadyFinishedError(
                f"Game is already over. result: {self.result.name.lower()}"
            )

        # make sure it is your turn
        self._assert_your_turn(player)

        # make sure the cell can take a piece
        square = Square(x, y)
        if not square.is_within_bounds():
            raise OutOfRangeError(f"Board position {x} {y} is out of range.")
        if not self.board.is_empty(square):
            raise CellOccupiedError(f"Board position {x} {y} is not empty.")

        # update the board and the counters
        self._place(square)

        # update the game status / check for end condition
        self.result = self._evaluate(square)
        if self.result.is_terminal:
            self._change_status(Status.FINISHED)
        else:
            self._pass_turn()
        return self.result

    # -- PRIVATE HELPERS ---
    def _assert_your_turn(self, player: str) -> None:
        if player != self.current_player:
            raise NotYourTurnError(
                f"It is not player {player}'s turn. Waiting for player {self.current_player} to make a move first."
            )

    def _place(self, square: Square) -> None:
        self.board.place_piece(square, self.current_piece)
        self.total_pieces += 1
        self.counters[self.current_piece].record(square)

    def _evaluate(self, square: Square) -> GameResult:
        """Only lines through the last placed piece can have been completed by this move."""
        if self.counters[self.current_piece].completes_line(square):
            return GameResult.win_for(self.current_piece)

        # Every cell is filled, but we don't have a winner, so the game is a tie.
        if self.total_pieces == BOARD_SIZE * BOARD_SIZE:
            return GameResult.TIE

        return GameResult.PENDING

    def _pass_turn(self) -> None:
        self.current_piece = self.current_piece.opponent

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
