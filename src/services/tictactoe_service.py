"""Orchestration of communication from the transport layer (chat bot, lobby, ...) to the game logic and the game registry."""

import logging

from src.api.models import (
    ClearGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
    PairRequest,
    StartGameRequest,
)
from src.core.config import REGISTRY_BACKENDS, Settings, configure_logging, get_settings
from src.core.exceptions import InvalidRequestError, RepositoryError
from src.db.database import create_session_factory
from src.db.memory_registry import InMemoryGameRegistry
from src.db.repository import GameRegistry, pair_key
from src.db.sql_repository import SQLGameRegistry
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe games."""

    def __init__(self, registry: GameRegistry) -> None:
        self.registry = registry

    # -- Transport layer logic ---
    def start_game(self, request: StartGameRequest) -> GameResponse:
        """Start a game between the pair. Overrides the previous game if one already exists."""
        key = self._key(request)
        with self.registry.lock(key):
            game = Game.new_game(request.player_name, request.opponent_name)
            self.registry.put(key, game)
            response = self._create_game_response(key, game)
        logger.info("Started game %s, %s moves first", key, request.player_name)
        return response

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt.
        ----
        A finished game is removed from the registry straight away, the response still shows the final board.
        NOTE the response is built while holding the lock: the registry may hand out the live Game.
        """
        key = self._key(request)
        with self.registry.lock(key):
            game = self._fetch_game(key)

            # Attempt the move (errors propagate, game stays untouched)
            result = game.make_move(request.player_name, request.x, request.y)
            logger.debug("Game %s: %s played (%d, %d)", key, request.player_name, request.x, request.y)

            if result.is_terminal:
                self.registry.delete(key)
                logger.info("Game %s finished: %s", key, result.name.lower())
            else:
                self.registry.put(key, game)

            game_response = self._create_game_response(key, game)
            return MoveResponse(**game_response.model_dump(), winner=game.winner)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Retrieve the current game state (for rendering the board / whose turn it is)."""
        key = self._key(request)
        with self.registry.lock(key):
            game = self._fetch_game(key)
            return self._create_game_response(key, game)

    def clear_game(self, request: ClearGameRequest) -> None:
        """Handle a request to drop the game of a pair. Clearing a pair without a game is fine."""
        key = self._key(request)
        with self.registry.lock(key):
            removed = self.registry.delete(key)
        if removed is not None:
            logger.info("Cleared game %s", key)

    # -- Internal helpers --
    def _key(self, request: PairRequest) -> str:
        return pair_key(request.player_name, request.opponent_name)

    def _create_game_response(self, key: str, game: Game) -> GameResponse:
        """Convert the game into a GameResponse (through the GameModel contract)."""
        model = game.to_model()
        return GameResponse(
            key=key,
            players=model.players,
            board=game.board.rows(),
            current_player=game.current_player,
            status=model.status,
            result=model.result,
        )

    def _fetch_game(self, key: str) -> Game:
        """Attempt to find the game in the registry and raise error if it fails."""
        game = self.registry.get(key)
        if game is None:
            raise RepositoryError(f"No game in progress for {key=}.")
        return game


def build_service(settings: Settings | None = None) -> TicTacToeService:
    """Wire up logging and the registry backend named in the settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if settings.registry_backend not in REGISTRY_BACKENDS:
        raise InvalidRequestError(
            f"Unknown registry backend {settings.registry_backend!r}. Pick one from {','.join(REGISTRY_BACKENDS)}"
        )

    registry: GameRegistry
    if settings.registry_backend == "sql":
        session_factory = create_session_factory(settings.database_url, settings.sql_echo)
        registry = SQLGameRegistry(session_factory())
    else:
        registry = InMemoryGameRegistry()
    logger.info("Using %s game registry", settings.registry_backend)
    return TicTacToeService(registry)
