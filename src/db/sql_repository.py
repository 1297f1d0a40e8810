"""Implementation of GameRegistry using SQLAlchemy"""

import logging
import threading
from contextlib import AbstractContextManager

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.locks import KeyedLocks
from src.db.schema import DBGame
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class SQLGameRegistry:
    """Data stored using SQL / methods implemented using SQLAlchemy.

    Games are stored as GameModel columns, so every get() hands out a fresh Game: changes only stick after put().
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session
        self._locks = KeyedLocks()
        # the session itself is shared by all keys and is not thread safe
        self._session_lock = threading.Lock()

    def get(self, key: str) -> Game | None:
        """Get the game for the key, if one is registered."""
        with self._session_lock:
            game_db = self._fetch_game(key)
            if game_db:
                return Game.from_model(self._to_model(game_db))
            return None

    def put(self, key: str, game: Game) -> None:
        """Insert a new record, or overwrite the record already stored under the key."""
        model = game.to_model()
        with self._session_lock:
            game_db = self._fetch_game(key)
            if game_db is None:
                game_db = DBGame(key=key)
                self.db.add(game_db)
            game_db.board = model.board
            game_db.players = model.players
            game_db.piece_to_move = model.piece_to_move
            game_db.status = model.status
            game_db.result = model.result
            self.db.commit()

    def delete(self, key: str) -> Game | None:
        """Remove a game's record."""
        with self._session_lock:
            game_db = self._fetch_game(key)
            if not game_db:
                return None
            game = Game.from_model(self._to_model(game_db))
            self.db.delete(game_db)
            self.db.commit()
        logger.debug("Removed game %s", key)
        return game

    def lock(self, key: str) -> AbstractContextManager[None]:
        return self._locks.lock(key)

    def _fetch_game(self, key: str) -> DBGame | None:
        query = select(DBGame).where(DBGame.key == key)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board=game_db.board,
            players=game_db.players,
            piece_to_move=game_db.piece_to_move,
            status=game_db.status,
            result=game_db.result,
        )
