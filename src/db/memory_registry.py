"""Implementation of GameRegistry keeping the Game objects themselves in a dictionary"""

import logging
from contextlib import AbstractContextManager

from src.db.locks import KeyedLocks
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class InMemoryGameRegistry:
    """Games live as long as this object (no persistence)"""

    def __init__(self) -> None:
        self._games: dict[str, Game] = {}
        self._locks = KeyedLocks()

    def get(self, key: str) -> Game | None:
        """Get the game for the key, if one is registered."""
        return self._games.get(key)

    def put(self, key: str, game: Game) -> None:
        """Register the game under the key, replacing any previous game."""
        if key in self._games:
            logger.debug("Replacing game %s", key)
        self._games[key] = game

    def delete(self, key: str) -> Game | None:
        """Remove the game for the key (returns the removed game, if any)."""
        game = self._games.pop(key, None)
        if game is not None:
            logger.debug("Removed game %s", key)
        return game

    def lock(self, key: str) -> AbstractContextManager[None]:
        return self._locks.lock(key)

    def __len__(self) -> int:
        return len(self._games)
