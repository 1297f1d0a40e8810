"""Protocol registry of active games (implemented in memory and with SQL Alchemy)"""

from contextlib import AbstractContextManager
from typing import Protocol

from src.tictactoe.game import Game

PAIR_KEY_SEPARATOR = "$$"


def pair_key(user_a: str, user_b: str) -> str:
    """
    Canonical key for an unordered pair of users: the lexicographically smaller name goes first.
    This ensures that we never have two concurrent games between the same pair of users.
    """
    first, second = sorted((user_a, user_b))
    return f"{first}{PAIR_KEY_SEPARATOR}{second}"


class GameRegistry(Protocol):
    """One game in progress per user pair key"""

    def get(self, key: str) -> Game | None:
        """Get the game for the key, if one is registered."""
        ...

    def put(self, key: str, game: Game) -> None:
        """Register the game under the key, replacing any previous game."""
        ...

    def delete(self, key: str) -> Game | None:
        """Remove the game for the key (returns the removed game, if any)."""
        ...

    def lock(self, key: str) -> AbstractContextManager:
        """Exclusive access to the game of one key. Every read-modify-write should hold it."""
        ...
