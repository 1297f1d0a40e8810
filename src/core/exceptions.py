"""Custom exceptions shared across layers. Everything derives from GameError so callers can catch a single type."""


class GameError(Exception):
    """Base class for all errors raised by the game engine, registry, or service."""


# --- GAME STATE ---
class GameStateError(GameError):
    """The game (or data describing it) is not in a state that allows the request."""


class GameAlreadyFinishedError(GameStateError):
    """A move was attempted after the game reached a terminal result."""


# --- MOVES ---
class NotYourTurnError(GameError):
    """Move submitted by a player who is not the current mover."""


class IllegalMoveError(GameError):
    """The requested move is not allowed on the current board."""


class OutOfRangeError(IllegalMoveError):
    """Coordinates fall outside the board."""


class CellOccupiedError(IllegalMoveError):
    """Target cell already holds a piece."""


# --- REGISTRY / BOUNDARY ---
class RepositoryError(GameError):
    """Lookup in the game registry failed."""


class InvalidRequestError(GameError):
    """Request data did not pass validation at the boundary."""
