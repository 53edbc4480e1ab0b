"""
Custom exception hierarchy for the dominoes engine and its adapters.

Rule outcomes (illegal move, nothing to draw, ...) are reported as return
values; these exceptions cover programming and input errors only.
"""


class DominoError(Exception):
    """Base exception for all game-related errors."""


class InvalidTileError(DominoError):
    """Pip values outside the double-six range or an unparseable tile."""


class InvalidPlacementError(DominoError):
    """Tile does not meet the chain end it was attached to."""


class InvalidActionError(DominoError):
    """Action is not legal in the current state."""


class GameNotFoundError(DominoError):
    """Game does not exist."""


class ValidationError(DominoError):
    """Input validation failed."""
