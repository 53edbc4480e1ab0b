"""
Result values returned by engine operations.

Every rule outcome is reported here rather than raised, so adapters can
show a message and carry on with the state untouched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dominoes.game.tiles import Side, Tile


class Outcome(Enum):
    """Tag of the last engine operation, as shown to adapters."""

    OK = "ok"
    ILLEGAL_MOVE = "illegal_move"
    BAD_INDEX = "bad_index"

    HAS_LEGAL_MOVE = "has_legal_move"
    DREW = "drew"
    REDISTRIBUTED = "redistributed"
    DEADLOCK_UNRESOLVED = "deadlock_unresolved"

    OPPONENT_PLAYED = "opponent_played"
    OPPONENT_NO_MOVE = "opponent_no_move"

    GAME_OVER = "game_over"


@dataclass(frozen=True)
class OpponentOutcome:
    """What the opponent did on its turn."""

    outcome: Outcome
    tile: Optional[Tile] = None
    end: Optional[str] = None
    draws: int = 0

    @property
    def played(self) -> bool:
        return self.outcome == Outcome.OPPONENT_PLAYED


@dataclass(frozen=True)
class PlayResult:
    """
    Result of playing a tile from a hand.

    `tile` is the tile as oriented on the chain when the play succeeded, and
    the tile from the hand otherwise. `opponent` is filled in when the play was
    a player intent that handed the turn to the opponent.
    """

    outcome: Outcome
    side: Side
    tile: Optional[Tile] = None
    end: Optional[str] = None
    opponent: Optional[OpponentOutcome] = None

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.OK


@dataclass(frozen=True)
class DrawResult:
    """Result of a draw request."""

    outcome: Outcome
    side: Side
    tile: Optional[Tile] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.DREW, Outcome.REDISTRIBUTED)
