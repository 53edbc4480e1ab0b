"""
Game event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from dominoes.game.tiles import Side


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    DEAL = "deal"

    PLAY = "play"
    ILLEGAL_MOVE = "illegal_move"
    DRAW = "draw"
    OPPONENT_NO_MOVE = "opponent_no_move"

    REDISTRIBUTE = "redistribute"
    DEADLOCK = "deadlock"

    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    side: Optional[Side] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        side_str = self.side.value if self.side is not None else "system"
        return f"[{side_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, side: Optional[Side] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, side, details))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        return self.events[-count:]

    def __len__(self) -> int:
        return len(self.events)

