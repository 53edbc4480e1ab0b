"""
Actions an adapter or agent can submit to the engine.
"""

from enum import Enum
from typing import Any, Optional


class ActionType(Enum):
    """Types of actions a side can take."""

    PLAY_TILE = "play_tile"
    DRAW = "draw"


class Action:
    """Represents a game action that can be taken."""

    def __init__(self, action_type: ActionType, **params: Any):
        self.action_type = action_type
        self.params = params

    @property
    def hand_index(self) -> Optional[int]:
        return self.params.get("hand_index")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self.action_type == other.action_type and self.params == other.params

    def __repr__(self) -> str:
        return f"Action({self.action_type.value}, {self.params})"
