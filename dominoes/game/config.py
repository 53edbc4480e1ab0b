"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from dominoes.settings import GameSettings


@dataclass
class GameConfig:
    """Configuration for a dominoes game."""

    seed: Optional[int] = None

    hand_size: int = 5

    # Off by default: play continues until stalemate when a hand empties.
    end_on_empty_hand: bool = False

    @classmethod
    def from_settings(cls, settings: "GameSettings") -> "GameConfig":
        """Build a config from environment-backed settings."""
        return cls(
            seed=settings.seed,
            hand_size=settings.hand_size,
            end_on_empty_hand=settings.end_on_empty_hand,
        )
