"""Base class for all dominoes agents."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from dominoes.game.tiles import Side

if TYPE_CHECKING:
    from dominoes.game.actions import Action
    from dominoes.game.game import GameState


class Agent(ABC):
    """
    Abstract base class for dominoes agents.

    All agents must implement the `choose_action` method to select
    an action from the list of legal actions.

    Attributes:
        side: The hand this agent plays.
        name: The agent's display name.
    """

    def __init__(self, side: Side, name: str):
        """
        Initialize the agent.

        Args:
            side: The hand this agent plays.
            name: The agent's display name.
        """
        self.side = side
        self.name = name

    @abstractmethod
    def choose_action(self, game: "GameState", legal_actions: List["Action"]) -> "Action":
        """
        Choose an action from the list of legal actions.

        Args:
            game: The current game state.
            legal_actions: List of legal actions available to the agent's side.

        Returns:
            The chosen action to execute.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(side={self.side.value}, name='{self.name}')"
