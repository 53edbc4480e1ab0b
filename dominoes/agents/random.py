"""Random agent that makes random legal moves."""

import random
from typing import List, Optional

from dominoes.game.actions import Action
from dominoes.game.tiles import Side

from dominoes.agents.base import Agent


class RandomAgent(Agent):
    """
    Simple AI that picks uniformly among the legal actions.

    Used to stand in for the human when simulating games.
    """

    def __init__(self, side: Side = Side.PLAYER, name: str = "Random", seed: Optional[int] = None):
        """
        Initialize the random agent.

        Args:
            side: The hand this agent plays.
            name: The agent's display name.
            seed: Seed for the agent's private RNG.
        """
        super().__init__(side, name)
        self.rng = random.Random(seed)

    def choose_action(self, game, legal_actions: List[Action]) -> Optional[Action]:
        if not legal_actions:
            return None
        return self.rng.choice(legal_actions)
