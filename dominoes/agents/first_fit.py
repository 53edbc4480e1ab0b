"""First-fit agent: plays the first playable tile in hand order."""

from typing import List, Optional

from dominoes.game.actions import Action, ActionType
from dominoes.game.tiles import Side

from dominoes.agents.base import Agent


class FirstFitAgent(Agent):
    """
    Deterministic rule-driven agent used for the opponent.

    Scans the legal plays in hand order and takes the first one; no look-ahead
    and no preference for doubles or heavy tiles. Falls back to drawing when
    nothing can be played.
    """

    def __init__(self, side: Side = Side.OPPONENT, name: str = "Computer"):
        super().__init__(side, name)

    def choose_action(self, game, legal_actions: List[Action]) -> Optional[Action]:
        plays = [a for a in legal_actions if a.action_type == ActionType.PLAY_TILE]
        if plays:
            return min(plays, key=lambda a: a.hand_index)

        for action in legal_actions:
            if action.action_type == ActionType.DRAW:
                return action

        return None
