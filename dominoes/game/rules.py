"""
High-level rules API for controlling game flow.
This module provides the public interface adapters use: legal move
detection and action dispatch.
"""

from typing import List, Union

from dominoes.exceptions import InvalidActionError
from dominoes.game.actions import Action, ActionType
from dominoes.game.game import GameState
from dominoes.game.outcomes import DrawResult, PlayResult
from dominoes.game.tiles import Side


def get_legal_actions(game_state: GameState, side: Side = Side.PLAYER) -> List[Action]:
    """
    Get all legal actions available to a side.

    This is the main interface for agents and adapters to determine valid moves.

    Args:
        game_state: Current game state
        side: Side to get actions for

    Returns:
        One PLAY_TILE per playable hand index, or a lone DRAW when nothing plays
    """
    if game_state.game_over:
        return []

    # Not this side's turn
    if game_state.to_move != side:
        return []

    plays = game_state.legal_plays(side)
    if plays:
        return plays

    # Draw covers drawing from the stock and stalemate redistribution
    return [Action(ActionType.DRAW)]


def apply_action(
    game_state: GameState, action: Action, side: Side = Side.PLAYER
) -> Union[PlayResult, DrawResult]:
    """
    Execute an action for a side.

    A player play runs the opponent's turn before returning. Rule outcomes
    (illegal tile, nothing to draw) come back in the result; only malformed
    or out-of-turn actions raise.

    Args:
        game_state: Current game state
        action: Action to apply
        side: Side taking the action

    Returns:
        PlayResult or DrawResult

    Raises:
        InvalidActionError: out of turn, missing hand index, unknown action
    """
    if not game_state.game_over and game_state.to_move != side:
        raise InvalidActionError(f"Not {side.value}'s turn")

    if action.action_type == ActionType.PLAY_TILE:
        if action.hand_index is None:
            raise InvalidActionError("play_tile requires hand_index")
        if side == Side.PLAYER:
            return game_state.player_play(action.hand_index)
        return game_state.play_from_hand(side, action.hand_index)

    if action.action_type == ActionType.DRAW:
        return game_state.request_draw(side)

    raise InvalidActionError(f"Unknown action: {action.action_type}")
