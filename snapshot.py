"""
Public snapshot serialization of GameState.

Produces a sanitized, UI-friendly view of the current game without
exposing hidden information (opponent tiles, stock order).
"""

from __future__ import annotations

from typing import Any, Dict, List

from dominoes.game.game import GameState
from dominoes.game.tiles import Side, tile_str


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict.

    The snapshot includes:
    - turn_number and to_move
    - the chain, left end first, and its endpoints
    - the player's hand with a playability flag per tile
    - opponent hand and stock sizes only
    - last outcome tag, game_over and winner
    """
    hand: List[Dict[str, Any]] = []
    for index, tile in enumerate(game.hand(Side.PLAYER)):
        hand.append(
            {
                "index": index,
                "tile": tile_str(tile),
                "pips": [tile.left, tile.right],
                "playable": game.can_play(tile),
            }
        )

    endpoints = game.endpoints
    snapshot: Dict[str, Any] = {
        "turn_number": game.turn_number,
        "to_move": game.to_move.value,
        "chain": [tile_str(t) for t in game.chain],
        "endpoints": list(endpoints) if endpoints is not None else None,
        "player_hand": hand,
        "opponent_hand_size": len(game.hand(Side.OPPONENT)),
        "stock_size": game.stock_size,
        "last_outcome": game.last_outcome.value if game.last_outcome is not None else None,
        "game_over": game.game_over,
        "winner": game.winner.value if game.winner is not None else None,
    }

    return snapshot
