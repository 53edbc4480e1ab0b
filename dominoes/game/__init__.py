from dominoes.game.actions import Action, ActionType
from dominoes.game.chain import Chain
from dominoes.game.config import GameConfig
from dominoes.game.game import GameState, create_game
from dominoes.game.hands import Hand, Stock
from dominoes.game.outcomes import DrawResult, OpponentOutcome, Outcome, PlayResult
from dominoes.game.tiles import Side, Tile, double_six_set, make_tile, parse_tile, tile_str

__all__ = [
    "Action",
    "ActionType",
    "Chain",
    "GameConfig",
    "GameState",
    "create_game",
    "Hand",
    "Stock",
    "DrawResult",
    "OpponentOutcome",
    "Outcome",
    "PlayResult",
    "Side",
    "Tile",
    "double_six_set",
    "make_tile",
    "parse_tile",
    "tile_str",
]
