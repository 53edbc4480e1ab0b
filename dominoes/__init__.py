"""
Dominoes game engine.

Two-player double-six dominoes: a human against a deterministic first-fit
opponent. Exposes the engine primitives and built-in agents.
"""

from dominoes.game import GameConfig, GameState, Side, Tile, create_game
from dominoes.agents import Agent, FirstFitAgent, RandomAgent

__all__ = [
    "GameConfig",
    "GameState",
    "Side",
    "Tile",
    "create_game",
    "Agent",
    "FirstFitAgent",
    "RandomAgent",
]
