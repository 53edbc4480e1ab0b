"""Shared test fixtures for the dominoes engine tests."""

import pytest
from dominoes import GameConfig, GameState, Tile, create_game


def tiles(*pairs):
    """Build a tile list from (a, b) pairs."""
    return [Tile(a, b) for a, b in pairs]


# Every tile holding a 6 is on the chain and both ends show 6
BLOCKED_CHAIN = [(6, 0), (0, 1), (1, 6), (6, 6), (6, 2), (2, 3), (3, 6), (6, 4), (4, 5), (5, 6)]
BLOCKED_PLAYER = [(0, 0), (0, 2), (0, 3), (0, 4), (0, 5), (1, 1), (1, 2), (1, 3), (1, 4)]
BLOCKED_OPPONENT = [(1, 5), (2, 2), (2, 4), (2, 5), (3, 3), (3, 4), (3, 5), (4, 4), (5, 5)]


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def basic_game(game_config):
    """Freshly dealt game with fixed seed."""
    return create_game(game_config)


@pytest.fixture
def blocked_game():
    """Full 28-tile position where neither side can play and the stock is empty."""
    return GameState.from_position(
        chain=tiles(*BLOCKED_CHAIN),
        player_hand=tiles(*BLOCKED_PLAYER),
        opponent_hand=tiles(*BLOCKED_OPPONENT),
        stock=[],
        config=GameConfig(seed=7),
    )
