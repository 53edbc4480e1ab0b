"""
Tests for draw requests and stalemate redistribution.
"""

from dominoes import GameConfig, GameState, Side, Tile
from dominoes.game.outcomes import Outcome

from conftest import tiles


def test_draw_refused_when_a_play_exists():
    game = GameState.from_position(
        chain=tiles((3, 5)), player_hand=tiles((5, 1)), stock=tiles((0, 0))
    )
    result = game.request_draw(Side.PLAYER)
    assert result.outcome == Outcome.HAS_LEGAL_MOVE
    assert not result.ok
    assert game.hand(Side.PLAYER) == (Tile(5, 1),)
    assert game.stock_size == 1


def test_draw_takes_front_of_stock_and_keeps_turn():
    game = GameState.from_position(
        chain=tiles((3, 5)), player_hand=tiles((0, 1)), stock=tiles((2, 2), (6, 6))
    )
    result = game.request_draw(Side.PLAYER)
    assert result.outcome == Outcome.DREW
    assert result.tile == Tile(2, 2)
    assert game.hand(Side.PLAYER) == (Tile(0, 1), Tile(2, 2))
    assert game.stock_size == 1
    assert game.to_move == Side.PLAYER
    assert game.turn_number == 0


def test_draw_for_opponent_side():
    game = GameState.from_position(
        chain=tiles((3, 5)), opponent_hand=tiles((0, 1)), stock=tiles((2, 2))
    )
    result = game.request_draw(Side.OPPONENT)
    assert result.outcome == Outcome.DREW
    assert game.hand(Side.OPPONENT) == (Tile(0, 1), Tile(2, 2))


def test_deadlock_unresolved_when_other_side_can_play():
    game = GameState.from_position(
        chain=tiles((3, 5)), player_hand=tiles((0, 1)), opponent_hand=tiles((5, 6))
    )
    result = game.request_draw(Side.PLAYER)
    assert result.outcome == Outcome.DEADLOCK_UNRESOLVED
    assert game.hand(Side.PLAYER) == (Tile(0, 1),)
    assert game.hand(Side.OPPONENT) == (Tile(5, 6),)


def test_s6_stalemate_redistribution(blocked_game):
    assert blocked_game.is_stalemate()
    chain_before = blocked_game.chain

    result = blocked_game.request_draw(Side.PLAYER)

    assert result.outcome == Outcome.REDISTRIBUTED
    assert result.ok
    assert blocked_game.chain == chain_before
    assert len(blocked_game.hand(Side.PLAYER)) == 5
    assert len(blocked_game.hand(Side.OPPONENT)) == 5
    assert blocked_game.stock_size == 8
    assert blocked_game.to_move == Side.PLAYER
    blocked_game.check_invariants()


def test_redistribution_is_seeded():
    from conftest import BLOCKED_CHAIN, BLOCKED_OPPONENT, BLOCKED_PLAYER

    def run():
        game = GameState.from_position(
            chain=tiles(*BLOCKED_CHAIN),
            player_hand=tiles(*BLOCKED_PLAYER),
            opponent_hand=tiles(*BLOCKED_OPPONENT),
            config=GameConfig(seed=11),
        )
        game.request_draw(Side.PLAYER)
        return game.hand(Side.PLAYER), game.hand(Side.OPPONENT)

    assert run() == run()


def test_redistribution_with_small_pool_deals_player_first():
    game = GameState.from_position(
        chain=tiles((6, 6)),
        player_hand=tiles((0, 1), (1, 2), (2, 3)),
        opponent_hand=tiles((3, 4)),
    )
    result = game.request_draw(Side.OPPONENT)
    assert result.outcome == Outcome.REDISTRIBUTED
    assert len(game.hand(Side.PLAYER)) == 4
    assert len(game.hand(Side.OPPONENT)) == 0
    assert game.stock_size == 0
    game.check_invariants()


def test_redistribution_pool_of_exactly_ten():
    game = GameState.from_position(
        chain=tiles((6, 6)),
        player_hand=tiles((0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (0, 5)),
        opponent_hand=tiles((1, 1), (1, 2), (1, 3), (1, 4)),
    )
    game.request_draw(Side.PLAYER)
    assert len(game.hand(Side.PLAYER)) == 5
    assert len(game.hand(Side.OPPONENT)) == 5
    assert game.stock_size == 0


def test_no_redistribution_on_empty_chain():
    game = GameState.from_position(player_hand=tiles((0, 1)))
    assert not game.is_stalemate()
    assert game.request_draw(Side.PLAYER).outcome == Outcome.HAS_LEGAL_MOVE
