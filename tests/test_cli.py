from dominoes import GameConfig, Side, create_game
from dominoes.game.outcomes import Outcome, OpponentOutcome, PlayResult
from dominoes.game.tiles import Tile
from play_dominoes import describe, play_game


def test_auto_game_runs_to_a_stop():
    game = create_game(GameConfig(seed=3, end_on_empty_hand=True))
    play_game(game, auto=True, agent_seed=3, verbose=False)
    game.check_invariants()
    assert game.turn_number > 0


def test_interactive_quit(capsys):
    game = create_game(GameConfig(seed=3))
    inputs = iter(["nonsense", "q"])
    play_game(game, prompt=lambda _: next(inputs))
    out = capsys.readouterr().out
    assert "Enter a number, d or q." in out
    assert "GAME STOPPED" in out
    assert game.turn_number == 0


def test_interactive_play_and_draw():
    game = create_game(GameConfig(seed=3))
    inputs = iter(["0", "d", "q"])
    play_game(game, prompt=lambda _: next(inputs), verbose=False)
    assert game.turn_number >= 1


def test_describe_player_and_opponent_play():
    result = PlayResult(
        Outcome.OK,
        Side.PLAYER,
        tile=Tile(3, 5),
        end="right",
        opponent=OpponentOutcome(Outcome.OPPONENT_PLAYED, tile=Tile(5, 6), end="right", draws=2),
    )
    assert describe(result) == "You played [3|5] on the right. Computer played [5|6] after drawing 2."


def test_main_takes_defaults_from_settings(monkeypatch):
    import play_dominoes
    from dominoes.settings import get_game_settings

    monkeypatch.setenv("DOMINO_HAND_SIZE", "6")
    monkeypatch.setattr("sys.argv", ["play_dominoes.py", "--seed", "5", "--quiet"])
    get_game_settings.cache_clear()
    seen = {}

    def fake_play(game, **kwargs):
        seen["game"] = game
        return game

    monkeypatch.setattr(play_dominoes, "play_game", fake_play)
    try:
        play_dominoes.main()
    finally:
        get_game_settings.cache_clear()

    game = seen["game"]
    assert game.config.seed == 5
    assert game.config.hand_size == 6
    assert len(game.hand(Side.PLAYER)) == 6
