import pytest
from pydantic import ValidationError

from dominoes.game.config import GameConfig
from dominoes.settings import GameSettings, ServerSettings


def test_defaults(monkeypatch):
    for var in ("DOMINO_SEED", "DOMINO_HAND_SIZE", "DOMINO_END_ON_EMPTY_HAND", "DOMINO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = GameSettings(_env_file=None)
    assert settings.seed is None
    assert settings.hand_size == 5
    assert settings.end_on_empty_hand is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DOMINO_SEED", "99")
    monkeypatch.setenv("DOMINO_HAND_SIZE", "7")
    monkeypatch.setenv("DOMINO_END_ON_EMPTY_HAND", "true")
    monkeypatch.setenv("DOMINO_LOG_LEVEL", "debug")
    settings = GameSettings(_env_file=None)
    assert settings.seed == 99
    assert settings.hand_size == 7
    assert settings.end_on_empty_hand is True
    assert settings.log_level == "DEBUG"

    config = GameConfig.from_settings(settings)
    assert config == GameConfig(seed=99, hand_size=7, end_on_empty_hand=True)


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("DOMINO_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        GameSettings(_env_file=None)


def test_rejects_bad_hand_size(monkeypatch):
    monkeypatch.setenv("DOMINO_HAND_SIZE", "0")
    with pytest.raises(ValidationError):
        GameSettings(_env_file=None)


def test_server_settings(monkeypatch):
    monkeypatch.setenv("SERVER_HOST", "0.0.0.0")
    monkeypatch.setenv("SERVER_PORT", "9001")
    settings = ServerSettings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.port == 9001
