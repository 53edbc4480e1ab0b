"""
Central application configuration using pydantic-settings.

This module provides typed access to environment-based configuration for:
- Game defaults (seed, hand size, win detection) and log level
- The HTTP adapter's bind address
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """
    Defaults for new games.

    Environment variables (prefix: DOMINO_):
        DOMINO_SEED              - RNG seed for shuffles (default: unseeded)
        DOMINO_HAND_SIZE         - Tiles dealt to each side (default: 5)
        DOMINO_END_ON_EMPTY_HAND - Stop the game when a hand empties (default: false)
        DOMINO_LOG_LEVEL         - Logging level name (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="DOMINO_",
    )

    seed: Optional[int] = Field(
        default=None,
        description="Seed for the shuffle RNG; unset means a fresh shuffle each game.",
    )
    hand_size: int = Field(
        default=5,
        ge=1,
        le=14,
        description="Number of tiles dealt to each side.",
    )
    end_on_empty_hand: bool = Field(
        default=False,
        description="End the game as soon as either hand is empty.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Accept any case and reject names the logging module does not know."""
        if not value:
            return "INFO"
        name = str(value).upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name


class ServerSettings(BaseSettings):
    """
    Configuration for the HTTP adapter.

    Environment variables:
        SERVER_HOST - Bind host (default: 127.0.0.1)
        SERVER_PORT - Bind port (default: 8000)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", alias="SERVER_HOST")
    port: int = Field(default=8000, ge=1, le=65535, alias="SERVER_PORT")


@lru_cache
def get_game_settings() -> GameSettings:
    """Return cached game settings instance."""
    return GameSettings()


@lru_cache
def get_server_settings() -> ServerSettings:
    """Return cached server settings instance."""
    return ServerSettings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings unless a level is given."""
    logging.basicConfig(
        level=level or get_game_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
