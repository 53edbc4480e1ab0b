"""
Server package exposing FastAPI app and game registry.
"""

from .app import app  # noqa: F401
from .registry import GameRegistry  # noqa: F401

