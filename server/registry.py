from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from dominoes.events.mapper import map_events
from dominoes.exceptions import DominoError, GameNotFoundError
from dominoes.game.actions import Action, ActionType
from dominoes.game.config import GameConfig
from dominoes.game.game import GameState, create_game
from dominoes.game.outcomes import PlayResult
from dominoes.game.rules import apply_action, get_legal_actions
from dominoes.game.tiles import Side, tile_str
from snapshot import serialize_snapshot

logger = logging.getLogger(__name__)


class GameSession:
    """Owns a single GameState and serialises the intents sent to it."""

    def __init__(self, game_id: str, game: GameState):
        self.game_id = game_id
        self.game = game
        self._lock = asyncio.Lock()

    async def snapshot(self) -> Dict[str, Any]:
        async with self._lock:
            return serialize_snapshot(self.game)

    async def get_legal_actions(self) -> List[Dict[str, Any]]:
        async with self._lock:
            return [
                {"action_type": a.action_type.value, "params": dict(a.params)}
                for a in get_legal_actions(self.game, Side.PLAYER)
            ]

    async def get_events_since(self, since: int = 0) -> Dict[str, Any]:
        async with self._lock:
            events = self.game.event_log.get_events()
            start = max(0, since)
            return {"since": start, "next": len(events), "events": map_events(events[start:])}

    async def apply_action_request(
        self, action_type: str, hand_index: Optional[int] = None
    ) -> Tuple[bool, Optional[str], Optional[str], Dict[str, Any]]:
        """
        Apply a player intent.

        Returns:
            (accepted, outcome tag, rejection reason, details)
        """
        try:
            kind = ActionType(action_type)
        except ValueError:
            return False, None, f"Unknown action: {action_type}", {}

        params = {"hand_index": hand_index} if kind == ActionType.PLAY_TILE else {}
        async with self._lock:
            try:
                result = apply_action(self.game, Action(kind, **params), Side.PLAYER)
            except DominoError as e:
                logger.warning("Game %s rejected %s: %s", self.game_id, action_type, e)
                return False, None, str(e), {}

        details: Dict[str, Any] = {}
        if result.tile is not None:
            details["tile"] = tile_str(result.tile)
        if isinstance(result, PlayResult) and result.opponent is not None:
            opp = result.opponent
            details["opponent"] = {
                "outcome": opp.outcome.value,
                "tile": tile_str(opp.tile) if opp.tile is not None else None,
                "draws": opp.draws,
            }
        return result.ok, result.outcome.value, None if result.ok else result.outcome.value, details


class GameRegistry:
    """In-memory registry of running games."""

    def __init__(self):
        self._games: Dict[str, GameSession] = {}
        self._lock = asyncio.Lock()

    async def create_game(
        self,
        *,
        seed: Optional[int] = None,
        hand_size: int = 5,
        end_on_empty_hand: bool = False,
    ) -> str:
        game_id = uuid.uuid4().hex[:12]
        config = GameConfig(seed=seed, hand_size=hand_size, end_on_empty_hand=end_on_empty_hand)
        session = GameSession(game_id, create_game(config))

        async with self._lock:
            self._games[game_id] = session

        logger.info("Created game %s (seed=%s)", game_id, seed)
        return game_id

    async def get(self, game_id: str) -> GameSession:
        session = self._games.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    async def remove(self, game_id: str) -> bool:
        async with self._lock:
            if game_id not in self._games:
                return False
            del self._games[game_id]
        logger.info("Removed game %s", game_id)
        return True

    def __len__(self) -> int:
        return len(self._games)
