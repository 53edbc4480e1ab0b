"""
JSONL logger for dominoes game events.

Appends the engine's events, mapped to their public shape, to a JSONL file.
"""

import json
import logging
from datetime import datetime
from typing import Optional

from dominoes.events.mapper import map_event
from dominoes.game.game import GameState
from snapshot import serialize_snapshot

logger = logging.getLogger(__name__)


class GameLogger:
    """Logger that writes game events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None, reveal_opponent: bool = False):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
            reveal_opponent: Write the tiles the opponent draws.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"dominoes_game_{timestamp}.jsonl"

        self.log_file = log_file
        self.reveal_opponent = reveal_opponent
        self.event_count = 0
        self._engine_last_idx = 0  # last flushed index from engine's internal EventLog

        # Create/clear log file
        with open(self.log_file, "w"):
            pass

    def log_event(self, event_type: str, **kwargs) -> None:
        """
        Log a game event to JSONL file.

        Args:
            event_type: Type of event (e.g., "play", "draw", "snapshot")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1

    def flush_engine_events(self, game: GameState) -> int:
        """Flush new internal engine events to JSONL.

        Returns:
            Number of events written
        """
        events = game.event_log.get_events()
        new_events = events[self._engine_last_idx:]
        for ev in new_events:
            mapped = map_event(ev, reveal_opponent=self.reveal_opponent)
            event_type = mapped.pop("event_type")
            self.log_event(event_type, turn_number=game.turn_number, **mapped)
        self._engine_last_idx = len(events)
        if new_events:
            logger.debug("Flushed %d events to %s", len(new_events), self.log_file)
        return len(new_events)

    def log_snapshot(self, game: GameState) -> None:
        """Write the public snapshot as its own record."""
        self.log_event("snapshot", turn_number=game.turn_number, snapshot=serialize_snapshot(game))
