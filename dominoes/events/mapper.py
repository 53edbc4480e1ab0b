"""
Mapping from internal EventLog objects to canonical public JSON events.

The internal engine emits GameEvent objects where:
- event_type is eventlog.EventType
- side is optional
- details hold tiles already rendered as "a-b" strings

This module produces stable, UI/JSONL-friendly dicts with consistent
event_type strings and payload keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from dominoes.game.eventlog import EventType, GameEvent
from dominoes.game.tiles import Side


def _endpoints(value: Optional[Sequence[int]]) -> Optional[List[int]]:
    if value is None:
        return None
    return [int(v) for v in value]


def map_event(event: GameEvent, *, reveal_opponent: bool = False) -> Dict[str, Any]:
    """
    Map a single GameEvent to a canonical JSON dict.

    Args:
        event: internal event object
        reveal_opponent: include tiles the opponent drew (hidden by default)

    Returns:
        dict with keys: event_type (str), side (optional), and event-specific fields
    """
    d = event.details

    base: Dict[str, Any] = {"event_type": event.event_type.value}
    if event.side is not None:
        base["side"] = event.side.value

    if event.event_type == EventType.GAME_START:
        base.update(seed=d.get("seed"), arranged=d.get("arranged", False))
        return base

    if event.event_type in (EventType.DEAL, EventType.REDISTRIBUTE):
        base.update(
            player_hand_size=d.get("player_hand"),
            opponent_hand_size=d.get("opponent_hand"),
            stock_size=d.get("stock"),
        )
        if event.event_type == EventType.REDISTRIBUTE:
            base["pool_size"] = d.get("pool")
        return base

    if event.event_type == EventType.PLAY:
        base.update(
            tile=d.get("tile"),
            end=d.get("end"),
            hand_index=d.get("hand_index"),
            endpoints=_endpoints(d.get("endpoints")),
        )
        return base

    if event.event_type == EventType.ILLEGAL_MOVE:
        base.update(tile=d.get("tile"), endpoints=_endpoints(d.get("endpoints")))
        return base

    if event.event_type == EventType.DRAW:
        hidden = event.side == Side.OPPONENT and not reveal_opponent
        base.update(tile=None if hidden else d.get("tile"), stock_size=d.get("stock"))
        return base

    if event.event_type == EventType.OPPONENT_NO_MOVE:
        base.update(draws=d.get("draws", 0))
        return base

    if event.event_type == EventType.GAME_END:
        base.update(reason=d.get("reason"))
        return base

    # DEADLOCK and anything new: pass details through
    base.update(d)
    return base


def map_events(events: Iterable[GameEvent], *, reveal_opponent: bool = False) -> List[Dict[str, Any]]:
    """Map many events preserving order."""
    return [map_event(e, reveal_opponent=reveal_opponent) for e in events]
