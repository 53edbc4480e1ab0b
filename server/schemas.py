from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CreateGameRequest(BaseModel):
    seed: Optional[int] = None
    hand_size: Optional[int] = Field(None, ge=1, le=14)
    end_on_empty_hand: Optional[bool] = None


class CreateGameResponse(BaseModel):
    game_id: str


class HandTileDTO(BaseModel):
    index: int
    tile: str
    pips: List[int]
    playable: bool


class SnapshotResponse(BaseModel):
    turn_number: int
    to_move: str
    chain: List[str]
    endpoints: Optional[List[int]] = None
    player_hand: List[HandTileDTO]
    opponent_hand_size: int
    stock_size: int
    last_outcome: Optional[str] = None
    game_over: bool
    winner: Optional[str] = None


class ActionRequest(BaseModel):
    action_type: str
    hand_index: Optional[int] = None


class ActionResponse(BaseModel):
    accepted: bool
    outcome: Optional[str] = None
    reason: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)
    snapshot: Optional[SnapshotResponse] = None


class LegalActionsResponse(BaseModel):
    game_id: str
    actions: List[Dict[str, Any]]


class EventsResponse(BaseModel):
    game_id: str
    since: int
    next: int
    events: List[Dict[str, Any]]
