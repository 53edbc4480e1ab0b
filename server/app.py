from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import replace

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from dominoes.exceptions import GameNotFoundError
from dominoes.game.config import GameConfig
from dominoes.settings import configure_logging, get_game_settings, get_server_settings

from .registry import GameRegistry
from .schemas import (
    ActionRequest,
    ActionResponse,
    CreateGameRequest,
    CreateGameResponse,
    EventsResponse,
    LegalActionsResponse,
    SnapshotResponse,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    logger.info("Starting dominoes server")
    yield
    logger.info("Shutting down dominoes server (%d games in memory)", len(registry))


app = FastAPI(
    title="Dominoes Server",
    version="0.1.0",
    lifespan=lifespan,
)
registry = GameRegistry()


@app.exception_handler(GameNotFoundError)
async def game_not_found(request: Request, exc: GameNotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Game not found"})


@app.post("/games", response_model=CreateGameResponse)
async def create_game(req: CreateGameRequest):
    config = GameConfig.from_settings(get_game_settings())
    overrides = req.model_dump(exclude_none=True)
    if overrides:
        config = replace(config, **overrides)
    gid = await registry.create_game(
        seed=config.seed,
        hand_size=config.hand_size,
        end_on_empty_hand=config.end_on_empty_hand,
    )
    return CreateGameResponse(game_id=gid)


@app.get("/games/{game_id}/snapshot", response_model=SnapshotResponse)
async def get_snapshot(game_id: str):
    session = await registry.get(game_id)
    return await session.snapshot()


@app.get("/games/{game_id}/legal_actions", response_model=LegalActionsResponse)
async def legal_actions(game_id: str):
    session = await registry.get(game_id)
    acts = await session.get_legal_actions()
    return LegalActionsResponse(game_id=game_id, actions=acts)


@app.get("/games/{game_id}/events", response_model=EventsResponse)
async def get_events(game_id: str, since: int = 0):
    session = await registry.get(game_id)
    delta = await session.get_events_since(since)
    return EventsResponse(game_id=game_id, **delta)


@app.post("/games/{game_id}/actions", response_model=ActionResponse)
async def apply_action(game_id: str, req: ActionRequest):
    session = await registry.get(game_id)
    ok, outcome, reason, details = await session.apply_action_request(req.action_type, req.hand_index)
    return ActionResponse(
        accepted=ok,
        outcome=outcome,
        reason=reason,
        details=details,
        snapshot=await session.snapshot(),
    )


@app.delete("/games/{game_id}")
async def delete_game(game_id: str):
    if not await registry.remove(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"game_id": game_id, "deleted": True}


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    settings = get_server_settings()
    uvicorn.run("server.app:app", host=settings.host, port=settings.port)
