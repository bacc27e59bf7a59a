from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status

from hustle.actions import dispatch_action
from hustle.api.deps import get_game_context, get_hub
from hustle.api.models import ActionResponse, TickRequest, TickResponse
from hustle.core.models import GameSnapshot
from hustle.session import GameContext
from hustle.websocket_hub import GameWebSocketHub

router = APIRouter()


@router.websocket("/ws/game")
async def game_updates_ws(websocket: WebSocket) -> None:
    hub: GameWebSocketHub = websocket.app.state.hub
    await hub.connect(websocket)

    try:
        # Keep the socket open; client can optionally send pings.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await hub.disconnect(websocket)
    except Exception:
        await hub.disconnect(websocket)
        raise


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/game", response_model=GameSnapshot)
async def get_game_route(ctx: GameContext = Depends(get_game_context)) -> GameSnapshot:
    return ctx.snapshot()


@router.post("/game/actions/{action}", response_model=ActionResponse)
async def action_route(
    action: str,
    body: dict[str, Any] | None = None,
    ctx: GameContext = Depends(get_game_context),
    hub: GameWebSocketHub = Depends(get_hub),
) -> ActionResponse:
    try:
        result = dispatch_action(ctx=ctx, action=action, payload=body)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    await hub.flush()
    return ActionResponse(action=result.action, applied=result.applied, game=result.snapshot)


@router.post("/game/tick", response_model=TickResponse)
async def tick_route(
    payload: TickRequest,
    ctx: GameContext = Depends(get_game_context),
    hub: GameWebSocketHub = Depends(get_hub),
) -> TickResponse:
    """Dev endpoint: advance the game by a fixed delta.

    Useful with HUSTLE_AUTO_TICK=0 to step the simulation by hand.
    """

    ticked = ctx.tick(payload.delta)
    await hub.flush()
    return TickResponse(ticked=ticked, game=ctx.snapshot())
