from __future__ import annotations

from fastapi import Request

from hustle.session import GameContext
from hustle.websocket_hub import GameWebSocketHub


def get_game_context(request: Request) -> GameContext:
    return request.app.state.game


def get_hub(request: Request) -> GameWebSocketHub:
    return request.app.state.hub
