from __future__ import annotations

from pydantic import BaseModel, Field

from hustle.core.models import GameSnapshot


class TickRequest(BaseModel):
    # Seconds of game time to advance in one manual step.
    delta: float = Field(..., gt=0, le=60)


class ActionResponse(BaseModel):
    action: str
    applied: bool
    game: GameSnapshot


class TickResponse(BaseModel):
    ticked: bool
    game: GameSnapshot
