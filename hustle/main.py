import asyncio
import contextlib
import logging
import os
import random

from dotenv import load_dotenv
from fastapi import FastAPI

from hustle.api.routes import router
from hustle.config import load_host_settings
from hustle.game_loop import run_game_loop
from hustle.session import build_game_context
from hustle.websocket_hub import GameWebSocketHub

load_dotenv(override=False)

app = FastAPI(title="office-hustle", version="0.1.0")
app.include_router(router)
# Configure logging
logging.basicConfig(level=os.environ.get("HUSTLE_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def _startup() -> None:
    settings = load_host_settings()
    logging.getLogger("hustle").setLevel(settings.log_level)

    hub = GameWebSocketHub()
    ctx = build_game_context(rng=random.Random(settings.seed))
    ctx.watch(lambda event: hub.publish(event.as_message()))

    app.state.settings = settings
    app.state.hub = hub
    app.state.game = ctx
    app.state.loop_task = None

    if settings.auto_tick:
        app.state.loop_task = asyncio.create_task(
            run_game_loop(ctx, tick_seconds=settings.tick_seconds, on_tick=hub.flush)
        )
    logger.info("office-hustle ready auto_tick=%s tick_seconds=%.3f", settings.auto_tick, settings.tick_seconds)


@app.on_event("shutdown")
async def _shutdown() -> None:
    task = getattr(app.state, "loop_task", None)
    if task is None:
        return
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "office-hustle", "version": "0.1.0"}
