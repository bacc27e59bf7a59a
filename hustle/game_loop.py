from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from hustle.session import GameContext

logger = logging.getLogger(__name__)


async def run_game_loop(
    ctx: GameContext,
    *,
    tick_seconds: float,
    max_delta: float = 0.25,
    on_tick: Callable[[], Awaitable[object]] | None = None,
    stop: asyncio.Event | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Drive `ctx.tick` with measured wall-clock deltas until `stop` is set.

    Deltas are capped at `max_delta` so a stalled host doesn't fail every task at once.
    Ticks never overlap: each one runs to completion before the next sleep.
    To stop the loop, set `stop` or cancel the task.
    """

    last = clock()
    while stop is None or not stop.is_set():
        await asyncio.sleep(tick_seconds)

        now = clock()
        delta = min(max(0.0, now - last), max_delta)
        last = now

        try:
            ctx.tick(delta)
        except Exception:
            logger.exception("game tick failed delta=%.4f", delta)

        if on_tick is not None:
            await on_tick()
