from __future__ import annotations

import asyncio
import logging

import pytest

from hustle.game_loop import run_game_loop
from hustle.session import GameContext


def _fake_clock(*values: float):  # type: ignore[no-untyped-def]
    it = iter(values)
    return lambda: next(it)


@pytest.mark.asyncio
async def test_loop_ticks_with_capped_deltas(ctx: GameContext) -> None:
    stop = asyncio.Event()
    ticks: list[int] = []

    async def _on_tick() -> None:
        ticks.append(1)
        if len(ticks) == 3:
            stop.set()

    await run_game_loop(
        ctx,
        tick_seconds=0,
        on_tick=_on_tick,
        stop=stop,
        clock=_fake_clock(0.0, 0.1, 0.2, 10.0),
    )

    assert len(ticks) == 3
    # 0.1 + 0.1 + capped 0.25 seconds of drift.
    assert ctx.game.current_stress() == pytest.approx(0.045)


@pytest.mark.asyncio
async def test_loop_survives_a_failing_tick(caplog: pytest.LogCaptureFixture) -> None:
    class _Broken:
        def tick(self, delta: float) -> bool:
            raise RuntimeError("tick exploded")

    stop = asyncio.Event()
    ticks: list[int] = []

    async def _on_tick() -> None:
        ticks.append(1)
        if len(ticks) == 2:
            stop.set()

    with caplog.at_level(logging.ERROR, logger="hustle.game_loop"):
        await run_game_loop(
            _Broken(),  # type: ignore[arg-type]
            tick_seconds=0,
            on_tick=_on_tick,
            stop=stop,
            clock=_fake_clock(0.0, 0.05, 0.1),
        )

    assert len(ticks) == 2
    assert "game tick failed" in caplog.text
