from __future__ import annotations

import os
import random
from collections.abc import Generator

import pytest

from hustle.config import HustleConfig, QueueRules
from hustle.game_engine import GameStateEngine
from hustle.session import GameContext, build_game_context

# The host reads these on startup; tests step time by hand.
os.environ.setdefault("HUSTLE_AUTO_TICK", "0")
os.environ.setdefault("HUSTLE_SEED", "1234")


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def quiet_config() -> HustleConfig:
    """Default rules, except the spawner never fires during a test."""

    return HustleConfig(queue=QueueRules(min_task_interval=10_000.0, max_task_interval=10_000.0))


@pytest.fixture()
def game() -> GameStateEngine:
    engine = GameStateEngine()
    engine.start_game()
    return engine


@pytest.fixture()
def ctx(quiet_config: HustleConfig, rng: random.Random) -> GameContext:
    context = build_game_context(quiet_config, rng=rng)
    context.start_game()
    return context


@pytest.fixture()
def client() -> Generator:
    from fastapi.testclient import TestClient

    from hustle.main import app

    with TestClient(app) as c:
        yield c
