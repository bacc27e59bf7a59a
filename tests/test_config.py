from __future__ import annotations

import pytest

from hustle.config import QueueRules, load_host_settings


def test_host_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUSTLE_TICK_SECONDS", "0.05")
    monkeypatch.setenv("HUSTLE_AUTO_TICK", "no")
    monkeypatch.setenv("HUSTLE_SEED", "42")
    monkeypatch.setenv("HUSTLE_LOG_LEVEL", "debug")

    settings = load_host_settings()
    assert settings.tick_seconds == pytest.approx(0.05)
    assert settings.auto_tick is False
    assert settings.seed == 42
    assert settings.log_level == "DEBUG"


def test_host_settings_fall_back_on_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUSTLE_TICK_SECONDS", "fast")
    monkeypatch.setenv("HUSTLE_SEED", "")
    monkeypatch.delenv("HUSTLE_AUTO_TICK", raising=False)
    monkeypatch.delenv("HUSTLE_LOG_LEVEL", raising=False)

    settings = load_host_settings()
    assert settings.tick_seconds == pytest.approx(1 / 30)
    assert settings.auto_tick is True
    assert settings.seed is None
    assert settings.log_level == "INFO"


def test_tick_seconds_has_a_floor(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUSTLE_TICK_SECONDS", "0")
    assert load_host_settings().tick_seconds == pytest.approx(0.005)


def test_queue_rules_are_validated() -> None:
    with pytest.raises(ValueError):
        QueueRules(min_task_interval=20.0, max_task_interval=10.0)
    with pytest.raises(ValueError):
        QueueRules(max_queue_size=0)
    with pytest.raises(ValueError):
        QueueRules(task_locations=())
