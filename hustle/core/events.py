from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Observer = Callable[..., None]

EventType = Literal[
    "score_changed",
    "stress_changed",
    "state_changed",
    "game_over",
    "task_added",
    "task_accepted",
    "task_declined",
    "task_completed",
    "task_failed",
    "queue_updated",
    "coffee_brew_started",
    "coffee_served",
    "task_performance_started",
]


class Signal:
    """Named observer list owned by an engine.

    Contract:
      - observers run synchronously, in subscription order.
      - an observer that raises is logged and skipped; the emitting operation carries on.
      - nothing is buffered, so late subscribers miss earlier emissions.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: list[Observer] = []

    def __len__(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: Observer) -> Observer:
        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: Observer) -> bool:
        if observer not in self._observers:
            return False
        self._observers.remove(observer)
        return True

    def emit(self, *args: Any) -> None:
        # Snapshot so observers may (un)subscribe while we iterate.
        for observer in list(self._observers):
            try:
                observer(*args)
            except Exception:
                logger.exception("observer failed signal=%s observer=%r", self.name, observer)


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, str | int | float | bool) or value is None:
        return value
    return str(value)


# Positional argument names per signal, used to build event payloads.
_PAYLOAD_KEYS: dict[str, tuple[str, ...]] = {
    "score_changed": ("score",),
    "stress_changed": ("stress",),
    "state_changed": ("phase",),
    "game_over": ("reason", "score"),
    "task_added": ("task",),
    "task_accepted": ("task",),
    "task_declined": ("task",),
    "task_completed": ("task",),
    "task_failed": ("task",),
    "queue_updated": (),
    "coffee_brew_started": (),
    "coffee_served": (),
    "task_performance_started": ("task", "duration"),
}


@dataclass(frozen=True, slots=True)
class GameEvent:
    type: EventType
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, payload: dict[str, Any]) -> "GameEvent":
        return GameEvent(type=type, payload=payload, ts=datetime.now(timezone.utc))

    @staticmethod
    def from_signal(name: EventType, args: tuple[Any, ...]) -> "GameEvent":
        keys = _PAYLOAD_KEYS.get(name, ())
        payload = {key: _jsonable(value) for key, value in zip(keys, args)}
        return GameEvent.now(type=name, payload=payload)

    def as_message(self) -> dict[str, Any]:
        return {"type": self.type, "ts": self.ts.isoformat(), **self.payload}
