from __future__ import annotations

import logging
import random

from hustle.catalog import describe, draw_time_limit
from hustle.config import QueueRules
from hustle.core.events import Signal
from hustle.core.models import Task, TaskType, Vec3
from hustle.game_engine import GameStateEngine

logger = logging.getLogger(__name__)


class TaskQueueEngine:
    """Pending queue + the single active task.

    Lifecycle per task: pending -> active -> completed | failed, or
    pending -> declined, or pending -> expired (dropped without penalty).
    Every terminal outcome removes the task; nothing is archived.

    Callers only ever receive copies of tasks; all mutation goes through here.
    """

    def __init__(
        self,
        game: GameStateEngine,
        rules: QueueRules | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.game = game
        self.rules = rules or QueueRules()
        self.rng = rng or random.Random()

        self._pending: list[Task] = []
        self._active: Task | None = None
        self._spawn_timer = self._draw_spawn_interval()

        self.task_added = Signal("task_added")
        self.task_accepted = Signal("task_accepted")
        self.task_declined = Signal("task_declined")
        self.task_completed = Signal("task_completed")
        self.task_failed = Signal("task_failed")
        self.queue_updated = Signal("queue_updated")

    @property
    def signals(self) -> tuple[Signal, ...]:
        return (
            self.task_added,
            self.task_accepted,
            self.task_declined,
            self.task_completed,
            self.task_failed,
            self.queue_updated,
        )

    @property
    def spawn_timer(self) -> float:
        return self._spawn_timer

    # ---- queries ----

    def pending_tasks(self) -> list[Task]:
        return [t.model_copy(deep=True) for t in self._pending]

    def pending_count(self) -> int:
        return len(self._pending)

    def outstanding_count(self) -> int:
        """Queued plus active; this is what the overflow rule counts."""

        return len(self._pending) + (1 if self._active is not None else 0)

    def active_task(self) -> Task | None:
        return self._active.model_copy(deep=True) if self._active is not None else None

    def is_near(self, point: Vec3, threshold: float | None = None) -> bool:
        if self._active is None:
            return False
        limit = self.rules.task_proximity if threshold is None else threshold
        return self._active.location.distance_to(point) <= limit

    # ---- generation ----

    def _draw_spawn_interval(self) -> float:
        return self.rng.uniform(self.rules.min_task_interval, self.rules.max_task_interval)

    def generate_task(self) -> Task:
        task_type = self.rng.choice(list(TaskType))
        spec = describe(task_type)
        return Task.create(
            title=spec.title,
            description=spec.description,
            task_type=task_type,
            time_limit=draw_time_limit(spec, self.rng),
            assigned_by=self.rng.choice(self.rules.employee_names),
            location=self.rng.choice(self.rules.task_locations),
        )

    def enqueue(self, task: Task) -> bool:
        """Append a task to the pending queue unless it is full."""

        if len(self._pending) >= self.rules.max_queue_size:
            return False

        task = task.model_copy(deep=True)
        task.is_active = False
        self._pending.append(task)
        logger.debug("task queued id=%s type=%s limit=%.1f", task.task_id, task.task_type.value, task.time_limit)

        self.task_added.emit(task.model_copy(deep=True))
        self.queue_updated.emit()
        return True

    # ---- time ----

    def tick(self, delta: float) -> bool:
        if delta <= 0 or not self.game.is_playing:
            return False

        self._tick_spawner(delta)
        self._tick_active(delta)
        self._tick_pending(delta)
        return True

    def _tick_spawner(self, delta: float) -> None:
        self._spawn_timer -= delta
        if self._spawn_timer > 0:
            return
        # At capacity: skip without re-arming, so we retry on the next tick.
        if len(self._pending) >= self.rules.max_queue_size:
            return
        self.enqueue(self.generate_task())
        self._spawn_timer = self._draw_spawn_interval()

    def _tick_active(self, delta: float) -> None:
        task = self._active
        if task is None:
            return
        task.count_down(delta)
        if task.is_expired():
            self._fail(task)

    def _tick_pending(self, delta: float) -> None:
        if not self._pending:
            return

        decay = delta * self.rules.queued_decay_factor
        for task in self._pending:
            task.count_down(decay)

        kept = [t for t in self._pending if not t.is_expired()]
        dropped = len(self._pending) - len(kept)
        if dropped:
            self._pending = kept
            logger.debug("dropped %d expired queued task(s)", dropped)
            self.queue_updated.emit()

    # ---- transitions ----

    def _index_of(self, task_id: str) -> int | None:
        # First match wins if ids ever collide.
        for idx, task in enumerate(self._pending):
            if task.task_id == task_id:
                return idx
        return None

    def accept(self, task_id: str) -> bool:
        if self._active is not None:
            return False
        idx = self._index_of(task_id)
        if idx is None:
            return False

        task = self._pending.pop(idx)
        task.is_active = True
        self._active = task

        self.task_accepted.emit(task.model_copy(deep=True))
        self.queue_updated.emit()
        return True

    def decline(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            return False

        task = self._pending.pop(idx)
        self.game.report_decline()

        self.task_declined.emit(task.model_copy(deep=True))
        self.queue_updated.emit()
        return True

    def complete(self, task_id: str | None = None) -> bool:
        """Finish the active task; `task_id`, when given, must match it."""

        task = self._active
        if task is None:
            return False
        if task_id is not None and task.task_id != task_id:
            return False

        task.is_completed = True
        on_time = task.time_remaining > 0
        self._active = None

        self.game.report_task_outcome(on_time)
        self.task_completed.emit(task.model_copy(deep=True))
        return True

    def _fail(self, task: Task) -> None:
        # Slot is cleared first so the failure can only ever fire once.
        self._active = None
        logger.debug("task failed id=%s", task.task_id)

        self.game.report_task_outcome(False)
        self.task_failed.emit(task.model_copy(deep=True))

    def reset(self) -> None:
        self._pending.clear()
        self._active = None
        self._spawn_timer = self._draw_spawn_interval()
        self.queue_updated.emit()
