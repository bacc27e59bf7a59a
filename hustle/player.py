from __future__ import annotations

import random
from collections.abc import Sequence

from hustle.config import InteractableRules
from hustle.core.events import Signal
from hustle.core.models import Vec3
from hustle.core.scheduler import Scheduler, Timer
from hustle.interactables import Interactable
from hustle.task_queue import TaskQueueEngine


class PlayerAgent:
    """The player's "use" button.

    Interacting near a machine uses the machine; otherwise, standing at the
    active task's location starts performing it. Performing takes a few
    seconds of game time, during which the host should lock movement.
    """

    def __init__(
        self,
        tasks: TaskQueueEngine,
        scheduler: Scheduler,
        rules: InteractableRules | None = None,
        *,
        interactables: Sequence[Interactable] = (),
        rng: random.Random | None = None,
    ) -> None:
        self.tasks = tasks
        self.scheduler = scheduler
        self.rules = rules or InteractableRules()
        self.interactables = list(interactables)
        self.rng = rng or random.Random()

        self.performing_task_id: str | None = None
        self._perform_timer: Timer | None = None

        self.performance_started = Signal("task_performance_started")

    @property
    def busy(self) -> bool:
        return self.performing_task_id is not None

    def nearest_interactable(self, position: Vec3) -> Interactable | None:
        for item in self.interactables:
            if item.position.distance_to(position) <= self.rules.interaction_range:
                return item
        return None

    def interact(self, position: Vec3) -> bool:
        if not self.tasks.game.is_playing or self.busy:
            return False

        item = self.nearest_interactable(position)
        if item is not None:
            return item.interact()

        if self.tasks.is_near(position, self.rules.interaction_range):
            return self.perform_current_task()
        return False

    def perform_current_task(self) -> bool:
        if self.busy:
            return False
        task = self.tasks.active_task()
        if task is None:
            return False

        duration = self.rng.uniform(self.rules.min_perform_seconds, self.rules.max_perform_seconds)
        self.performing_task_id = task.task_id
        self._perform_timer = self.scheduler.schedule(duration, self._finish, label=f"perform:{task.task_id}")
        self.performance_started.emit(task, duration)
        return True

    def _finish(self) -> None:
        task_id = self.performing_task_id
        self.performing_task_id = None
        self._perform_timer = None
        if task_id is not None:
            # No-op if the task failed (or was replaced) while we were busy.
            self.tasks.complete(task_id)

    def reset(self) -> None:
        if self._perform_timer is not None:
            self.scheduler.cancel(self._perform_timer)
        self.performing_task_id = None
        self._perform_timer = None
