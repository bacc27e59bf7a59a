from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from hustle.config import GameRules
from hustle.core.events import Signal
from hustle.core.models import GamePhase, GameSession
from hustle.fsm import try_transition

logger = logging.getLogger(__name__)

MAX_STRESS = 100.0


class GameOverReason(StrEnum):
    fired = "Your performance score hit rock bottom! You're fired!"
    stress_overload = "Stress overload! You had a mental breakdown and quit!"
    promotion = "Congratulations! You're promoted to Senior Office Hustler!"
    task_overflow = "Task overflow! You couldn't keep up with the workload!"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class GameStateEngine:
    """Owns score, stress and the game phase; decides when the game ends.

    Invalid calls (pausing from the menu, resuming while playing, ...) are
    silent no-ops that return False.
    """

    def __init__(self, rules: GameRules | None = None, *, workload: Callable[[], int] | None = None) -> None:
        self.rules = rules or GameRules()
        self.session = GameSession(score=self.rules.starting_score)
        self._workload = workload

        self.score_changed = Signal("score_changed")
        self.stress_changed = Signal("stress_changed")
        self.state_changed = Signal("state_changed")
        self.game_over = Signal("game_over")

    @property
    def signals(self) -> tuple[Signal, ...]:
        return (self.score_changed, self.stress_changed, self.state_changed, self.game_over)

    def bind_workload(self, workload: Callable[[], int]) -> None:
        """Set the callable counting queued + active tasks for the overflow check."""

        self._workload = workload

    # ---- queries ----

    def current_score(self) -> int:
        return self.session.score

    def current_stress(self) -> float:
        return self.session.stress

    def current_state(self) -> GamePhase:
        return self.session.phase

    @property
    def is_playing(self) -> bool:
        return self.session.phase == GamePhase.playing

    # ---- phase control ----

    def start_game(self) -> bool:
        self.session.score = self.rules.starting_score
        self.session.stress = 0.0
        self.session.game_over_reason = None
        try_transition(self.session, "start_game")

        logger.info("game started score=%s", self.session.score)
        self.score_changed.emit(self.session.score)
        self.stress_changed.emit(self.session.stress)
        self.state_changed.emit(self.session.phase)
        return True

    def restart_game(self) -> bool:
        return self.start_game()

    def pause(self) -> bool:
        return self._move("pause_game")

    def resume(self) -> bool:
        return self._move("resume_game")

    def toggle_pause(self) -> bool:
        if self.session.phase == GamePhase.playing:
            return self.pause()
        if self.session.phase == GamePhase.paused:
            return self.resume()
        return False

    def return_to_main_menu(self) -> bool:
        return self._move("leave_to_menu")

    def set_state(self, phase: GamePhase) -> None:
        """Jump straight to `phase` (menu navigation); no guards, always notifies."""

        self.session.phase = GamePhase(phase)
        self.state_changed.emit(self.session.phase)

    def _move(self, event: str) -> bool:
        if not try_transition(self.session, event):
            return False
        logger.info("phase -> %s", self.session.phase.value)
        self.state_changed.emit(self.session.phase)
        return True

    # ---- time ----

    def tick(self, delta: float) -> bool:
        if delta <= 0 or not self.is_playing:
            return False

        self._set_stress(self.session.stress + self.rules.stress_increase_rate * delta)
        self._check_game_over()
        return True

    def _check_game_over(self) -> None:
        if self.session.stress >= MAX_STRESS:
            self._end(GameOverReason.stress_overload)
        elif self.session.score >= self.rules.max_score:
            self._end(GameOverReason.promotion)
        elif self._workload is not None and self._workload() > self.rules.max_outstanding_tasks:
            self._end(GameOverReason.task_overflow)

    def _end(self, reason: GameOverReason) -> bool:
        if not try_transition(self.session, "end_game"):
            return False

        self.session.game_over_reason = reason.value
        logger.info("game over reason=%s score=%s", reason.name, self.session.score)
        self.state_changed.emit(self.session.phase)
        self.game_over.emit(reason.value, self.session.score)
        return True

    # ---- score / stress ----

    def modify_score(self, delta: int) -> None:
        self.session.score = int(_clamp(self.session.score + int(delta), 0, self.rules.max_score))
        self.score_changed.emit(self.session.score)

        # Checked immediately, not on the next tick.
        if self.session.score <= 0:
            self._end(GameOverReason.fired)

    def modify_stress(self, delta: float) -> None:
        self._set_stress(self.session.stress + delta)

    def _set_stress(self, value: float) -> None:
        self.session.stress = _clamp(float(value), 0.0, MAX_STRESS)
        self.stress_changed.emit(self.session.stress)

    def report_task_outcome(self, on_time: bool) -> None:
        if on_time:
            self.modify_score(self.rules.score_per_completed_task)
            self.session.stress = max(0.0, self.session.stress - self.rules.on_time_stress_relief)
        else:
            self.modify_score(self.rules.score_per_failed_task)
            self.session.stress = min(MAX_STRESS, self.session.stress + self.rules.failed_task_stress)
        self.stress_changed.emit(self.session.stress)

    def report_decline(self) -> None:
        self.modify_score(self.rules.score_per_declined_task)
        self.session.stress = min(MAX_STRESS, self.session.stress + self.rules.declined_task_stress)
        self.stress_changed.emit(self.session.stress)

    def consume_coffee(self) -> None:
        self.session.stress = max(0.0, self.session.stress - self.rules.coffee_boost_amount)
        self.stress_changed.emit(self.session.stress)
        self.modify_score(self.rules.coffee_score_bonus)
