from __future__ import annotations

import math
from enum import StrEnum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaskType(StrEnum):
    print_documents = "print_documents"
    deliver_package = "deliver_package"
    organize_files = "organize_files"
    attend_meeting = "attend_meeting"
    fix_computer = "fix_computer"
    make_coffee = "make_coffee"
    clean_desk = "clean_desk"
    answer_phone = "answer_phone"
    send_email = "send_email"
    photocopy_copies = "photocopy_copies"


class GamePhase(StrEnum):
    main_menu = "main_menu"
    playing = "playing"
    paused = "paused"
    game_over = "game_over"


class Vec3(BaseModel):
    """A point in office space. Only ever used for distance checks."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_to(self, other: Vec3) -> float:
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))


class Task(BaseModel):
    """One unit of work with a countdown.

    Owned by the task queue engine; everything handed to callers is a copy.
    """

    task_id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    description: str
    task_type: TaskType
    time_limit: float = Field(..., gt=0)
    time_remaining: float = Field(..., ge=0)

    # Who asked for it (cosmetic).
    assigned_by: str = ""
    location: Vec3 = Field(default_factory=Vec3)

    is_active: bool = False
    is_completed: bool = False

    @model_validator(mode="after")
    def _remaining_within_limit(self) -> Task:
        if self.time_remaining > self.time_limit:
            raise ValueError("time_remaining cannot exceed time_limit")
        return self

    @staticmethod
    def create(
        *,
        title: str,
        description: str,
        task_type: TaskType,
        time_limit: float,
        assigned_by: str = "",
        location: Vec3 | None = None,
    ) -> Task:
        return Task(
            title=title,
            description=description,
            task_type=task_type,
            time_limit=time_limit,
            time_remaining=time_limit,
            assigned_by=assigned_by,
            location=location or Vec3(),
        )

    def count_down(self, seconds: float) -> None:
        # Completed tasks are frozen; time never runs backwards.
        if self.is_completed or seconds <= 0:
            return
        self.time_remaining = max(0.0, self.time_remaining - seconds)

    def is_expired(self) -> bool:
        return self.time_remaining <= 0 and not self.is_completed

    def is_urgent(self, threshold: float = 30.0) -> bool:
        return self.time_remaining <= threshold

    def time_progress(self) -> float:
        return self.time_remaining / self.time_limit

    def formatted_time_remaining(self) -> str:
        minutes, seconds = divmod(int(self.time_remaining), 60)
        return f"{minutes:02d}:{seconds:02d}"


class GameSession(BaseModel):
    score: int = 0
    stress: float = 0.0
    phase: GamePhase = GamePhase.main_menu

    # Set when the session ends; cleared by start/restart.
    game_over_reason: str | None = None


class GameSnapshot(BaseModel):
    """Read-only view of the whole game for the presentation layer."""

    score: int
    stress: float
    phase: GamePhase
    game_over_reason: str | None = None

    active_task: Task | None = None
    pending_tasks: list[Task] = Field(default_factory=list)

    coffee_available: bool = True
    player_busy: bool = False
