from __future__ import annotations

import os
from dataclasses import dataclass, field

from hustle.core.models import Vec3

DEFAULT_EMPLOYEE_NAMES: tuple[str, ...] = (
    "Boss Karen",
    "Manager Bob",
    "HR Susan",
    "IT Mike",
    "Accountant Sarah",
    "Intern Tim",
    "Designer Lisa",
    "Developer John",
)

# Desks, printer, reception and meeting room of the default office floor.
DEFAULT_TASK_LOCATIONS: tuple[Vec3, ...] = (
    Vec3(x=-8.0, y=0.0, z=4.0),
    Vec3(x=-8.0, y=0.0, z=-4.0),
    Vec3(x=0.0, y=0.0, z=9.0),
    Vec3(x=6.0, y=0.0, z=6.0),
    Vec3(x=10.0, y=0.0, z=-2.0),
    Vec3(x=3.0, y=0.0, z=-9.0),
)


@dataclass(frozen=True, slots=True)
class GameRules:
    starting_score: int = 50
    max_score: int = 100

    score_per_completed_task: int = 10
    score_per_failed_task: int = -15
    score_per_declined_task: int = -5

    # Stress per second while playing.
    stress_increase_rate: float = 0.1
    on_time_stress_relief: float = 5.0
    failed_task_stress: float = 10.0
    declined_task_stress: float = 5.0

    coffee_boost_amount: float = 20.0
    coffee_score_bonus: int = 5

    # Queued + active tasks above this end the game.
    max_outstanding_tasks: int = 10

    def __post_init__(self) -> None:
        if self.max_score <= 0:
            raise ValueError("max_score must be positive")
        if not 0 < self.starting_score <= self.max_score:
            raise ValueError("starting_score must be within (0, max_score]")


@dataclass(frozen=True, slots=True)
class QueueRules:
    min_task_interval: float = 5.0
    max_task_interval: float = 15.0
    max_queue_size: int = 15

    # Queued tasks lose time slower than the active one.
    queued_decay_factor: float = 0.3
    task_proximity: float = 2.0

    employee_names: tuple[str, ...] = DEFAULT_EMPLOYEE_NAMES
    task_locations: tuple[Vec3, ...] = DEFAULT_TASK_LOCATIONS

    def __post_init__(self) -> None:
        if self.min_task_interval < 0 or self.min_task_interval > self.max_task_interval:
            raise ValueError("task interval must satisfy 0 <= min <= max")
        if self.max_queue_size < 1:
            raise ValueError("max_queue_size must be at least 1")
        if not self.employee_names:
            raise ValueError("employee_names must not be empty")
        if not self.task_locations:
            raise ValueError("task_locations must not be empty")


@dataclass(frozen=True, slots=True)
class InteractableRules:
    coffee_brew_seconds: float = 2.0
    coffee_cooldown_seconds: float = 30.0
    coffee_machine_position: Vec3 = Vec3(x=-4.0, y=0.0, z=8.0)

    drink_cost: int = 5
    energy_boost: float = 15.0
    vending_machine_position: Vec3 = Vec3(x=8.0, y=0.0, z=8.0)

    interaction_range: float = 2.0
    min_perform_seconds: float = 2.0
    max_perform_seconds: float = 4.0


@dataclass(frozen=True, slots=True)
class HustleConfig:
    game: GameRules = field(default_factory=GameRules)
    queue: QueueRules = field(default_factory=QueueRules)
    interactables: InteractableRules = field(default_factory=InteractableRules)


@dataclass(frozen=True, slots=True)
class HostSettings:
    tick_seconds: float
    auto_tick: bool
    seed: int | None
    log_level: str


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def load_host_settings() -> HostSettings:
    return HostSettings(
        tick_seconds=max(0.005, _env_float("HUSTLE_TICK_SECONDS", 1 / 30)),
        auto_tick=_env_bool("HUSTLE_AUTO_TICK", True),
        seed=_env_int("HUSTLE_SEED"),
        log_level=os.environ.get("HUSTLE_LOG_LEVEL", "INFO").upper(),
    )
