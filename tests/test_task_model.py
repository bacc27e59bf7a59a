from __future__ import annotations

import pytest
from pydantic import ValidationError

from hustle.core.models import Task, TaskType, Vec3


def _task(limit: float = 90.0) -> Task:
    return Task.create(
        title="Print Reports",
        description="Print the quarterly reports ASAP!",
        task_type=TaskType.print_documents,
        time_limit=limit,
        assigned_by="Boss Karen",
        location=Vec3(x=1.0, y=0.0, z=2.0),
    )


def test_create_starts_full_and_inactive() -> None:
    task = _task()
    assert task.time_remaining == task.time_limit == 90.0
    assert not task.is_active
    assert not task.is_completed
    assert task.task_id
    assert task.task_id != _task().task_id


def test_count_down_floors_at_zero_and_expires() -> None:
    task = _task(10.0)
    task.count_down(4.0)
    assert task.time_remaining == pytest.approx(6.0)
    assert not task.is_expired()

    task.count_down(100.0)
    assert task.time_remaining == 0.0
    assert task.is_expired()


def test_completed_task_never_expires_or_counts_down() -> None:
    task = _task(10.0)
    task.is_completed = True
    task.count_down(50.0)
    assert task.time_remaining == 10.0

    task.time_remaining = 0.0
    assert not task.is_expired()


def test_time_limit_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        _task(0.0)


def test_display_helpers() -> None:
    task = _task(120.0)
    assert task.formatted_time_remaining() == "02:00"
    assert task.time_progress() == pytest.approx(1.0)
    assert not task.is_urgent()

    task.count_down(95.5)
    assert task.formatted_time_remaining() == "00:24"
    assert task.time_progress() == pytest.approx(24.5 / 120.0)
    assert task.is_urgent()
    assert not task.is_urgent(threshold=10.0)


def test_vec3_distance() -> None:
    assert Vec3(x=0, y=0, z=0).distance_to(Vec3(x=3, y=4, z=0)) == pytest.approx(5.0)


def test_time_never_runs_backwards() -> None:
    task = _task(10.0)
    task.count_down(4.0)
    task.count_down(-5.0)
    task.count_down(0.0)
    assert task.time_remaining == pytest.approx(6.0)


def test_remaining_cannot_exceed_limit() -> None:
    with pytest.raises(ValidationError):
        Task(
            title="Print Reports",
            description="Print the quarterly reports ASAP!",
            task_type=TaskType.print_documents,
            time_limit=10.0,
            time_remaining=15.0,
        )
