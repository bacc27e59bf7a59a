from __future__ import annotations

import random

from hustle.catalog import FALLBACK_SPEC, TASK_SPECS, describe, draw_time_limit
from hustle.core.models import TaskType


def test_every_task_type_has_a_catalog_entry() -> None:
    assert set(TASK_SPECS) == set(TaskType)
    for task_type in TaskType:
        spec = describe(task_type)
        low, high = spec.time_limit_range
        assert spec.title and spec.description
        assert 0 < low <= high


def test_known_entries_match_table() -> None:
    call = describe(TaskType.answer_phone)
    assert call.title == "Important Call"
    assert call.time_limit_range == (20.0, 40.0)

    it = describe("fix_computer")
    assert it.title == "IT Support"
    assert it.description == "My computer is frozen again!"


def test_unknown_type_falls_back_to_mystery_task() -> None:
    spec = describe("water_plants")
    assert spec is FALLBACK_SPEC
    assert spec.title == "Mystery Task"
    assert spec.description == "Do something productive!"
    assert spec.time_limit_range == (60.0, 60.0)


def test_draw_time_limit_stays_in_range() -> None:
    rng = random.Random(7)
    spec = describe(TaskType.organize_files)
    for _ in range(200):
        assert 90.0 <= draw_time_limit(spec, rng) <= 150.0

    assert draw_time_limit(FALLBACK_SPEC, rng) == 60.0
