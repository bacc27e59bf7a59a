from __future__ import annotations

import random
from dataclasses import dataclass

from hustle.core.models import TaskType


@dataclass(frozen=True, slots=True)
class TaskSpec:
    title: str
    description: str
    time_limit_range: tuple[float, float]


TASK_SPECS: dict[TaskType, TaskSpec] = {
    TaskType.print_documents: TaskSpec("Print Reports", "Print the quarterly reports ASAP!", (60.0, 120.0)),
    TaskType.deliver_package: TaskSpec("Package Delivery", "Deliver this package to the reception", (45.0, 90.0)),
    TaskType.organize_files: TaskSpec("File Organization", "Sort these files alphabetically", (90.0, 150.0)),
    TaskType.attend_meeting: TaskSpec("Emergency Meeting", "Join the meeting room NOW!", (30.0, 60.0)),
    TaskType.fix_computer: TaskSpec("IT Support", "My computer is frozen again!", (120.0, 180.0)),
    TaskType.make_coffee: TaskSpec("Coffee Run", "We need coffee for the team meeting", (60.0, 90.0)),
    TaskType.clean_desk: TaskSpec("Clean Workspace", "The boss is coming, clean your desk!", (45.0, 75.0)),
    TaskType.answer_phone: TaskSpec("Important Call", "Answer the ringing phone immediately", (20.0, 40.0)),
    TaskType.send_email: TaskSpec("Urgent Email", "Send the report to the client NOW", (60.0, 100.0)),
    TaskType.photocopy_copies: TaskSpec("Make Copies", "We need 50 copies of this document", (90.0, 120.0)),
}

FALLBACK_SPEC = TaskSpec("Mystery Task", "Do something productive!", (60.0, 60.0))


def describe(task_type: TaskType | str) -> TaskSpec:
    """Look up title, description and time-limit range for a task type.

    Unknown types get the generic fallback instead of raising.
    """

    try:
        key = TaskType(task_type)
    except ValueError:
        return FALLBACK_SPEC
    return TASK_SPECS.get(key, FALLBACK_SPEC)


def draw_time_limit(spec: TaskSpec, rng: random.Random) -> float:
    low, high = spec.time_limit_range
    return rng.uniform(low, high)
