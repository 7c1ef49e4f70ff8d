# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from projectline.model.entity_id import EntityId


class TaskStatus(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"
    BLOCKED = "blocked"
    CANCELLED = "cancelled"


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# Sort ranks are fixed here so reordering the enums never changes sort order
STATUS_RANK: dict[TaskStatus, int] = {
    TaskStatus.TODO: 0,
    TaskStatus.IN_PROGRESS: 1,
    TaskStatus.REVIEW: 2,
    TaskStatus.COMPLETED: 3,
    TaskStatus.BLOCKED: 4,
    TaskStatus.CANCELLED: 5,
}

PRIORITY_RANK: dict[Priority, int] = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.URGENT: 3,
}


class Task(TypedDict):
    id: Optional[EntityId]
    project_id: EntityId
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: Priority
    assigned_to: list[str]
    start_date: Optional[pendulum.DateTime]
    due_date: Optional[pendulum.DateTime]
    created: pendulum.DateTime
    updated: pendulum.DateTime
