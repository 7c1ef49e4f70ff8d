# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from projectline.model.task import Task, TaskStatus
from projectline.model.timeline import DateRange, TimelineFilter


def generate_filter(
    timeline_filter: TimelineFilter, current_user_id: Optional[str]
) -> "Predicate":
    predicate = And()
    predicate.add_predicate(StatusIn(timeline_filter["statuses"]))
    if timeline_filter["assigned_to_me"]:
        predicate.add_predicate(AssignedTo(current_user_id))
    if timeline_filter["due_date_range"] is not None:
        predicate.add_predicate(DueWithin(timeline_filter["due_date_range"]))
    return predicate


def matches(
    task: Task, timeline_filter: TimelineFilter, current_user_id: Optional[str]
) -> bool:
    return generate_filter(timeline_filter, current_user_id).include(task)


def filter_tasks(
    tasks: list[Task], timeline_filter: TimelineFilter, current_user_id: Optional[str]
) -> list[Task]:
    return generate_filter(timeline_filter, current_user_id).filter(tasks)


class Predicate(ABC):
    @abstractmethod
    def include(self, task: Task) -> bool: ...

    def filter(self, tasks: list[Task]) -> list[Task]:
        return [task for task in tasks if self.include(task)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, task: Task) -> bool:
        return all(predicate.include(task) for predicate in self.predicates)


class StatusIn(Predicate):
    def __init__(self, statuses: set[TaskStatus]) -> None:
        self.statuses = statuses

    def include(self, task: Task) -> bool:
        return task["status"] in self.statuses


class AssignedTo(Predicate):
    def __init__(self, user_id: Optional[str]) -> None:
        self.user_id = user_id

    def include(self, task: Task) -> bool:
        if self.user_id is None:
            return False
        return self.user_id in task["assigned_to"]


class DueWithin(Predicate):
    """Inclusive on both ends. Tasks without a due date never match."""

    def __init__(self, date_range: DateRange) -> None:
        self.date_range = date_range

    def include(self, task: Task) -> bool:
        due_date = task["due_date"]
        if due_date is None:
            return False
        return self.date_range["start"] <= due_date <= self.date_range["end"]
