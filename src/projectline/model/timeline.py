# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from projectline.model.task import Task, TaskStatus


class TimelineSortOption(StrEnum):
    START_DATE = "start_date"
    DUE_DATE = "due_date"
    PRIORITY = "priority"
    STATUS = "status"
    TITLE = "title"


class DateRange(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime


class TimelineFilter(TypedDict):
    statuses: set[TaskStatus]
    assigned_to_me: bool
    due_date_range: Optional[DateRange]


class TimelineSort(TypedDict):
    option: TimelineSortOption
    ascending: bool


class Span(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    days_to_show: int


class TimelineViewport(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    days_to_show: int
    zoom_level: float


class TimelineState(TypedDict):
    visible_tasks: list[Task]
    viewport: TimelineViewport
    filter: TimelineFilter
    sort: TimelineSort
    is_loading: bool
    error: Optional[str]
