# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from projectline.model.task import TaskStatus
from projectline.model.timeline import (
    TimelineFilter,
    TimelineSort,
    TimelineSortOption,
    TimelineState,
    TimelineViewport,
)
from projectline.time import now_utc

DEFAULT_DAYS_TO_SHOW = 30
DEFAULT_ZOOM_LEVEL = 1.0


def get_timeline_filter_template() -> TimelineFilter:
    return {
        "statuses": set(TaskStatus),
        "assigned_to_me": False,
        "due_date_range": None,
    }


def get_timeline_sort_template() -> TimelineSort:
    return {
        "option": TimelineSortOption.START_DATE,
        "ascending": True,
    }


def get_timeline_viewport_template(
    now: Optional[pendulum.DateTime] = None,
) -> TimelineViewport:
    if now is None:
        now = now_utc()
    return {
        "start": now,
        "end": now,
        "days_to_show": DEFAULT_DAYS_TO_SHOW,
        "zoom_level": DEFAULT_ZOOM_LEVEL,
    }


def get_timeline_state_template(
    now: Optional[pendulum.DateTime] = None,
) -> TimelineState:
    return {
        "visible_tasks": [],
        "viewport": get_timeline_viewport_template(now),
        "filter": get_timeline_filter_template(),
        "sort": get_timeline_sort_template(),
        "is_loading": False,
        "error": None,
    }
