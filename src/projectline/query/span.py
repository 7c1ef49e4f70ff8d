# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from projectline.model.task import Task
from projectline.model.timeline import Span
from projectline.time import now_utc, whole_days_between

MIN_DAYS_TO_SHOW = 7
MAX_DAYS_TO_SHOW = 90


def clamp_days_to_show(days: int) -> int:
    return max(MIN_DAYS_TO_SHOW, min(days, MAX_DAYS_TO_SHOW))


def compute_span(tasks: list[Task], now: Optional[pendulum.DateTime] = None) -> Span:
    if now is None:
        now = now_utc()

    start_dates = [task["start_date"] for task in tasks if task["start_date"] is not None]
    due_dates = [task["due_date"] for task in tasks if task["due_date"] is not None]

    start = min(start_dates) if start_dates else now
    end = max(due_dates) if due_dates else now

    return {
        "start": start,
        "end": end,
        "days_to_show": clamp_days_to_show(whole_days_between(start, end)),
    }
