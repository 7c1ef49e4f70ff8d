# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from projectline.color import COMPLETED_TASK_COLOR, PRIORITY_COLORS
from projectline.model.task import Task, TaskStatus
from projectline.model.timeline import TimelineState, TimelineViewport
from projectline.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_date_str_optional,
)
from projectline.view.view.views.header import header

BAR_SYMBOL = "█"
EMPTY_SYMBOL = "·"


def timeline_view(project: str, state: TimelineState) -> None:
    header(project, "timeline")

    console = Console()

    if state["error"] is not None:
        console.print(f"\n[red]{state['error']}[/red]\n")
        return

    viewport = state["viewport"]
    console.print(
        f" [dim]{datetime_to_display_local_date_str(viewport['start'])}"
        f" → {datetime_to_display_local_date_str(viewport['end'])}"
        f" | {viewport['days_to_show']} days"
        f" | zoom {viewport['zoom_level']:.2f}"
        f" | sort {state['sort']['option']}"
        f" {'asc' if state['sort']['ascending'] else 'desc'}[/dim]"
    )

    if len(state["visible_tasks"]) == 0:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    timeline_table = Table(box=box.SIMPLE)
    timeline_table.add_column("title")
    timeline_table.add_column("status")
    timeline_table.add_column("priority")
    timeline_table.add_column("start")
    timeline_table.add_column("due")
    timeline_table.add_column("assigned")
    timeline_table.add_column("timeline", no_wrap=True)

    for task in state["visible_tasks"]:
        row = [
            task["title"],
            str(task["status"]),
            f"[{PRIORITY_COLORS[task['priority']]}]{task['priority']}[/{PRIORITY_COLORS[task['priority']]}]",
            datetime_to_display_local_date_str_optional(task["start_date"]) or "",
            datetime_to_display_local_date_str_optional(task["due_date"]) or "",
            ", ".join(task["assigned_to"]),
            build_bar(task, viewport),
        ]
        if task["status"] in (TaskStatus.COMPLETED, TaskStatus.CANCELLED):
            row = [
                f"[{COMPLETED_TASK_COLOR}]{value}[/{COMPLETED_TASK_COLOR}]"
                for value in row
            ]
        timeline_table.add_row(*row)

    console.print(timeline_table)


def build_bar(task: Task, viewport: TimelineViewport) -> str:
    """
    One character per day of the viewport, filled where the task is active.

    A task with only one of its dates set is drawn on that single day.
    """
    bar_start: Optional[pendulum.DateTime] = task["start_date"] or task["due_date"]
    bar_end: Optional[pendulum.DateTime] = task["due_date"] or task["start_date"]
    if bar_start is None or bar_end is None:
        return EMPTY_SYMBOL * viewport["days_to_show"]

    first_day = viewport["start"].in_tz("local").start_of("day")
    task_start = bar_start.in_tz("local").start_of("day")
    task_end = bar_end.in_tz("local").start_of("day")

    symbols = []
    for offset in range(viewport["days_to_show"]):
        day = first_day.add(days=offset)
        symbols.append(BAR_SYMBOL if task_start <= day <= task_end else EMPTY_SYMBOL)
    return "".join(symbols)
