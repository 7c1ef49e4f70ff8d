# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from projectline.model.task import Task
from projectline.time import datetime_to_display_local_date_str_optional
from projectline.view.view.views.header import header


def tasks_view(
    project: str,
    tasks: list[Task],
    columns: list[str] = [
        "id",
        "title",
        "status",
        "priority",
        "start_date",
        "due_date",
        "assigned_to",
    ],
) -> None:
    header(project, "tasks")

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(task["id"])[:8]
            elif column == "assigned_to":
                column_value = ", ".join(task["assigned_to"])
            elif column in ("start_date", "due_date"):
                column_value = (
                    datetime_to_display_local_date_str_optional(task[column])  # type: ignore[literal-required]
                    or ""
                )
            elif task[column] is not None:  # type: ignore[literal-required]
                column_value = str(task[column])  # type: ignore[literal-required]
            row.append(column_value)
        tasks_table.add_row(*row)

    console = Console()
    console.print(tasks_table)
