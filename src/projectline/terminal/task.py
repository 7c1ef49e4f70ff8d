# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer

from projectline.model.task import Priority, TaskStatus
from projectline.repository.task import TASK_REPO
from projectline.template.task import get_task_template
from projectline.terminal.completion import complete_project
from projectline.terminal.custom_typer import AliasedTyperGroup
from projectline.terminal.parse import parse_datetime
from projectline.time import python_to_pendulum_utc_optional
from projectline.view.view.views import task as task_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    title: str,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    status: Annotated[
        TaskStatus, typer.Option("--status", "-s", case_sensitive=False)
    ] = TaskStatus.TODO,
    priority: Annotated[
        Priority, typer.Option("--priority", "-pr", case_sensitive=False)
    ] = Priority.MEDIUM,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-st",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, now, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--due",
            "-u",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, now, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    assignees: Annotated[
        Optional[list[str]],
        typer.Option("--assignee", "-as", help="accepts multiple assignee options"),
    ] = None,
) -> None:
    start_date = python_to_pendulum_utc_optional(start)
    due_date = python_to_pendulum_utc_optional(due)
    if start_date is not None and due_date is not None and due_date < start_date:
        raise typer.BadParameter("--due must not be before --start")

    task = get_task_template()
    task["project_id"] = project
    task["title"] = title
    task["description"] = description
    task["status"] = status
    task["priority"] = priority
    task["assigned_to"] = assignees if assignees is not None else []
    task["start_date"] = start_date
    task["due_date"] = due_date

    id = TASK_REPO.save_new_task(task)
    logger.info("added task %s to project %s", id, project)

    task_report.tasks_view(project, [TASK_REPO.get_task(id)])


@app.command("list, ls", no_args_is_help=True)
def list_tasks(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
) -> None:
    task_report.tasks_view(project, TASK_REPO.get_tasks_by_project(project))
