# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from projectline.model.task import TaskStatus
from projectline.model.timeline import TimelineSortOption
from projectline.repository.configuration import CONFIGURATION_REPO
from projectline.repository.task import TASK_REPO
from projectline.service.timeline import TimelineStore
from projectline.template.timeline import get_timeline_filter_template
from projectline.terminal.completion import complete_project
from projectline.terminal.custom_typer import AliasedTyperGroup
from projectline.terminal.parse import end_of_day, parse_datetime
from projectline.view.view.views.timeline import timeline_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s", no_args_is_help=True)
def show(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    statuses: Annotated[
        Optional[list[TaskStatus]],
        typer.Option(
            "--status",
            "-s",
            case_sensitive=False,
            help="accepts multiple status options; defaults to every status",
        ),
    ] = None,
    mine: Annotated[
        bool, typer.Option("--mine", "-m", help="only tasks assigned to you")
    ] = False,
    due_from: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due-from", "-df", parser=parse_datetime),
    ] = None,
    due_to: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due-to", "-dt", parser=parse_datetime),
    ] = None,
    sort: Annotated[
        Optional[TimelineSortOption],
        typer.Option("--sort", "-o", case_sensitive=False),
    ] = None,
    descending: Annotated[
        Optional[bool], typer.Option("--descending/--ascending", "-d/-a")
    ] = None,
    zoom_in: Annotated[int, typer.Option("--zoom-in", "-zi", min=0)] = 0,
    zoom_out: Annotated[int, typer.Option("--zoom-out", "-zo", min=0)] = 0,
    today: Annotated[
        bool, typer.Option("--today", "-t", help="scroll the viewport to today")
    ] = False,
) -> None:
    if (due_from is None) != (due_to is None):
        raise typer.BadParameter("--due-from and --due-to must be given together")

    config = CONFIGURATION_REPO.get_config()
    if mine and config["current_user_id"] is None:
        raise typer.BadParameter(
            "--mine needs a user id, set one with: config set --user-id"
        )

    store = TimelineStore(
        current_user_id=config["current_user_id"],
        sort=CONFIGURATION_REPO.get_default_sort(),
        title_ignore_case=config.get("sort_title_ignore_case", False),
    )
    state = store.load_from(TASK_REPO, project)
    if state["error"] is not None:
        timeline_view(project, state)
        raise typer.Exit(code=1)

    timeline_filter = get_timeline_filter_template()
    if statuses:
        timeline_filter["statuses"] = set(statuses)
    timeline_filter["assigned_to_me"] = mine
    if due_from is not None and due_to is not None:
        timeline_filter["due_date_range"] = {
            "start": due_from,
            "end": end_of_day(due_to) or due_to,
        }
    state = store.update_filter(timeline_filter)

    if sort is not None or descending is not None:
        timeline_sort = state["sort"]
        if sort is not None:
            timeline_sort["option"] = sort
        if descending is not None:
            timeline_sort["ascending"] = not descending
        state = store.update_sort(timeline_sort)

    for _ in range(zoom_in):
        state = store.zoom_in()
    for _ in range(zoom_out):
        state = store.zoom_out()
    if today:
        state = store.scroll_to_today()

    timeline_view(project, state)
