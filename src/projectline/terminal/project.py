# SPDX-License-Identifier: MIT

import typer
from rich import print

from projectline.repository.project import PROJECT_REPO
from projectline.terminal.custom_typer import AliasedTyperGroup
from projectline.view.view.views.project import projects_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(name: str) -> None:
    if not PROJECT_REPO.add_project(name):
        print(f"[yellow]project {name} already exists[/yellow]")
    projects_view(PROJECT_REPO.get_all_projects())


@app.command("list, ls")
def list_projects() -> None:
    projects_view(PROJECT_REPO.get_all_projects())
