# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from projectline.view.view.views.header import header


def projects_view(projects: list[str]) -> None:
    header("all projects", "projects")

    projects_table = Table(box=box.SIMPLE)
    projects_table.add_column("project")

    for project in projects:
        projects_table.add_row(project)

    console = Console()
    console.print(projects_table)
