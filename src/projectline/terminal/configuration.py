# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from projectline import configuration
from projectline.model.timeline import TimelineSortOption
from projectline.repository.configuration import CONFIGURATION_REPO
from projectline.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, v")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("current_user_id", config["current_user_id"] or "None")
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_sort_option", config["default_sort_option"])
    table.add_row(
        "default_sort_ascending",
        "✓ Enabled" if config["default_sort_ascending"] else "✗ Disabled",
    )
    table.add_row(
        "sort_title_ignore_case",
        "✓ Enabled" if config.get("sort_title_ignore_case", False) else "✗ Disabled",
    )

    console.print(table)


@app.command("set, s")
def set(
    user_id: Annotated[
        Optional[str],
        typer.Option("--user-id", help="Your user id, used by timeline --mine"),
    ] = None,
    remove_user_id: Annotated[
        bool, typer.Option("--remove-user-id", help="Forget the configured user id")
    ] = False,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding projects and tasks"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-header", help="Print the report header"),
    ] = None,
    sort: Annotated[
        Optional[TimelineSortOption],
        typer.Option("--sort", case_sensitive=False, help="Default timeline sort"),
    ] = None,
    ascending: Annotated[
        Optional[bool],
        typer.Option(
            "--ascending/--descending", help="Default timeline sort direction"
        ),
    ] = None,
    title_ignore_case: Annotated[
        Optional[bool],
        typer.Option(
            "--title-ignore-case/--title-case-sensitive",
            help="Compare titles case-insensitively when sorting by title",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if user_id is not None and remove_user_id:
        raise typer.BadParameter("Use either --user-id or --remove-user-id")
    if data_path is not None and remove_data_path:
        raise typer.BadParameter("Use either --data-path or --remove-data-path")

    CONFIGURATION_REPO.update_config(
        current_user_id=user_id,
        remove_current_user_id=remove_user_id,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        default_sort_option=sort,
        default_sort_ascending=ascending,
        sort_title_ignore_case=title_ignore_case,
    )
    show()
