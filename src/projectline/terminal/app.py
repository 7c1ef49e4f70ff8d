# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from projectline import configuration
from projectline.logging_setup import setup_logging
from projectline.terminal import configuration as configuration_commands
from projectline.terminal import project, task, timeline
from projectline.terminal.custom_typer import AliasedTyperGroup
from projectline.view.view.views.header import set_show_header

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="projectline - Project task timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(project.app, name="project, p")
app.add_typer(task.app, name="task, t")
app.add_typer(timeline.app, name="timeline, tl")
app.add_typer(configuration_commands.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-vb", help="Log debug output to the console"),
    ] = False,
) -> None:
    """
    projectline - Project task timelines in the CLI

    Global options that apply to all commands.
    """
    setup_logging(
        configuration.LOG_PATH,
        console_level=logging.DEBUG if verbose else logging.WARNING,
    )
    if no_header:
        set_show_header(False)


def run() -> None:
    app()
