# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from rich import print
from rich.padding import Padding

# Toggled by `--no-header` and the `show_header` config key
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def header(project: str, sub_header: Optional[str] = None) -> None:
    """Print the application banner above a listing, unless headers are turned off."""
    if not _show_header.get():
        return

    lines = ["[dark_orange]projectline[/dark_orange]"]
    if sub_header is not None:
        lines.append(f" [sandy_brown]{sub_header}[/sandy_brown]")
    lines.append(f" [plum1]{project}[/plum1]")

    print(Padding("\n".join(lines), (1, 0, 0, 1)))
