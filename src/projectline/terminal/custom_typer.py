# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

# Top-level groups in help output; anything unlisted follows in registration order
COMMAND_ORDER = ("project, p", "task, t", "timeline, tl", "config, c")


def split_aliases(name: str) -> list[str]:
    return [alias for alias in _ALIAS_SEPARATOR.split(name) if alias]


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as "name, alias, ..." and resolve by any alias."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered_name in self.commands:
            if cmd_name in split_aliases(registered_name):
                return super().get_command(ctx, registered_name)
        return super().get_command(ctx, cmd_name)

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
