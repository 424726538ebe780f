# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

# Command groups listed in help in this order, extras after them
COMMAND_ORDER = ["view, v", "config, c"]


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names are comma-separated alias lists, e.g. "gantt, g"."""

    _ALIAS_SPLIT = re.compile(r"\s*,\s*")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def resolve_alias(self, alias: str) -> str:
        """Registered name of the command that answers to alias, or alias itself."""
        for registered_name in self.commands:
            if alias in self._ALIAS_SPLIT.split(registered_name):
                return registered_name
        return alias

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        # An alias of a registered command is not a command of its own
        registered_name = self.resolve_alias(name)
        if registered_name != name and registered_name in self.commands:
            return
        super().add_command(cmd, name)

    def list_commands(self, ctx: click.Context) -> list[str]:
        names = super().list_commands(ctx)
        ordered = [name for name in COMMAND_ORDER if name in names]
        return ordered + [name for name in names if name not in ordered]
