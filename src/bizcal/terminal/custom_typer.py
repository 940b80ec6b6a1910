# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names may list comma-separated aliases ("add, a")"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    # Top level commands in the order they appear in --help
    command_order: list[str] = []

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Resolve an alias to the full command name"""
        return super().get_command(ctx, self._group_cmd_name(cmd_name))

    def _group_cmd_name(self, default_name: str) -> str:
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.command_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]


class RootTyperGroup(AliasedTyperGroup):
    command_order = [
        "calendar, cal",
        "view, v",
        "event, e",
        "project, p",
        "client, cl",
        "config, c",
    ]
