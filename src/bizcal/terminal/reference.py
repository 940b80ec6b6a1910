# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bizcal.model.entity_id import short_id
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.reference import ReferenceRepository
from bizcal.terminal.custom_typer import AliasedTyperGroup
from bizcal.time import datetime_to_display_datetime_str
from bizcal.view.views.header import header


def build_reference_app(repository: ReferenceRepository, noun: str) -> typer.Typer:
    """Commands to manage the named records events can point at."""
    app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

    @app.command("add, a", no_args_is_help=True)
    def add(name: Annotated[str, typer.Argument(help=f"{noun} name")]) -> None:
        user_id = CONFIGURATION_REPO.get_config()["user_id"]
        if name.strip() == "":
            raise typer.BadParameter(f"A {noun} name is required")
        if repository.find_by_name(user_id, name.strip()) is not None:
            raise typer.BadParameter(f"A {noun} named '{name}' already exists")
        id = repository.add(user_id, name)
        Console().print(
            Text(f"Added {noun} {short_id(id)}: {name.strip()}", style="green")
        )

    @app.command("list, l")
    def list_references() -> None:
        user_id = CONFIGURATION_REPO.get_config()["user_id"]
        header(user_id, f"{noun}s")

        table = Table(box=box.SIMPLE)
        table.add_column("id")
        table.add_column("name")
        table.add_column("created")
        for reference in repository.get_all(user_id):
            table.add_row(
                short_id(reference["id"]),
                Text(reference["name"]),
                datetime_to_display_datetime_str(reference["created"]),
            )
        Console().print(table)

    return app
