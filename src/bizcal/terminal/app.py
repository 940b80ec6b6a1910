# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from bizcal.terminal import client, configuration, event, project, view
from bizcal.terminal.calendar import calendar
from bizcal.terminal.custom_typer import RootTyperGroup
from bizcal.view import state as view_state

app = typer.Typer(
    cls=RootTyperGroup,
    help="bizcal - Business calendar in the CLI",
    no_args_is_help=True,
)
app.command(name="calendar, cal")(calendar)
app.add_typer(view.app, name="view, v", help="Day, week and month views")
app.add_typer(event.app, name="event, e", help="Create, change and delete events")
app.add_typer(project.app, name="project, p", help="Projects events can belong to")
app.add_typer(client.app, name="client, cl", help="Clients events can belong to")
app.add_typer(configuration.app, name="config, c", help="Show or change settings")


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
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Do not colour events by type"),
    ] = False,
) -> None:
    """
    bizcal - Business calendar in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_color:
        view_state.set_use_color(False)


def run() -> None:
    app()
