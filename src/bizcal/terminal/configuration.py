# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from bizcal import configuration
from bizcal.repository.configuration import CONFIGURATION_REPO, LOG_LEVELS
from bizcal.terminal.custom_typer import AliasedTyperGroup
from bizcal.terminal.parse import parse_view_mode

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("show, s")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("user_id", config["user_id"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("default_view_mode", config["default_view_mode"])
    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("use_color", _enabled(config["use_color"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set", no_args_is_help=True)
def set_config(
    user_id: Annotated[
        Optional[str],
        typer.Option("--user-id", help="Switch the user whose calendar is shown"),
    ] = None,
    data_path: Annotated[
        Optional[str], typer.Option("--data-path", help="Custom data directory")
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the default data directory"),
    ] = False,
    default_view_mode: Annotated[
        Optional[str],
        typer.Option("--default-view", help="day, week or month"),
    ] = None,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    use_color: Annotated[Optional[bool], typer.Option("--color/--no-color")] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help=", ".join(LOG_LEVELS))
    ] = None,
) -> None:
    """Change configuration settings."""
    if user_id is not None and user_id.strip() == "":
        raise typer.BadParameter("A user id cannot be empty", param_hint="'--user-id'")

    try:
        CONFIGURATION_REPO.update_config(
            user_id=user_id.strip() if user_id is not None else None,
            data_path=data_path,
            remove_data_path=remove_data_path,
            default_view_mode=(
                parse_view_mode(default_view_mode)
                if default_view_mode is not None
                else None
            ),
            show_header=show_header,
            use_color=use_color,
            log_level=log_level,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'--log-level'")

    show()
