# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from bizcal.model.view_mode import ViewMode
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.event import EVENT_REPO
from bizcal.service.navigation import step_anchor
from bizcal.service.page import CalendarPage
from bizcal.terminal.custom_typer import AliasedTyperGroup
from bizcal.terminal.parse import parse_date
from bizcal.time import today_local
from bizcal.view.views.calendar import calendar_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--date",
        "-D",
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
StepOption = Annotated[
    int,
    typer.Option(
        "--step",
        "-s",
        help="Move this many periods forward (negative for backwards) from the date",
    ),
]


def show_calendar(mode: ViewMode, date: Optional[pendulum.Date], step: int) -> None:
    config = CONFIGURATION_REPO.get_config()
    today = today_local()

    page = CalendarPage(EVENT_REPO, config["user_id"], today, mode)
    page.select_date(step_anchor(date or today, mode, step))
    page.load()

    calendar_view(
        config["user_id"],
        page.mode,
        page.anchor,
        page.controller.range,
        page.cells(),
        page.agenda(),
        page.session.take_notifications(),
    )

    if page.session.load_failed:
        raise typer.Exit(code=1)


@app.command("day, d")
def day(date: DateOption = None, step: StepOption = 0) -> None:
    """Display the agenda of a single day."""
    show_calendar(ViewMode.DAY, date, step)


@app.command("week, w")
def week(date: DateOption = None, step: StepOption = 0) -> None:
    """Display the Monday to Sunday week containing a date."""
    show_calendar(ViewMode.WEEK, date, step)


@app.command("month, m")
def month(date: DateOption = None, step: StepOption = 0) -> None:
    """Display the six week grid of the month containing a date."""
    show_calendar(ViewMode.MONTH, date, step)
