# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum
import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from bizcal.model.event_form import NONE_SENTINEL, EventForm
from bizcal.model.event_type import EVENT_TYPES
from bizcal.model.view_mode import Direction, ViewMode
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.event import EVENT_REPO
from bizcal.service.dialog import QuickAdd
from bizcal.service.page import CalendarPage
from bizcal.terminal.parse import parse_date
from bizcal.time import date_to_str, today_local
from bizcal.view.views.calendar import render_calendar, render_notifications
from bizcal.view.views.event import events_view

AskFn = Callable[..., str]
ConfirmFn = Callable[..., bool]

COMMANDS: list[tuple[str, str]] = [
    ("d / w / m", "switch to day, week or month view"),
    ("p / n", "previous / next period"),
    ("t", "jump to today"),
    ("g DATE", "go to a date (YYYY-MM-DD, today, tomorrow, 1, -1, ...)"),
    ("l", "list the events in view with their ids"),
    ("a", "add an event on the focused date"),
    ("qm / qd / qe", "quick add a meeting, deadline or event"),
    ("e ID", "edit an event"),
    ("x ID", "delete an event"),
    ("r", "reload events"),
    ("h", "show this help"),
    ("q", "quit"),
]

QUICK_ADD_COMMANDS = {
    "qm": QuickAdd.MEETING,
    "qd": QuickAdd.DEADLINE,
    "qe": QuickAdd.EVENT,
}

MODE_COMMANDS = {"d": ViewMode.DAY, "w": ViewMode.WEEK, "m": ViewMode.MONTH}


def render_help(console: Console) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    for keys, description in COMMANDS:
        table.add_row(f"[cyan]{keys}[/cyan]", description)
    console.print(table)


def render_page(page: CalendarPage, console: Console) -> None:
    console.print()
    console.print(
        render_calendar(
            page.mode,
            page.anchor,
            page.controller.range,
            page.cells(),
            page.agenda(),
            loading=page.session.loading,
        )
    )
    notification_text = render_notifications(page.session.take_notifications())
    if notification_text is not None:
        console.print(notification_text)


def resolve_loaded_id(page: CalendarPage, id_prefix: str) -> Optional[str]:
    matches = [
        event["id"]
        for event in page.session.events
        if event["id"] is not None and event["id"].startswith(id_prefix)
    ]
    if len(matches) != 1:
        return None
    return matches[0]


def fill_form(form: EventForm, ask: AskFn, confirm: ConfirmFn) -> None:
    form["title"] = ask("Title", default=form["title"])
    date = form["date"]
    if isinstance(date, pendulum.Date):
        date = date_to_str(date)
    form["date"] = ask("Date", default=date or "")
    form["event_type"] = ask(
        "Type", choices=list(EVENT_TYPES), default=form["event_type"] or "other"
    )
    form["all_day"] = confirm("All day?", default=form["all_day"])
    if not form["all_day"]:
        form["start_time"] = ask("Start time (HH:mm)", default=form["start_time"])
        form["end_time"] = ask("End time (HH:mm)", default=form["end_time"])
    form["location"] = ask("Location", default=form["location"] or "")
    form["description"] = ask("Description", default=form["description"] or "")
    form["project_id"] = ask(
        "Project id (or none)", default=form["project_id"] or NONE_SENTINEL
    )
    form["client_id"] = ask(
        "Client id (or none)", default=form["client_id"] or NONE_SENTINEL
    )


def run_dialog(
    page: CalendarPage, console: Console, ask: AskFn, confirm: ConfirmFn
) -> None:
    while page.dialog.is_open and page.dialog.form is not None:
        fill_form(page.dialog.form, ask, confirm)
        if page.submit_dialog():
            return
        for field, message in page.dialog.errors.items():
            console.print(Text(f"{field}: {message}", style="bold red"))
        if not page.dialog.errors:
            # Store error, already queued as a notification
            render_page(page, console)
        if not confirm("Fix and submit again?", default=True):
            page.dialog.cancel()


def handle_command(
    page: CalendarPage,
    line: str,
    console: Console,
    ask: AskFn,
    confirm: ConfirmFn,
) -> bool:
    """Apply one command line to the page. Returns False when the user quits."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return True
    command = parts[0].lower()
    argument = parts[1] if len(parts) > 1 else ""

    if command in ("q", "quit", "exit"):
        return False
    if command in MODE_COMMANDS:
        page.set_mode(MODE_COMMANDS[command])
    elif command == "p":
        page.navigate(Direction.PREV)
    elif command == "n":
        page.navigate(Direction.NEXT)
    elif command == "t":
        page.go_to_today()
    elif command == "g":
        try:
            date = parse_date(argument)
        except typer.BadParameter as e:
            console.print(Text(e.message, style="bold red"))
            return True
        if date is not None:
            page.select_date(date)
    elif command == "l":
        visible = [event for cell in page.cells() for event in cell["events"]]
        events_view(page.session.user_id, f"events-{page.mode.value}", visible)
        return True
    elif command == "a":
        page.open_create()
        run_dialog(page, console, ask, confirm)
    elif command in QUICK_ADD_COMMANDS:
        page.open_quick_add(QUICK_ADD_COMMANDS[command])
        run_dialog(page, console, ask, confirm)
    elif command in ("e", "x"):
        id = resolve_loaded_id(page, argument.strip()) if argument.strip() else None
        if id is None:
            console.print(
                Text(f"No single event matches '{argument}'", style="bold red")
            )
            return True
        if command == "e":
            page.open_edit(id)
            run_dialog(page, console, ask, confirm)
        else:
            page.request_delete(id)
            if confirm("Delete this event?", default=False):
                page.confirm_delete()
            else:
                page.cancel_delete()
    elif command == "r":
        page.load()
    elif command in ("h", "?", "help"):
        render_help(console)
        return True
    else:
        console.print(
            Text.assemble(
                (f"Unknown command '{command}'", "bold red"), " (h for help)"
            )
        )
        return True

    render_page(page, console)
    return True


def run_page(
    page: CalendarPage,
    console: Console,
    ask: AskFn = Prompt.ask,
    confirm: ConfirmFn = Confirm.ask,
) -> None:
    page.load()
    render_page(page, console)
    render_help(console)
    while handle_command(page, ask(">"), console, ask, confirm):
        pass


def calendar() -> None:
    """Open the interactive calendar page."""
    config = CONFIGURATION_REPO.get_config()
    page = CalendarPage(
        EVENT_REPO,
        config["user_id"],
        today_local(),
        ViewMode(config["default_view_mode"]),
    )
    run_page(page, Console())
