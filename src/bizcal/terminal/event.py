# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import pendulum
import typer
from rich.console import Console
from rich.text import Text

from bizcal.errors import FetchError
from bizcal.model.event import CalendarEvent
from bizcal.model.event_form import NONE_SENTINEL, EventForm
from bizcal.model.event_type import EVENT_TYPES
from bizcal.model.view_mode import ViewMode
from bizcal.repository.client import CLIENT_REPO
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.event import EVENT_REPO
from bizcal.repository.project import PROJECT_REPO
from bizcal.repository.reference import ReferenceRepository
from bizcal.service.dialog import EventDialog
from bizcal.service.event_index import EventIndex
from bizcal.service.view_range import get_range, range_days
from bizcal.terminal.custom_typer import AliasedTyperGroup
from bizcal.terminal.parse import parse_date, parse_time, parse_view_mode
from bizcal.time import now_utc, today_local
from bizcal.view.views import event as event_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

TYPE_HELP = f"one of: {', '.join(EVENT_TYPES)}"
DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def exit_with_fetch_error(error: FetchError) -> NoReturn:
    console.print(Text(str(error), style="bold red"))
    raise typer.Exit(code=1)


def resolve_reference(
    repository: ReferenceRepository, user_id: str, value: Optional[str], noun: str
) -> Optional[str]:
    """Map a --project/--client value (name, id or "none") to a form value."""
    if value is None:
        return None
    if value.strip().lower() == NONE_SENTINEL:
        return NONE_SENTINEL
    reference = repository.find_by_name(user_id, value)
    if reference is not None:
        return reference["id"]
    for candidate in repository.get_all(user_id):
        if candidate["id"] == value:
            return value
    raise typer.BadParameter(f"Unknown {noun}: '{value}'")


def submit_or_fail(dialog: EventDialog, user_id: str) -> Optional[CalendarEvent]:
    """Submit a dialog, turning form errors into BadParameter and store errors into exit 1."""
    try:
        result = dialog.submit(EVENT_REPO, user_id, now_utc())
    except FetchError as e:
        exit_with_fetch_error(e)
    if dialog.is_open:
        field, message = next(iter(dialog.errors.items()))
        raise typer.BadParameter(message, param_hint=f"'{field}'")
    return result


def apply_options(
    form: EventForm,
    title: Optional[str],
    description: Optional[str],
    location: Optional[str],
    date: Optional[pendulum.Date],
    start_time: Optional[str],
    end_time: Optional[str],
    all_day: Optional[bool],
    event_type: Optional[str],
    project_id: Optional[str],
    client_id: Optional[str],
) -> None:
    if title is not None:
        form["title"] = title
    if description is not None:
        form["description"] = description
    if location is not None:
        form["location"] = location
    if date is not None:
        form["date"] = date
    if start_time is not None:
        form["start_time"] = start_time
    if end_time is not None:
        form["end_time"] = end_time
    if all_day is not None:
        form["all_day"] = all_day
    if event_type is not None:
        form["event_type"] = event_type
    if project_id is not None:
        form["project_id"] = project_id
    if client_id is not None:
        form["client_id"] = client_id


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="event title")],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-D", parser=parse_date, help=DATE_HELP),
    ] = None,
    start_time: Annotated[
        Optional[str],
        typer.Option("--start", "-s", callback=parse_time, help="HH:mm"),
    ] = None,
    end_time: Annotated[
        Optional[str],
        typer.Option("--end", "-e", callback=parse_time, help="HH:mm"),
    ] = None,
    all_day: Annotated[bool, typer.Option("--all-day", "-a")] = False,
    event_type: Annotated[str, typer.Option("--type", "-t", help=TYPE_HELP)] = "other",
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    location: Annotated[Optional[str], typer.Option("--location", "-l")] = None,
    project: Annotated[
        Optional[str], typer.Option("--project", "-p", help="project name or 'none'")
    ] = None,
    client: Annotated[
        Optional[str], typer.Option("--client", "-c", help="client name or 'none'")
    ] = None,
) -> None:
    """Create an event."""
    user_id = CONFIGURATION_REPO.get_config()["user_id"]

    dialog = EventDialog()
    form = dialog.open_create(date or today_local())
    apply_options(
        form,
        title,
        description,
        location,
        None,
        start_time,
        end_time,
        all_day,
        event_type,
        resolve_reference(PROJECT_REPO, user_id, project, "project"),
        resolve_reference(CLIENT_REPO, user_id, client, "client"),
    )
    created = submit_or_fail(dialog, user_id)

    if created is not None:
        event_report.single_event_view(user_id, created)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    title: Annotated[Optional[str], typer.Option("--title", "-T")] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-D", parser=parse_date, help=DATE_HELP),
    ] = None,
    start_time: Annotated[
        Optional[str],
        typer.Option("--start", "-s", callback=parse_time, help="HH:mm"),
    ] = None,
    end_time: Annotated[
        Optional[str],
        typer.Option("--end", "-e", callback=parse_time, help="HH:mm"),
    ] = None,
    all_day: Annotated[Optional[bool], typer.Option("--all-day/--timed")] = None,
    event_type: Annotated[
        Optional[str], typer.Option("--type", "-t", help=TYPE_HELP)
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    location: Annotated[Optional[str], typer.Option("--location", "-l")] = None,
    project: Annotated[
        Optional[str], typer.Option("--project", "-p", help="project name or 'none'")
    ] = None,
    client: Annotated[
        Optional[str], typer.Option("--client", "-c", help="client name or 'none'")
    ] = None,
) -> None:
    """Change fields of an existing event."""
    user_id = CONFIGURATION_REPO.get_config()["user_id"]

    try:
        real_id = EVENT_REPO.resolve_id(user_id, id)
        event = EVENT_REPO.get_event(real_id)
    except FetchError as e:
        exit_with_fetch_error(e)

    dialog = EventDialog()
    form = dialog.open_edit(event)
    apply_options(
        form,
        title,
        description,
        location,
        date,
        start_time,
        end_time,
        all_day,
        event_type,
        resolve_reference(PROJECT_REPO, user_id, project, "project"),
        resolve_reference(CLIENT_REPO, user_id, client, "client"),
    )
    submit_or_fail(dialog, user_id)

    event_report.single_event_view(user_id, EVENT_REPO.get_event(real_id))


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete an event after confirmation."""
    user_id = CONFIGURATION_REPO.get_config()["user_id"]

    try:
        real_id = EVENT_REPO.resolve_id(user_id, id)
        event = EVENT_REPO.get_event(real_id)
    except FetchError as e:
        exit_with_fetch_error(e)

    event_report.single_event_view(user_id, event, "delete event")
    if not yes:
        typer.confirm(f"Delete '{event['title']}'?", abort=True)

    try:
        EVENT_REPO.delete_event(user_id, real_id)
    except FetchError as e:
        exit_with_fetch_error(e)
    console.print("[green]Event deleted[/green]")


@app.command("show, s", no_args_is_help=True)
def show(id: Annotated[str, typer.Argument(help="event id or unique id prefix")]) -> None:
    """Show every field of one event."""
    user_id = CONFIGURATION_REPO.get_config()["user_id"]

    try:
        event = EVENT_REPO.get_event(EVENT_REPO.resolve_id(user_id, id))
    except FetchError as e:
        exit_with_fetch_error(e)
    event_report.single_event_view(user_id, event)


@app.command("list, l")
def list_events(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-D", parser=parse_date, help=DATE_HELP),
    ] = None,
    mode: Annotated[
        str, typer.Option("--mode", "-m", help="day, week or month")
    ] = ViewMode.WEEK.value,
    no_wrap: Annotated[bool, typer.Option("--no-wrap")] = False,
) -> None:
    """List the events visible in the day, week or month around a date."""
    user_id = CONFIGURATION_REPO.get_config()["user_id"]
    view_mode = parse_view_mode(mode)
    anchor = date or today_local()

    try:
        index = EventIndex(EVENT_REPO.fetch_events(user_id))
    except FetchError as e:
        exit_with_fetch_error(e)

    events = [
        event
        for day in range_days(get_range(anchor, view_mode))
        for event in index.events_on(day)
    ]
    event_report.events_view(user_id, f"events-{view_mode.value}", events, no_wrap)
