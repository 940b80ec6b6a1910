# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bizcal.model.event import CalendarEvent
from bizcal.model.event_type import event_type_color
from bizcal.model.grid_cell import GridCell
from bizcal.model.view_mode import DateRange, ViewMode
from bizcal.service.grid import grid_weeks
from bizcal.service.session import Notification
from bizcal.time import date_to_long_display_str, datetime_to_time_str
from bizcal.view.state import get_use_color
from bizcal.view.views.event import event_time_str, event_type_badge
from bizcal.view.views.header import header

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MAX_EVENTS_PER_CELL = 3

EMPTY_DAY_TITLE = "No events scheduled"
EMPTY_DAY_MESSAGE = 'No events scheduled for this day. Use "add" to create one.'


def _event_style(event: CalendarEvent) -> str:
    return event_type_color(event["event_type"]) if get_use_color() else ""


def _truncate(title: str, max_len: int) -> str:
    if len(title) > max_len:
        return title[: max_len - 3] + "..."
    return title


def period_title(mode: ViewMode, anchor: pendulum.Date, date_range: DateRange) -> str:
    if mode == ViewMode.MONTH:
        return anchor.format("MMMM YYYY")
    if mode == ViewMode.WEEK:
        return (
            f"{date_range['from'].format('MMM D')} - "
            f"{date_range['to'].format('MMM D, YYYY')}"
        )
    return date_to_long_display_str(anchor)


def render_month_grid(cells: list[GridCell], cell_width: int = 16) -> Table:
    """
    Render 42 month cells as a six row table.

    Days outside the anchor's month are dimmed but still show their events,
    today is highlighted, weekends are tinted, and a dot after the day number
    marks days that have events.
    """
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in WEEKDAY_NAMES:
        table.add_column(day_name, style="bold", width=cell_width)

    for week in grid_weeks(cells):
        row: list[Text] = []
        for cell in week:
            date = cell["date"]
            content = Text()
            day_label = f"{date.day:2d}"
            if cell["is_today"]:
                content.append(day_label, style="bold black on bright_cyan")
            elif not cell["is_current_period"]:
                content.append(day_label, style="dim")
            elif date.isoweekday() >= 6:
                content.append(day_label, style="bold white on orange4")
            else:
                content.append(day_label, style="bold")
            if cell["events"]:
                content.append(" •", style="bold")
            content.append("\n")

            for event in cell["events"][:MAX_EVENTS_PER_CELL]:
                style = _event_style(event)
                if not cell["is_current_period"]:
                    style = "dim"
                if event["all_day"]:
                    content.append("■ ", style=style)
                    content.append(_truncate(event["title"], cell_width - 3), style=style)
                else:
                    content.append(f"{datetime_to_time_str(event['start'])} ", style="dim")
                    content.append(_truncate(event["title"], cell_width - 7), style=style)
                content.append("\n")
            if len(cell["events"]) > MAX_EVENTS_PER_CELL:
                remaining = len(cell["events"]) - MAX_EVENTS_PER_CELL
                content.append(f"  +{remaining} more\n", style="dim")
            row.append(content)
        table.add_row(*row)

    return table


def render_week(cells: list[GridCell], day_width: int = 18) -> Columns:
    day_columns: list[RenderableType] = []
    for cell in cells:
        date = cell["date"]
        title_style = "bold black on bright_cyan" if cell["is_today"] else "bold"
        body = Text()
        if not cell["events"]:
            body.append("-", style="dim")
        for event in cell["events"]:
            if event["all_day"]:
                body.append("■ ", style=_event_style(event))
            else:
                body.append(f"{datetime_to_time_str(event['start'])} ", style="dim")
            body.append(f"{event['title']}\n", style=_event_style(event))
        day_columns.append(
            Panel(
                body,
                title=Text(date.format("ddd D"), style=title_style),
                width=day_width,
                box=box.ROUNDED,
            )
        )
    return Columns(day_columns, equal=False, expand=False, padding=(0, 0))


def render_day_agenda(events: list[CalendarEvent]) -> RenderableType:
    if not events:
        return Group(
            Text(EMPTY_DAY_TITLE, style="bold"),
            Text(EMPTY_DAY_MESSAGE, style="dim"),
        )

    parts: list[RenderableType] = []
    for event in events:
        line = Text()
        line.append(event["title"], style="bold")
        line.append("  ")
        line.append_text(event_type_badge(event["event_type"]))
        details = Text(event_time_str(event), style="dim")
        if event["location"]:
            details.append(f"  @ {event['location']}", style="dim")
        for label, value in (
            ("project", event["project_name"]),
            ("client", event["client_name"]),
        ):
            if value:
                details.append(f"  {label}: {value}", style="dim")
        body: list[RenderableType] = [line, details]
        if event["description"]:
            body.append(Text(event["description"]))
        parts.append(Panel(Group(*body), box=box.ROUNDED))
    return Group(*parts)


def render_notifications(notifications: list[Notification]) -> Optional[Text]:
    if not notifications:
        return None
    text = Text()
    for notification in notifications:
        style = "bold red" if notification["level"] == "error" else "green"
        text.append(f"{notification['message']}\n", style=style)
    return text


def render_calendar(
    mode: ViewMode,
    anchor: pendulum.Date,
    date_range: DateRange,
    cells: list[GridCell],
    agenda: list[CalendarEvent],
    loading: bool = False,
) -> RenderableType:
    title = Text(period_title(mode, anchor, date_range), style="bold")
    if loading:
        return Group(title, Text("Loading events...", style="dim"))
    if mode == ViewMode.MONTH:
        body: RenderableType = render_month_grid(cells)
    elif mode == ViewMode.WEEK:
        body = render_week(cells)
    else:
        body = render_day_agenda(agenda)
    return Group(title, Text(""), body)


def calendar_view(
    user_id: str,
    mode: ViewMode,
    anchor: pendulum.Date,
    date_range: DateRange,
    cells: list[GridCell],
    agenda: list[CalendarEvent],
    notifications: Optional[list[Notification]] = None,
    console: Optional[Console] = None,
) -> None:
    header(user_id, f"calendar-{mode.value}")

    if console is None:
        console = Console()
    console.print()
    console.print(render_calendar(mode, anchor, date_range, cells, agenda))
    notification_text = render_notifications(notifications or [])
    if notification_text is not None:
        console.print(notification_text)
    console.print()
