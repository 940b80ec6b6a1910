# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bizcal.model.entity_id import short_id
from bizcal.model.event import CalendarEvent
from bizcal.model.event_type import event_type_color, event_type_label
from bizcal.time import (
    date_to_display_str,
    datetime_to_display_datetime_str,
    datetime_to_time_str,
)
from bizcal.view.state import get_use_color
from bizcal.view.views.header import header


def event_type_badge(event_type: str) -> Text:
    label = event_type_label(event_type)
    if not get_use_color():
        return Text(f"[{label}]")
    return Text(f" {label} ", style=f"bold white on {event_type_color(event_type)}")


def event_time_str(event: CalendarEvent) -> str:
    if event["all_day"]:
        return "all day"
    return f"{datetime_to_time_str(event['start'])} - {datetime_to_time_str(event['end'])}"


def events_view(
    user_id: str,
    report_name: str,
    events: list[CalendarEvent],
    no_wrap: bool = False,
) -> None:
    header(user_id, report_name)

    events_table = Table(box=box.SIMPLE)
    events_table.add_column("id")
    for column in ("date", "time", "type", "title", "project", "client"):
        if no_wrap:
            events_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            events_table.add_column(column)

    for event in events:
        events_table.add_row(
            Text(short_id(event["id"] or "")),
            date_to_display_str(event["start"].date()),
            event_time_str(event),
            event_type_badge(event["event_type"]),
            Text(event["title"]),
            Text(event["project_name"] or ""),
            Text(event["client_name"] or ""),
        )

    console = Console()
    console.print(events_table)


def single_event_view(
    user_id: str, event: CalendarEvent, report_name: Optional[str] = "event"
) -> None:
    header(user_id, report_name)

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    event_table.add_row("id", Text(event["id"] or ""))
    event_table.add_row("title", Text(event["title"]))
    event_table.add_row("type", event_type_badge(event["event_type"]))
    event_table.add_row("description", Text(event["description"] or ""))
    event_table.add_row("location", Text(event["location"] or ""))
    event_table.add_row(
        "project", Text(event["project_name"] or event["project_id"] or "")
    )
    event_table.add_row("client", Text(event["client_name"] or event["client_id"] or ""))
    event_table.add_row("start", datetime_to_display_datetime_str(event["start"]))
    event_table.add_row("end", datetime_to_display_datetime_str(event["end"]))
    event_table.add_row("all_day", str(event["all_day"]))
    event_table.add_row("created", datetime_to_display_datetime_str(event["created"]))
    event_table.add_row("updated", datetime_to_display_datetime_str(event["updated"]))

    console = Console()
    console.print(event_table)
