# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

import pendulum

from bizcal.errors import ValidationError
from bizcal.model.event import CalendarEvent, EventPatch
from bizcal.model.event_form import NONE_SENTINEL, EventForm
from bizcal.model.event_type import EVENT_TYPES, EventType
from bizcal.template.event import get_event_template
from bizcal.time import combine, date_from_str, datetime_to_time_str

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def blank_form(date: Optional[pendulum.Date] = None) -> EventForm:
    return {
        "title": "",
        "description": None,
        "date": date,
        "start_time": "",
        "end_time": "",
        "all_day": False,
        "location": None,
        "event_type": EventType.OTHER,
        "project_id": NONE_SENTINEL,
        "client_id": NONE_SENTINEL,
    }


def form_from_event(event: CalendarEvent) -> EventForm:
    """Decompose a stored event into the form an edit dialog is prefilled with."""
    start = event["start"]
    end = event["end"]
    return {
        "title": event["title"],
        "description": event["description"],
        "date": start.date(),
        "start_time": "" if event["all_day"] else datetime_to_time_str(start),
        "end_time": "" if event["all_day"] else datetime_to_time_str(end),
        "all_day": event["all_day"],
        "location": event["location"],
        "event_type": event["event_type"],
        "project_id": event["project_id"] or NONE_SENTINEL,
        "client_id": event["client_id"] or NONE_SENTINEL,
    }


def parse_form_time(field: str, value: Optional[str]) -> tuple[int, int]:
    """
    Parse an (H)H:mm form value.

    Raises:
        ValidationError: If the value is missing, malformed or out of range
    """
    if value is None or value.strip() == "":
        raise ValidationError(field, "A time is required unless the event is all day")

    time_match = _TIME_PATTERN.match(value.strip())
    if not time_match:
        raise ValidationError(
            field, f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{value}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    if hour > 23:
        raise ValidationError(field, f"Hour must be between 0 and 23, got {hour}")
    if minute > 59:
        raise ValidationError(field, f"Minute must be between 0 and 59, got {minute}")
    return (hour, minute)


def parse_form_date(value: Optional[pendulum.Date | str]) -> pendulum.Date:
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise ValidationError("date", "A date is required")
    if isinstance(value, pendulum.Date):
        return value
    try:
        return date_from_str(value)
    except ValueError:
        raise ValidationError("date", f"Date must be in YYYY-MM-DD format, got '{value}'")


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _reference(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip() == "" or value.strip() == NONE_SENTINEL:
        return None
    return value.strip()


def validate_form(
    form: EventForm, tz: str = "local"
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Check a form and compose its start and end instants.

    All-day events start and end at midnight of the form date; their time
    inputs are ignored even when filled in. Timed events combine the date
    with each time input. End before start is accepted as entered.

    Raises:
        ValidationError: On an empty title, unknown event type, or a missing
            or malformed date/time
    """
    if form["title"] is None or form["title"].strip() == "":
        raise ValidationError("title", "Title is required")

    event_type = form["event_type"] or EventType.OTHER
    if event_type not in EVENT_TYPES:
        raise ValidationError(
            "event_type",
            f"Event type must be one of {', '.join(EVENT_TYPES)}, got '{event_type}'",
        )

    date = parse_form_date(form["date"])

    if form["all_day"]:
        start = combine(date, tz=tz)
        return (start, start)

    start_hour, start_minute = parse_form_time("start_time", form["start_time"])
    end_hour, end_minute = parse_form_time("end_time", form["end_time"])
    start = combine(date, start_hour, start_minute, tz=tz)
    end = combine(date, end_hour, end_minute, tz=tz)
    if end < start:
        logger.warning(
            "Event '%s' ends (%s) before it starts (%s); keeping as entered",
            form["title"].strip(),
            form["end_time"],
            form["start_time"],
        )
    return (start, end)


def compose_event(
    form: EventForm,
    user_id: str,
    now: pendulum.DateTime,
    tz: str = "local",
) -> CalendarEvent:
    """
    Turn a submitted form into a new, not yet persisted event record.

    Args:
        form: The dialog's form state
        user_id: Owner of the new event
        now: Timestamp used for created/updated
        tz: Timezone the form's wall-clock date and times are interpreted in

    Raises:
        ValidationError: If the form cannot be submitted
    """
    start, end = validate_form(form, tz)

    event = get_event_template(user_id, now)
    event["title"] = form["title"].strip()
    event["description"] = _optional_text(form["description"])
    event["start"] = start
    event["end"] = end
    event["all_day"] = form["all_day"]
    event["location"] = _optional_text(form["location"])
    event["event_type"] = form["event_type"] or EventType.OTHER
    event["project_id"] = _reference(form["project_id"])
    event["client_id"] = _reference(form["client_id"])
    return event


def compose_patch(form: EventForm, tz: str = "local") -> EventPatch:
    """Like compose_event, but yields the partial record an update sends."""
    start, end = validate_form(form, tz)
    return {
        "title": form["title"].strip(),
        "description": _optional_text(form["description"]),
        "start": start,
        "end": end,
        "all_day": form["all_day"],
        "location": _optional_text(form["location"]),
        "event_type": form["event_type"] or EventType.OTHER,
        "project_id": _reference(form["project_id"]),
        "client_id": _reference(form["client_id"]),
    }
