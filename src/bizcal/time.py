# SPDX-License-Identifier: MIT

from typing import cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.now("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string (or a full ISO-8601 instant) into a date.

    Raises:
        ValueError: If the string is not a valid date
    """
    parsed = pendulum.parse(date_str.strip(), exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a calendar date: '{date_str}'")


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def datetime_to_day_key(datetime: pendulum.DateTime) -> str:
    """Wall-clock date of an instant in its own recorded offset, as 'YYYY-MM-DD'."""
    return datetime.to_date_string()


def datetime_to_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def combine(
    date: pendulum.Date, hour: int = 0, minute: int = 0, tz: str = "local"
) -> pendulum.DateTime:
    return pendulum.datetime(date.year, date.month, date.day, hour, minute, tz=tz)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_long_display_str(date: pendulum.Date) -> str:
    return date.format("dddd, MMMM D, YYYY")


def datetime_to_display_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("MMM-DD ddd HH:mm")
