# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from bizcal.errors import ValidationError
from bizcal.model.view_mode import ViewMode
from bizcal.service.event_form import parse_form_time
from bizcal.time import date_from_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a date option: YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a
    day offset from today like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date in ("today", "t"):
        return today_local()
    if date in ("yesterday", "y"):
        return today_local().subtract(days=1)
    if date in ("tomorrow", "o"):
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_time(time_str: Optional[str]) -> Optional[str]:
    """
    Check an (H)H:mm option and return it normalised to HH:mm.

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    if time_str is None:
        return None

    try:
        hour, minute = parse_form_time("time", time_str)
    except ValidationError as e:
        raise typer.BadParameter(e.message)

    return f"{hour:02d}:{minute:02d}"


def parse_view_mode(mode: str) -> ViewMode:
    try:
        return ViewMode(mode.strip().lower())
    except ValueError:
        raise typer.BadParameter(
            f"View mode must be one of {', '.join(m.value for m in ViewMode)}, got '{mode}'"
        )
