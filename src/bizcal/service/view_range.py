# SPDX-License-Identifier: MIT

import pendulum

from bizcal.model.view_mode import DateRange, ViewMode

DAYS_IN_WEEK = 7
MONTH_GRID_WEEKS = 6
MONTH_GRID_CELLS = DAYS_IN_WEEK * MONTH_GRID_WEEKS


def week_start(date: pendulum.Date) -> pendulum.Date:
    """
    Return the Monday on or before the given date.

    isoweekday() numbers Monday as 1 and Sunday as 7, so the offset back to
    Monday is always weekday - 1, Sunday included.
    """
    return date.subtract(days=date.isoweekday() - 1)


def month_grid_origin(date: pendulum.Date) -> pendulum.Date:
    """Return the Monday on or before the first day of the date's month."""
    return week_start(pendulum.date(date.year, date.month, 1))


def get_range(anchor: pendulum.Date, mode: ViewMode) -> DateRange:
    """
    Derive the inclusive date range visible for an anchor date in a view mode.

    Args:
        anchor: The focused date
        mode: The active view mode

    Returns:
        Inclusive {from, to} range. Month ranges always cover exactly 42 days
        (six Monday-start weeks) regardless of the month's length.
    """
    if mode == ViewMode.DAY:
        return {"from": anchor, "to": anchor}
    if mode == ViewMode.WEEK:
        start = week_start(anchor)
        return {"from": start, "to": start.add(days=DAYS_IN_WEEK - 1)}
    if mode == ViewMode.MONTH:
        origin = month_grid_origin(anchor)
        return {"from": origin, "to": origin.add(days=MONTH_GRID_CELLS - 1)}
    raise ValueError(f"Unknown view mode: {mode}")


def range_days(date_range: DateRange) -> list[pendulum.Date]:
    days: list[pendulum.Date] = []
    current = date_range["from"]
    while current <= date_range["to"]:
        days.append(current)
        current = current.add(days=1)
    return days
