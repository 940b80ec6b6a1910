# SPDX-License-Identifier: MIT

"""Tests for visible date ranges of the day, week and month views."""

import pendulum
import pytest

from bizcal.model.view_mode import ViewMode
from bizcal.service.view_range import (
    MONTH_GRID_CELLS,
    get_range,
    month_grid_origin,
    range_days,
    week_start,
)


def test_day_range_is_the_anchor_itself() -> None:
    anchor = pendulum.date(2025, 3, 15)
    assert get_range(anchor, ViewMode.DAY) == {"from": anchor, "to": anchor}


def test_week_range_runs_monday_to_sunday() -> None:
    date_range = get_range(pendulum.date(2025, 3, 15), ViewMode.WEEK)
    assert date_range == {
        "from": pendulum.date(2025, 3, 10),
        "to": pendulum.date(2025, 3, 16),
    }
    assert date_range["from"].isoweekday() == 1
    assert date_range["to"].isoweekday() == 7


@pytest.mark.parametrize(
    "anchor, monday",
    [
        (pendulum.date(2025, 3, 10), pendulum.date(2025, 3, 10)),  # Monday
        (pendulum.date(2025, 3, 12), pendulum.date(2025, 3, 10)),  # Wednesday
        (pendulum.date(2025, 3, 16), pendulum.date(2025, 3, 10)),  # Sunday
        (pendulum.date(2025, 1, 1), pendulum.date(2024, 12, 30)),  # across a year
    ],
)
def test_week_start_is_monday_on_or_before(anchor, monday) -> None:
    assert week_start(anchor) == monday


def test_every_date_of_a_week_shares_its_range() -> None:
    monday = pendulum.date(2025, 3, 10)
    expected = get_range(monday, ViewMode.WEEK)
    for offset in range(7):
        assert get_range(monday.add(days=offset), ViewMode.WEEK) == expected


def test_month_range_starts_at_grid_origin() -> None:
    date_range = get_range(pendulum.date(2025, 2, 10), ViewMode.MONTH)
    assert date_range["from"] == pendulum.date(2025, 1, 27)
    assert date_range["to"] == pendulum.date(2025, 3, 9)


def test_month_grid_origin_when_first_is_monday() -> None:
    # September 2025 starts on a Monday
    assert month_grid_origin(pendulum.date(2025, 9, 20)) == pendulum.date(2025, 9, 1)


def test_month_grid_origin_when_first_is_sunday() -> None:
    # June 2025 starts on a Sunday
    assert month_grid_origin(pendulum.date(2025, 6, 1)) == pendulum.date(2025, 5, 26)


@pytest.mark.parametrize("month", range(1, 13))
def test_month_range_always_covers_42_days(month) -> None:
    anchor = pendulum.date(2024, month, 15)
    days = range_days(get_range(anchor, ViewMode.MONTH))
    assert len(days) == MONTH_GRID_CELLS
    assert days[0].isoweekday() == 1
    assert pendulum.date(2024, month, 1) in days
    last_day = pendulum.date(2024, month, 1).days_in_month
    assert pendulum.date(2024, month, last_day) in days


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        get_range(pendulum.date(2025, 3, 15), "fortnight")  # type: ignore[arg-type]
