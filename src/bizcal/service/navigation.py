# SPDX-License-Identifier: MIT

import pendulum

from bizcal.model.view_mode import Direction, ViewMode


def shift_months(date: pendulum.Date, months: int) -> pendulum.Date:
    """
    Move a date by whole months, keeping the day of month where possible.

    When the target month is shorter than the source day of month the result
    is clamped to the target month's last day (Jan 31 + 1 month is Feb 28 or
    Feb 29, never a day in March).
    """
    month_index = date.year * 12 + (date.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = pendulum.date(year, month, 1).days_in_month
    return pendulum.date(year, month, min(date.day, last_day))


def next_anchor(
    anchor: pendulum.Date, mode: ViewMode, direction: Direction
) -> pendulum.Date:
    """
    Compute the anchor reached by one previous/next step in a view mode.

    Day and week steps are exact inverses of each other. Month steps are
    not once clamping kicks in: 2025-01-31 -> 2025-02-28 -> 2025-01-28.
    """
    sign = 1 if direction == Direction.NEXT else -1
    if mode == ViewMode.DAY:
        return anchor.add(days=sign)
    if mode == ViewMode.WEEK:
        return anchor.add(days=7 * sign)
    if mode == ViewMode.MONTH:
        return shift_months(anchor, sign)
    raise ValueError(f"Unknown view mode: {mode}")


def step_anchor(anchor: pendulum.Date, mode: ViewMode, steps: int) -> pendulum.Date:
    """Apply next_anchor repeatedly; negative steps move backwards."""
    direction = Direction.NEXT if steps >= 0 else Direction.PREV
    for _ in range(abs(steps)):
        anchor = next_anchor(anchor, mode, direction)
    return anchor
