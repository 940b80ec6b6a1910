# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from bizcal.model.grid_cell import GridCell
from bizcal.model.view_mode import ViewMode
from bizcal.service.event_index import EventIndex
from bizcal.service.view_range import get_range, range_days


def build_grid(
    anchor: pendulum.Date,
    mode: ViewMode,
    today: pendulum.Date,
    index: Optional[EventIndex] = None,
) -> list[GridCell]:
    """
    Build the renderable cells for an anchor date in a view mode.

    The result depends only on the arguments and is rebuilt from scratch on
    every call, so it is safe to call on every render.

    Args:
        anchor: The focused date
        mode: The active view mode
        today: The current local date, used for the is_today flag
        index: Events bucketed by day; cells are left empty when omitted

    Returns:
        42 cells from the month grid origin for month mode (cells outside the
        anchor's month have is_current_period False), 7 Monday-to-Sunday cells
        for week mode, or a single cell for day mode.
    """
    cells: list[GridCell] = []
    for date in range_days(get_range(anchor, mode)):
        if mode == ViewMode.MONTH:
            is_current_period = (
                date.month == anchor.month and date.year == anchor.year
            )
        else:
            is_current_period = True
        cells.append(
            {
                "date": date,
                "is_current_period": is_current_period,
                "is_today": date == today,
                "events": index.events_on(date) if index is not None else [],
            }
        )
    return cells


def grid_weeks(cells: list[GridCell]) -> list[list[GridCell]]:
    """Split a flat cell list into Monday-start rows of seven."""
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]
