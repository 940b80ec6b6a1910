# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from bizcal.model.event import CalendarEvent


class GridCell(TypedDict):
    date: pendulum.Date
    is_current_period: bool
    is_today: bool
    events: list[CalendarEvent]
