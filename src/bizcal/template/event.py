# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from bizcal.model.event import CalendarEvent
from bizcal.model.event_type import EventType
from bizcal.time import now_utc


def get_event_template(
    user_id: str, now: Optional[pendulum.DateTime] = None
) -> CalendarEvent:
    if now is None:
        now = now_utc()
    return {
        "id": None,
        "user_id": user_id,
        "title": "",
        "description": None,
        "start": now,
        "end": now,
        "all_day": False,
        "location": None,
        "event_type": EventType.OTHER,
        "project_id": None,
        "client_id": None,
        "project_name": None,
        "client_name": None,
        "created": now,
        "updated": now,
    }
