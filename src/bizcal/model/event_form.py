# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

# Select-box value meaning "no project/client"
NONE_SENTINEL = "none"


class EventForm(TypedDict):
    title: str
    description: Optional[str]
    date: Optional[pendulum.Date | str]
    start_time: str
    end_time: str
    all_day: bool
    location: Optional[str]
    event_type: Optional[str]
    project_id: Optional[str]
    client_id: Optional[str]
