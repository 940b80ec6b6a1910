# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from bizcal.model.entity_id import EntityId


class CalendarEvent(TypedDict):
    id: Optional[EntityId]
    user_id: str
    title: str
    description: Optional[str]
    start: pendulum.DateTime
    end: pendulum.DateTime
    all_day: bool
    location: Optional[str]
    event_type: str
    project_id: Optional[EntityId]
    client_id: Optional[EntityId]
    project_name: Optional[str]
    client_name: Optional[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime


class EventPatch(TypedDict, total=False):
    title: str
    description: Optional[str]
    start: pendulum.DateTime
    end: pendulum.DateTime
    all_day: bool
    location: Optional[str]
    event_type: str
    project_id: Optional[EntityId]
    client_id: Optional[EntityId]
