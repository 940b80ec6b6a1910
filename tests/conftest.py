# SPDX-License-Identifier: MIT

"""
Pytest configuration and shared fixtures.
"""

from typing import Callable, Optional

import pendulum
import pytest

from bizcal import configuration
from bizcal.errors import FetchError
from bizcal.model.entity_id import EntityId, generate_entity_id
from bizcal.model.event import CalendarEvent, EventPatch
from bizcal.repository.client import CLIENT_REPO
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.event import EVENT_REPO
from bizcal.repository.project import PROJECT_REPO
from bizcal.view import state as view_state

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """Point config and data paths at a temp dir and reset the repository singletons."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_DIR", data_path / "events")
    monkeypatch.setattr(configuration, "DATA_PROJECTS_PATH", data_path / "projects.yaml")
    monkeypatch.setattr(configuration, "DATA_CLIENTS_PATH", data_path / "clients.yaml")
    data_path.mkdir()

    monkeypatch.setattr(EVENT_REPO, "_events", None)
    monkeypatch.setattr(PROJECT_REPO, "_references", None)
    monkeypatch.setattr(PROJECT_REPO, "is_dirty", False)
    monkeypatch.setattr(CLIENT_REPO, "_references", None)
    monkeypatch.setattr(CLIENT_REPO, "is_dirty", False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    view_state.set_show_header(True)
    view_state.set_use_color(True)
    return tmp_path


@pytest.fixture
def make_event() -> Callable[..., CalendarEvent]:
    """Factory for stored-looking events. Times are 'YYYY-MM-DDTHH:mm' in UTC."""

    def _make_event(
        title: str = "Client kickoff",
        start: str = "2025-03-15T09:00",
        end: Optional[str] = None,
        all_day: bool = False,
        user_id: str = USER_ID,
        event_type: str = "meeting",
        id: Optional[EntityId] = None,
    ) -> CalendarEvent:
        start_dt = pendulum.parse(start, tz="UTC")
        end_dt = pendulum.parse(end, tz="UTC") if end is not None else start_dt
        created = pendulum.datetime(2025, 1, 1, tz="UTC")
        return {
            "id": id if id is not None else generate_entity_id(),
            "user_id": user_id,
            "title": title,
            "description": None,
            "start": start_dt,
            "end": end_dt,
            "all_day": all_day,
            "location": None,
            "event_type": event_type,
            "project_id": None,
            "client_id": None,
            "project_name": None,
            "client_name": None,
            "created": created,
            "updated": created,
        }

    return _make_event


class FakeEventStore:
    """In-memory event store that can be told to fail each operation."""

    def __init__(self, events: Optional[list[CalendarEvent]] = None) -> None:
        self.events: list[CalendarEvent] = list(events or [])
        self.fail_fetch = False
        self.fail_write = False
        self.fetch_calls: list[str] = []
        self.updates: list[tuple[EntityId, EventPatch]] = []

    def fetch_events(self, user_id: str) -> list[CalendarEvent]:
        self.fetch_calls.append(user_id)
        if self.fail_fetch:
            raise FetchError("load events", "backend unavailable")
        return [event for event in self.events if event["user_id"] == user_id]

    def create_event(self, event: CalendarEvent) -> CalendarEvent:
        if self.fail_write:
            raise FetchError("save event", "backend unavailable")
        created = dict(event)
        created["id"] = generate_entity_id()
        self.events.append(created)  # type: ignore[arg-type]
        return created  # type: ignore[return-value]

    def update_event(self, user_id: str, id: EntityId, patch: EventPatch) -> None:
        if self.fail_write:
            raise FetchError("save event", "backend unavailable")
        self.updates.append((id, patch))
        for event in self.events:
            if event["id"] == id and event["user_id"] == user_id:
                event.update(patch)  # type: ignore[typeddict-item]

    def delete_event(self, user_id: str, id: EntityId) -> None:
        if self.fail_write:
            raise FetchError("delete event", "backend unavailable")
        self.events = [
            event
            for event in self.events
            if not (event["id"] == id and event["user_id"] == user_id)
        ]


@pytest.fixture
def store() -> FakeEventStore:
    return FakeEventStore()
