# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, Protocol, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bizcal import configuration, time
from bizcal.errors import FetchError
from bizcal.model.entity_id import EntityId, generate_entity_id
from bizcal.model.event import CalendarEvent, EventPatch
from bizcal.repository.client import CLIENT_REPO
from bizcal.repository.project import PROJECT_REPO
from bizcal.repository.reference import ReferenceRepository

logger = logging.getLogger(__name__)

# Joined from the reference stores on fetch, never written to disk
_JOINED_FIELDS = ("project_name", "client_name")


class EventStore(Protocol):
    """Create/read/update/delete of events owned by a single user."""

    def fetch_events(self, user_id: str) -> list[CalendarEvent]: ...

    def create_event(self, event: CalendarEvent) -> CalendarEvent: ...

    def update_event(self, user_id: str, id: EntityId, patch: EventPatch) -> None: ...

    def delete_event(self, user_id: str, id: EntityId) -> None: ...


class EventRepository:
    """
    File-backed event store: one YAML document per event in the events
    directory. Reads are loaded lazily and cached; every mutation is written
    through immediately so a failure belongs to the action that caused it.
    """

    def __init__(
        self,
        projects: ReferenceRepository = PROJECT_REPO,
        clients: ReferenceRepository = CLIENT_REPO,
    ) -> None:
        self._events: Optional[list[CalendarEvent]] = None
        self._projects = projects
        self._clients = clients

    @property
    def events(self) -> list[CalendarEvent]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        events: list[CalendarEvent] = []
        if configuration.DATA_EVENTS_DIR.is_dir():
            try:
                for file_path in sorted(configuration.DATA_EVENTS_DIR.iterdir()):
                    if file_path.suffix != ".yaml":
                        continue
                    raw_event = load(file_path.read_text(), Loader=Loader)
                    if raw_event is None:
                        continue
                    if not isinstance(raw_event, dict):
                        raise ValueError(f"{file_path.name} is not an event record")
                    events.append(self.__convert_event_for_deserialization(raw_event))
            except (OSError, YAMLError, KeyError, ValueError) as e:
                logger.error("Could not load events: %s", e)
                raise FetchError("load events", str(e)) from e
        self._events = events

    def __write_event(self, event: CalendarEvent) -> None:
        serializable_event = self.__convert_event_for_serialization(deepcopy(event))
        file_path = configuration.DATA_EVENTS_DIR / f"{event['id']}.yaml"
        try:
            configuration.DATA_EVENTS_DIR.mkdir(parents=True, exist_ok=True)
            file_path.write_text(dump(serializable_event, Dumper=Dumper))
        except OSError as e:
            logger.error("Could not write event %s: %s", event["id"], e)
            raise FetchError("save event", str(e)) from e

    def __convert_event_for_serialization(
        self, event: CalendarEvent
    ) -> dict[str, Any]:
        serializable_event = cast(dict[str, Any], event)
        for field in _JOINED_FIELDS:
            serializable_event.pop(field, None)
        for field in ("start", "end", "created", "updated"):
            serializable_event[field] = time.datetime_to_iso_str(
                serializable_event[field]
            )
        return serializable_event

    def __convert_event_for_deserialization(
        self, event: dict[str, Any]
    ) -> CalendarEvent:
        deserializable_event = event
        for field in ("start", "end", "created", "updated"):
            deserializable_event[field] = time.datetime_from_str(
                deserializable_event[field]
            )
        for field in _JOINED_FIELDS:
            deserializable_event[field] = None
        return cast(CalendarEvent, deserializable_event)

    def __find(self, id: EntityId, user_id: Optional[str] = None) -> CalendarEvent:
        for event in self.events:
            if event["id"] == id and (user_id is None or event["user_id"] == user_id):
                return event
        raise FetchError("find event", f"No event with id '{id}'")

    def __joined(self, event: CalendarEvent) -> CalendarEvent:
        joined = deepcopy(event)
        joined["project_name"] = self._projects.get_name(event["project_id"])
        joined["client_name"] = self._clients.get_name(event["client_id"])
        return joined

    def fetch_events(self, user_id: str) -> list[CalendarEvent]:
        """All events owned by a user, ordered by start, with names joined."""
        owned = [event for event in self.events if event["user_id"] == user_id]
        return [self.__joined(event) for event in sorted(owned, key=lambda e: e["start"])]

    def get_event(self, id: EntityId) -> CalendarEvent:
        return self.__joined(self.__find(id))

    def resolve_id(self, user_id: str, id_prefix: str) -> EntityId:
        """
        Expand a full id or unique id prefix among a user's events.

        Raises:
            FetchError: If nothing or more than one event matches
        """
        matches = [
            cast(EntityId, event["id"])
            for event in self.events
            if event["user_id"] == user_id
            and cast(EntityId, event["id"]).startswith(id_prefix)
        ]
        if len(matches) == 0:
            raise FetchError("find event", f"No event with id '{id_prefix}'")
        if len(matches) > 1:
            raise FetchError("find event", f"Event id '{id_prefix}' is ambiguous")
        return matches[0]

    def create_event(self, event: CalendarEvent) -> CalendarEvent:
        new_event = deepcopy(event)
        new_event["id"] = generate_entity_id()
        # Load before writing, or the new file would be read back as well
        events = self.events
        self.__write_event(new_event)
        events.append(new_event)
        logger.debug("Created event %s", new_event["id"])
        return self.__joined(new_event)

    def update_event(self, user_id: str, id: EntityId, patch: EventPatch) -> None:
        event = self.__find(id, user_id)
        updated = deepcopy(event)
        for field, value in patch.items():
            updated[field] = value  # type: ignore[literal-required]
        updated["updated"] = time.now_utc()
        self.__write_event(updated)
        event.update(updated)
        logger.debug("Updated event %s", id)

    def delete_event(self, user_id: str, id: EntityId) -> None:
        event = self.__find(id, user_id)
        file_path = configuration.DATA_EVENTS_DIR / f"{id}.yaml"
        try:
            if file_path.exists():
                file_path.unlink()
        except OSError as e:
            logger.error("Could not delete event %s: %s", id, e)
            raise FetchError("delete event", str(e)) from e
        self.events.remove(event)
        logger.debug("Deleted event %s", id)


EVENT_REPO = EventRepository()
