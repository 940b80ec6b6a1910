# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Literal, Optional, TypedDict

from bizcal.errors import FetchError
from bizcal.model.entity_id import EntityId
from bizcal.model.event import CalendarEvent
from bizcal.model.view_mode import DateRange, ViewMode
from bizcal.repository.event import EventStore
from bizcal.service.event_index import EMPTY_INDEX, EventIndex

logger = logging.getLogger(__name__)


class Notification(TypedDict):
    level: Literal["info", "error"]
    message: str


@dataclass(frozen=True)
class FetchTicket:
    """Identifies one outstanding fetch and what triggered it."""

    token: int
    user_id: str
    mode: ViewMode
    date_range: DateRange


class CalendarSession:
    """
    Fetched events of the current user plus the request bookkeeping around
    them: the loading flag, stale-response discard, transient notifications
    and the confirmation step in front of deletes.

    Only the most recently issued fetch may update the events. A response for
    an older ticket arrives after the user has moved on and is dropped.
    """

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        self.events: list[CalendarEvent] = []
        self.index: EventIndex = EMPTY_INDEX
        self.loading = False
        self.loaded = False
        self.load_failed = False
        self.notifications: list[Notification] = []
        self.pending_delete: Optional[EntityId] = None
        self._latest_token = 0

    @property
    def is_empty_state(self) -> bool:
        return not self.loading and len(self.events) == 0

    def set_user(self, user_id: str) -> None:
        if user_id == self.user_id:
            return
        # Invalidate anything in flight for the previous user
        self._latest_token += 1
        self.user_id = user_id
        self.events = []
        self.index = EMPTY_INDEX
        self.loading = False
        self.loaded = False
        self.load_failed = False
        self.pending_delete = None

    def begin_fetch(self, mode: ViewMode, date_range: DateRange) -> FetchTicket:
        self._latest_token += 1
        self.loading = True
        return FetchTicket(self._latest_token, self.user_id, mode, date_range)

    def is_current(self, ticket: FetchTicket) -> bool:
        return ticket.token == self._latest_token and ticket.user_id == self.user_id

    def complete_fetch(self, ticket: FetchTicket, events: list[CalendarEvent]) -> bool:
        if not self.is_current(ticket):
            logger.info(
                "Discarding stale fetch #%d (%s view from %s)",
                ticket.token,
                ticket.mode.value,
                ticket.date_range["from"],
            )
            return False
        self.loading = False
        self.loaded = True
        self.load_failed = False
        self._set_events(events)
        return True

    def fail_fetch(self, ticket: FetchTicket, error: FetchError) -> bool:
        """
        Record a failed fetch. A failed first load leaves an empty state; a
        failed refresh keeps what was already shown and raises a notification.
        """
        if not self.is_current(ticket):
            logger.info("Ignoring failure of stale fetch #%d: %s", ticket.token, error)
            return False
        self.loading = False
        logger.warning("Fetching events failed: %s", error)
        if not self.loaded:
            self.load_failed = True
            self._set_events([])
        self.notify("error", f"Could not load events: {error.message}")
        return True

    def refresh(
        self, store: EventStore, mode: ViewMode, date_range: DateRange
    ) -> bool:
        ticket = self.begin_fetch(mode, date_range)
        try:
            events = store.fetch_events(ticket.user_id)
        except FetchError as e:
            self.fail_fetch(ticket, e)
            return False
        return self.complete_fetch(ticket, events)

    def notify(self, level: Literal["info", "error"], message: str) -> None:
        self.notifications.append({"level": level, "message": message})

    def take_notifications(self) -> list[Notification]:
        notifications = self.notifications
        self.notifications = []
        return notifications

    def find_event(self, id: EntityId) -> Optional[CalendarEvent]:
        for event in self.events:
            if event["id"] == id:
                return event
        return None

    def request_delete(self, id: EntityId) -> None:
        if self.find_event(id) is None:
            raise ValueError(f"No loaded event with id '{id}'")
        self.pending_delete = id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self, store: EventStore) -> bool:
        """
        Delete the event awaiting confirmation. On failure nothing else in the
        session is rolled back; the error is only reported.
        """
        if self.pending_delete is None:
            raise ValueError("No delete is awaiting confirmation")
        id = self.pending_delete
        self.pending_delete = None
        try:
            store.delete_event(self.user_id, id)
        except FetchError as e:
            logger.warning("Deleting event %s failed: %s", id, e)
            self.notify("error", f"Could not delete event: {e.message}")
            return False
        self._set_events([event for event in self.events if event["id"] != id])
        self.notify("info", "Event deleted")
        return True

    def _set_events(self, events: list[CalendarEvent]) -> None:
        self.events = events
        self.index = EventIndex(events)
