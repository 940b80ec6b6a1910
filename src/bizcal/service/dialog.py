# SPDX-License-Identifier: MIT

import logging
from enum import Enum
from typing import Optional

import pendulum

from bizcal.errors import ValidationError
from bizcal.model.entity_id import EntityId
from bizcal.model.event import CalendarEvent
from bizcal.model.event_form import EventForm
from bizcal.model.event_type import EventType
from bizcal.repository.event import EventStore
from bizcal.service.event_form import (
    blank_form,
    compose_event,
    compose_patch,
    form_from_event,
)

logger = logging.getLogger(__name__)


class DialogState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class DialogMode(Enum):
    CREATE = "create"
    EDIT = "edit"


class QuickAdd(Enum):
    MEETING = "meeting"
    DEADLINE = "deadline"
    EVENT = "event"


class EventDialog:
    """
    Create/edit dialog for a single event.

    Closed -> Open(create) with a blank form, or Open(edit) prefilled from an
    existing event. A valid submit persists and closes; an invalid submit
    stays open with the error attached to its field. Cancel discards the
    form without touching the store.
    """

    def __init__(self) -> None:
        self.state = DialogState.CLOSED
        self.mode: Optional[DialogMode] = None
        self.form: Optional[EventForm] = None
        self.errors: dict[str, str] = {}
        self.editing_id: Optional[EntityId] = None

    @property
    def is_open(self) -> bool:
        return self.state == DialogState.OPEN

    def open_create(self, date: Optional[pendulum.Date] = None) -> EventForm:
        self.state = DialogState.OPEN
        self.mode = DialogMode.CREATE
        self.form = blank_form(date)
        self.errors = {}
        self.editing_id = None
        return self.form

    def open_quick_add(
        self, preset: QuickAdd, date: Optional[pendulum.Date] = None
    ) -> EventForm:
        form = self.open_create(date)
        if preset == QuickAdd.MEETING:
            form["event_type"] = EventType.MEETING
        elif preset == QuickAdd.DEADLINE:
            form["event_type"] = EventType.DEADLINE
            form["all_day"] = True
        return form

    def open_edit(self, event: CalendarEvent) -> EventForm:
        if event["id"] is None:
            raise ValueError("Cannot edit an event that was never saved")
        self.state = DialogState.OPEN
        self.mode = DialogMode.EDIT
        self.form = form_from_event(event)
        self.errors = {}
        self.editing_id = event["id"]
        return self.form

    def cancel(self) -> None:
        self.state = DialogState.CLOSED
        self.mode = None
        self.form = None
        self.errors = {}
        self.editing_id = None

    def submit(
        self,
        store: EventStore,
        user_id: str,
        now: pendulum.DateTime,
        tz: str = "local",
    ) -> Optional[CalendarEvent]:
        """
        Validate and persist the form.

        Returns:
            The created event in create mode, None after an update, and None
            with the dialog left open when the form is invalid

        Raises:
            FetchError: If the store rejects the write; the dialog stays open
                so the user can resubmit
        """
        if not self.is_open or self.form is None:
            raise ValueError("Dialog is not open")

        self.errors = {}
        try:
            if self.mode == DialogMode.CREATE:
                event = compose_event(self.form, user_id, now, tz)
            else:
                patch = compose_patch(self.form, tz)
        except ValidationError as e:
            self.errors[e.field] = e.message
            logger.debug("Form rejected: %s", e)
            return None

        if self.mode == DialogMode.CREATE:
            created = store.create_event(event)
            self.cancel()
            return created

        store.update_event(user_id, self.editing_id, patch)  # type: ignore[arg-type]
        self.cancel()
        return None
