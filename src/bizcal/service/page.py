# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

import pendulum

from bizcal.errors import FetchError
from bizcal.model.entity_id import EntityId
from bizcal.model.event import CalendarEvent
from bizcal.model.grid_cell import GridCell
from bizcal.model.view_mode import Direction, Selection, ViewMode
from bizcal.repository.event import EventStore
from bizcal.service.dialog import EventDialog, QuickAdd
from bizcal.service.session import CalendarSession
from bizcal.service.view_mode import ViewModeController
from bizcal.time import now_utc

logger = logging.getLogger(__name__)


class CalendarPage:
    """The calendar page: view state, fetched events and the event dialog."""

    def __init__(
        self,
        store: EventStore,
        user_id: str,
        today: pendulum.Date,
        mode: ViewMode = ViewMode.DAY,
        tz: str = "local",
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self.store = store
        self.tz = tz
        self.clock = clock
        self.controller = ViewModeController(today, mode)
        self.session = CalendarSession(user_id)
        self.dialog = EventDialog()

    def load(self) -> bool:
        return self.session.refresh(
            self.store, self.controller.mode, self.controller.range
        )

    @property
    def mode(self) -> ViewMode:
        return self.controller.mode

    @property
    def anchor(self) -> pendulum.Date:
        return self.controller.resolved_anchor

    def set_mode(self, mode: ViewMode) -> None:
        self.controller.set_mode(mode)

    def select(self, selection: Optional[Selection]) -> None:
        self.controller.select(selection)

    def select_date(self, date: pendulum.Date) -> None:
        self.controller.select_date(date)

    def navigate(self, direction: Direction) -> pendulum.Date:
        return self.controller.navigate(direction)

    def go_to_today(self) -> pendulum.Date:
        return self.controller.go_to_today()

    def cells(self) -> list[GridCell]:
        return self.controller.cells(self.session.index)

    def agenda(self) -> list[CalendarEvent]:
        return self.session.index.events_on(self.anchor)

    def open_create(self) -> None:
        self.dialog.open_create(self.anchor)

    def open_quick_add(self, preset: QuickAdd) -> None:
        self.dialog.open_quick_add(preset, self.anchor)

    def open_edit(self, id: EntityId) -> None:
        event = self.session.find_event(id)
        if event is None:
            raise ValueError(f"No loaded event with id '{id}'")
        self.dialog.open_edit(event)

    def submit_dialog(self) -> bool:
        """
        Submit the open dialog. Returns True once the event is persisted; the
        dialog stays open on validation or store errors.
        """
        editing = self.dialog.editing_id is not None
        try:
            self.dialog.submit(self.store, self.session.user_id, self.clock(), self.tz)
        except FetchError as e:
            logger.warning("Saving event failed: %s", e)
            self.session.notify("error", f"Could not save event: {e.message}")
            return False
        if self.dialog.is_open:
            return False
        self.session.notify("info", "Event updated" if editing else "Event created")
        self.load()
        return True

    def request_delete(self, id: EntityId) -> None:
        self.session.request_delete(id)

    def confirm_delete(self) -> bool:
        return self.session.confirm_delete(self.store)

    def cancel_delete(self) -> None:
        self.session.cancel_delete()
