# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from bizcal.model.grid_cell import GridCell
from bizcal.model.view_mode import (
    DateRange,
    Direction,
    Selection,
    ViewMode,
    range_selection,
    single_selection,
)
from bizcal.service.event_index import EventIndex
from bizcal.service.grid import build_grid
from bizcal.service.navigation import next_anchor
from bizcal.service.view_range import get_range

logger = logging.getLogger(__name__)


class ViewModeController:
    """
    Current view mode and anchor date of one calendar page.

    The anchor may be cleared (a deselect in the date picker); everything
    derived from it then uses the injected today instead.
    """

    def __init__(
        self,
        today: pendulum.Date,
        mode: ViewMode = ViewMode.DAY,
        anchor: Optional[pendulum.Date] = None,
    ) -> None:
        self.today = today
        self.mode = mode
        self.anchor: Optional[pendulum.Date] = anchor if anchor is not None else today

    @property
    def resolved_anchor(self) -> pendulum.Date:
        return self.anchor if self.anchor is not None else self.today

    @property
    def range(self) -> DateRange:
        return get_range(self.resolved_anchor, self.mode)

    @property
    def selection(self) -> Selection:
        """The picker value for the current mode: a range in week mode, else a date."""
        if self.mode == ViewMode.WEEK:
            return range_selection(self.range)
        return single_selection(self.resolved_anchor)

    def set_mode(self, mode: ViewMode) -> None:
        # The anchor is kept, so the focused date stays inside the new period
        if self.anchor is None:
            self.anchor = self.today
        self.mode = mode

    def select(self, selection: Optional[Selection]) -> None:
        """
        Apply a value coming back from the date picker.

        A selection whose shape does not fit the mode (a range in day mode, a
        single date in week mode) can legitimately arrive right after a mode
        switch. It is not an error: the current anchor is kept.
        """
        if selection is None:
            self.anchor = None
            return

        if selection["kind"] == "single":
            if self.mode == ViewMode.WEEK:
                logger.debug(
                    "Ignoring single-date selection %s in week mode", selection["date"]
                )
                return
            self.anchor = selection["date"]
        elif selection["kind"] == "range":
            if self.mode != ViewMode.WEEK:
                logger.debug(
                    "Ignoring range selection in %s mode, keeping anchor %s",
                    self.mode.value,
                    self.resolved_anchor,
                )
                return
            self.anchor = selection["from"]
        else:
            logger.debug("Ignoring selection of unknown kind: %r", selection)

    def select_date(self, date: pendulum.Date) -> None:
        """Focus a date directly, e.g. a clicked grid cell, in any mode."""
        self.anchor = date

    def navigate(self, direction: Direction) -> pendulum.Date:
        self.anchor = next_anchor(self.resolved_anchor, self.mode, direction)
        return self.anchor

    def go_to_today(self) -> pendulum.Date:
        self.anchor = self.today
        return self.anchor

    def cells(self, index: Optional[EventIndex] = None) -> list[GridCell]:
        return build_grid(self.resolved_anchor, self.mode, self.today, index)
