# SPDX-License-Identifier: MIT

from collections import defaultdict
from typing import Iterable

import pendulum

from bizcal.model.event import CalendarEvent
from bizcal.time import date_to_str, datetime_to_day_key


def day_key(event: CalendarEvent) -> str:
    """Day-key of an event: the calendar date of its start, time of day dropped."""
    return datetime_to_day_key(event["start"])


def is_same_day(event: CalendarEvent, date: pendulum.Date) -> bool:
    return day_key(event) == date_to_str(date)


def _agenda_order(event: CalendarEvent) -> tuple[bool, pendulum.DateTime]:
    # All-day events first, then timed events by start
    return (not event["all_day"], event["start"])


def events_on_day(
    events: Iterable[CalendarEvent], date: pendulum.Date
) -> list[CalendarEvent]:
    """
    Scan the full event list for events starting on the given calendar day.

    This costs O(len(events)) per call. Grids should use EventIndex instead,
    which buckets once and answers each cell in O(1).
    """
    return sorted(
        (event for event in events if is_same_day(event, date)), key=_agenda_order
    )


class EventIndex:
    """Events bucketed by day-key, built once per fetch."""

    def __init__(self, events: Iterable[CalendarEvent]) -> None:
        buckets: defaultdict[str, list[CalendarEvent]] = defaultdict(list)
        for event in events:
            buckets[day_key(event)].append(event)
        self._buckets: dict[str, list[CalendarEvent]] = {
            key: sorted(bucket, key=_agenda_order) for key, bucket in buckets.items()
        }

    def events_on(self, date: pendulum.Date) -> list[CalendarEvent]:
        return list(self._buckets.get(date_to_str(date), []))

    def has_events(self, date: pendulum.Date) -> bool:
        return date_to_str(date) in self._buckets

    def day_keys(self) -> list[str]:
        return sorted(self._buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())


EMPTY_INDEX = EventIndex([])
