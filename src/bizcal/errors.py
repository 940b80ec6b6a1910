# SPDX-License-Identifier: MIT


class CalendarError(Exception):
    """Base class for errors raised by the calendar subsystem."""


class ValidationError(CalendarError):
    """A form value that blocks submission.

    Attributes:
        field: Name of the offending form field (e.g. "title", "start_time")
        message: Human readable message shown next to the field
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class FetchError(CalendarError):
    """A load or mutation against the event store failed."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message
