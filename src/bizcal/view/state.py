# SPDX-License-Identifier: MIT

"""Rendering switches shared by all views, held in context variables."""

from contextvars import ContextVar

# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Default is True (event type colours on)
_use_color_var: ContextVar[bool] = ContextVar("use_color", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_use_color(value: bool) -> None:
    """Set whether events are drawn in their event type colour.

    Args:
        value: True to colour events, False for plain output
    """
    _use_color_var.set(value)


def get_use_color() -> bool:
    return _use_color_var.get()
