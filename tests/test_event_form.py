# SPDX-License-Identifier: MIT

"""Tests for event form validation and composition."""

import logging

import pendulum
import pytest

from bizcal.errors import ValidationError
from bizcal.service.event_form import (
    blank_form,
    compose_event,
    compose_patch,
    form_from_event,
    parse_form_time,
    validate_form,
)

NOW = pendulum.datetime(2025, 3, 1, 12, 0, tz="UTC")


def filled_form(**overrides):
    form = blank_form(pendulum.date(2025, 4, 1))
    form.update(
        {
            "title": "Client kickoff",
            "start_time": "10:00",
            "end_time": "11:30",
            "event_type": "meeting",
        }
    )
    form.update(overrides)
    return form


def test_blank_form_defaults() -> None:
    form = blank_form(pendulum.date(2025, 4, 1))
    assert form["date"] == pendulum.date(2025, 4, 1)
    assert form["event_type"] == "other"
    assert form["project_id"] == "none"
    assert form["client_id"] == "none"
    assert not form["all_day"]


def test_all_day_event_starts_and_ends_at_midnight() -> None:
    form = filled_form(all_day=True, start_time="", end_time="")
    event = compose_event(form, "user-1", NOW, tz="UTC")
    midnight = pendulum.datetime(2025, 4, 1, tz="UTC")
    assert event["start"] == midnight
    assert event["end"] == midnight
    assert event["all_day"]


def test_all_day_ignores_filled_times() -> None:
    start, end = validate_form(filled_form(all_day=True), tz="UTC")
    assert start == end == pendulum.datetime(2025, 4, 1, tz="UTC")


def test_timed_event_combines_date_and_times() -> None:
    event = compose_event(filled_form(), "user-1", NOW, tz="UTC")
    assert event["start"] == pendulum.datetime(2025, 4, 1, 10, 0, tz="UTC")
    assert event["end"] == pendulum.datetime(2025, 4, 1, 11, 30, tz="UTC")
    assert event["id"] is None
    assert event["user_id"] == "user-1"
    assert event["created"] == NOW
    assert event["updated"] == NOW


def test_date_may_be_given_as_text() -> None:
    start, _ = validate_form(filled_form(date="2025-04-02"), tz="UTC")
    assert start == pendulum.datetime(2025, 4, 2, 10, 0, tz="UTC")


@pytest.mark.parametrize("title", ["", "   "])
def test_empty_title_is_rejected(title) -> None:
    with pytest.raises(ValidationError) as excinfo:
        compose_event(filled_form(title=title), "user-1", NOW)
    assert excinfo.value.field == "title"


def test_unknown_event_type_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_form(filled_form(event_type="party"))
    assert excinfo.value.field == "event_type"


@pytest.mark.parametrize("date", [None, "", "2025-02-30", "next week"])
def test_bad_date_is_rejected(date) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_form(filled_form(date=date))
    assert excinfo.value.field == "date"


def test_missing_time_is_rejected_for_timed_events() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_form(filled_form(end_time=""))
    assert excinfo.value.field == "end_time"


@pytest.mark.parametrize("value", ["10", "10:5", "ten", "24:00", "10:60"])
def test_malformed_times_are_rejected(value) -> None:
    with pytest.raises(ValidationError):
        parse_form_time("start_time", value)


def test_short_hour_is_accepted() -> None:
    assert parse_form_time("start_time", "8:05") == (8, 5)


def test_end_before_start_is_kept_with_a_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="bizcal"):
        start, end = validate_form(
            filled_form(start_time="15:00", end_time="14:00"), tz="UTC"
        )
    assert end < start
    assert "before it starts" in caplog.text


def test_none_sentinel_and_blank_text_become_null() -> None:
    form = filled_form(
        project_id="none", client_id="", location="  ", description="", title=" Kickoff "
    )
    event = compose_event(form, "user-1", NOW, tz="UTC")
    assert event["project_id"] is None
    assert event["client_id"] is None
    assert event["location"] is None
    assert event["description"] is None
    assert event["title"] == "Kickoff"


def test_references_pass_through() -> None:
    event = compose_event(
        filled_form(project_id="p-1", client_id="c-1"), "user-1", NOW, tz="UTC"
    )
    assert event["project_id"] == "p-1"
    assert event["client_id"] == "c-1"


def test_form_from_event_round_trips_through_patch(make_event) -> None:
    event = make_event(start="2025-03-15T09:00", end="2025-03-15T10:15")
    event["project_id"] = "p-1"
    form = form_from_event(event)
    assert form["date"] == pendulum.date(2025, 3, 15)
    assert form["start_time"] == "09:00"
    assert form["end_time"] == "10:15"
    assert form["client_id"] == "none"

    patch = compose_patch(form, tz="UTC")
    assert patch["start"] == event["start"]
    assert patch["end"] == event["end"]
    assert patch["project_id"] == "p-1"
    assert patch["client_id"] is None


def test_all_day_event_prefills_empty_times(make_event) -> None:
    form = form_from_event(make_event(start="2025-03-15T00:00", all_day=True))
    assert form["all_day"]
    assert form["start_time"] == ""
    assert form["end_time"] == ""
