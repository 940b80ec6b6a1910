# SPDX-License-Identifier: MIT

"""Tests for the command line surface."""

import pytest
import typer
from typer.testing import CliRunner

from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.event import EVENT_REPO
from bizcal.repository.project import PROJECT_REPO
from bizcal.terminal.app import app
from bizcal.terminal.parse import parse_time

runner = CliRunner()


@pytest.fixture
def user_id() -> str:
    return CONFIGURATION_REPO.get_config()["user_id"]


def add_standup(*extra: str):
    return runner.invoke(
        app,
        [
            "event",
            "add",
            "Standup",
            "--date",
            "2025-03-15",
            "--start",
            "9:00",
            "--end",
            "9:15",
            "--type",
            "internal",
            *extra,
        ],
    )


def test_add_creates_an_event(user_id) -> None:
    result = add_standup()
    assert result.exit_code == 0, result.output

    events = EVENT_REPO.fetch_events(user_id)
    assert len(events) == 1
    assert events[0]["title"] == "Standup"
    assert events[0]["event_type"] == "internal"
    assert events[0]["start"].format("YYYY-MM-DD HH:mm") == "2025-03-15 09:00"


def test_add_all_day_needs_no_times(user_id) -> None:
    result = runner.invoke(
        app, ["e", "a", "Filing", "-D", "2025-04-01", "--all-day", "-t", "deadline"]
    )
    assert result.exit_code == 0, result.output
    event = EVENT_REPO.fetch_events(user_id)[0]
    assert event["all_day"]
    assert event["start"] == event["end"]


def test_add_rejects_invalid_input(user_id) -> None:
    assert add_standup("--type", "party").exit_code == 2
    assert runner.invoke(app, ["event", "add", "Standup", "--start", "25:00"]).exit_code == 2
    # A timed event without times fails form validation
    assert runner.invoke(app, ["event", "add", "Standup"]).exit_code == 2
    assert EVENT_REPO.fetch_events(user_id) == []


def test_time_options_are_normalised() -> None:
    assert parse_time("8:05") == "08:05"
    assert parse_time(" 17:30 ") == "17:30"
    assert parse_time(None) is None
    for value in ("", "25:00", "9:60", "9am"):
        with pytest.raises(typer.BadParameter):
            parse_time(value)


def test_add_links_a_project_by_name(user_id) -> None:
    assert runner.invoke(app, ["project", "add", "Mobile App"]).exit_code == 0
    result = add_standup("--project", "Mobile App")
    assert result.exit_code == 0, result.output
    assert EVENT_REPO.fetch_events(user_id)[0]["project_name"] == "Mobile App"


def test_add_rejects_unknown_project() -> None:
    assert add_standup("--project", "Nope").exit_code == 2


def test_modify_changes_fields(user_id) -> None:
    add_standup()
    event_id = EVENT_REPO.fetch_events(user_id)[0]["id"]

    result = runner.invoke(
        app, ["event", "modify", event_id[:8], "--title", "Retro", "--start", "16:00", "--end", "17:00"]
    )
    assert result.exit_code == 0, result.output
    event = EVENT_REPO.get_event(event_id)
    assert event["title"] == "Retro"
    assert event["start"].format("HH:mm") == "16:00"


def test_modify_unknown_id_exits_with_error() -> None:
    result = runner.invoke(app, ["event", "modify", "deadbeef", "--title", "x"])
    assert result.exit_code == 1


def test_markup_in_an_unknown_id_is_printed_literally() -> None:
    result = runner.invoke(app, ["event", "show", "[/x]"])
    assert result.exit_code == 1
    assert "[/x]" in result.output


def test_delete_asks_for_confirmation(user_id) -> None:
    add_standup()
    event_id = EVENT_REPO.fetch_events(user_id)[0]["id"]

    declined = runner.invoke(app, ["event", "delete", event_id], input="n\n")
    assert declined.exit_code == 1
    assert len(EVENT_REPO.fetch_events(user_id)) == 1

    confirmed = runner.invoke(app, ["event", "delete", event_id], input="y\n")
    assert confirmed.exit_code == 0, confirmed.output
    assert EVENT_REPO.fetch_events(user_id) == []


def test_delete_with_yes_skips_the_prompt(user_id) -> None:
    add_standup()
    event_id = EVENT_REPO.fetch_events(user_id)[0]["id"]
    result = runner.invoke(app, ["event", "d", event_id, "--yes"])
    assert result.exit_code == 0, result.output
    assert "Event deleted" in result.output


def test_list_shows_events_of_the_week() -> None:
    add_standup()
    result = runner.invoke(app, ["event", "list", "--date", "2025-03-10"])
    assert result.exit_code == 0, result.output
    assert "Standup" in result.output

    result = runner.invoke(app, ["event", "list", "--date", "2025-03-17"])
    assert "Standup" not in result.output


def test_markup_in_titles_is_printed_literally(user_id) -> None:
    for title in ("Sync [Q3] plan", "Notes [/b]"):
        result = runner.invoke(
            app, ["event", "add", title, "-D", "2025-03-15", "--all-day", "-t", "other"]
        )
        assert result.exit_code == 0, result.output

    listed = runner.invoke(app, ["event", "list", "--date", "2025-03-10"])
    assert listed.exit_code == 0, listed.output
    assert "[Q3]" in listed.output
    assert "[/b]" in listed.output

    event_id = next(
        e["id"] for e in EVENT_REPO.fetch_events(user_id) if e["title"] == "Sync [Q3] plan"
    )
    shown = runner.invoke(app, ["event", "show", event_id])
    assert shown.exit_code == 0, shown.output
    assert "[Q3]" in shown.output


def test_week_view_title() -> None:
    result = runner.invoke(app, ["view", "week", "--date", "2025-03-15"])
    assert result.exit_code == 0, result.output
    assert "Mar 10 - Mar 16, 2025" in result.output


def test_month_view_steps_forward() -> None:
    result = runner.invoke(app, ["v", "m", "--date", "2025-01-31", "--step", "1"])
    assert result.exit_code == 0, result.output
    assert "February 2025" in result.output


def test_empty_day_view() -> None:
    result = runner.invoke(app, ["view", "day", "--date", "2025-03-16"])
    assert result.exit_code == 0, result.output
    assert "No events scheduled" in result.output


def test_day_view_shows_the_agenda() -> None:
    add_standup()
    result = runner.invoke(app, ["view", "day", "--date", "2025-03-15"])
    assert result.exit_code == 0, result.output
    assert "Standup" in result.output
    assert "Internal Meeting" in result.output


def test_no_header_hides_the_user_line(user_id) -> None:
    result = runner.invoke(app, ["--no-header", "view", "day", "--date", "2025-03-16"])
    assert result.exit_code == 0, result.output
    assert user_id[:8] not in result.output


def test_bad_date_is_a_usage_error() -> None:
    result = runner.invoke(app, ["view", "day", "--date", "someday"])
    assert result.exit_code == 2


def test_project_names_must_be_unique() -> None:
    assert runner.invoke(app, ["project", "add", "Website"]).exit_code == 0
    assert runner.invoke(app, ["project", "add", "Website"]).exit_code == 2
    assert runner.invoke(app, ["client", "add", "Website"]).exit_code == 0


def test_project_list() -> None:
    runner.invoke(app, ["p", "a", "Website"])
    result = runner.invoke(app, ["p", "l"])
    assert result.exit_code == 0, result.output
    assert "Website" in result.output
    assert PROJECT_REPO.is_dirty


def test_markup_in_project_names_is_printed_literally() -> None:
    added = runner.invoke(app, ["project", "add", "[bold]Acme"])
    assert added.exit_code == 0, added.output
    assert "[bold]Acme" in added.output

    listed = runner.invoke(app, ["project", "list"])
    assert listed.exit_code == 0, listed.output
    assert "[bold]Acme" in listed.output


def test_config_set_default_view() -> None:
    result = runner.invoke(app, ["config", "set", "--default-view", "week"])
    assert result.exit_code == 0, result.output
    assert CONFIGURATION_REPO.get_config()["default_view_mode"] == "week"


def test_config_set_rejects_bad_values() -> None:
    assert runner.invoke(app, ["config", "set", "--default-view", "year"]).exit_code == 2
    assert runner.invoke(app, ["config", "set", "--log-level", "loud"]).exit_code == 2
    assert CONFIGURATION_REPO.get_config()["log_level"] == "WARNING"
