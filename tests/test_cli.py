"""Tests for the click command surface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from days.cli import main
from days.core.dates import DateValue

HEADER = "date,category,description\n"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    path = tmp_path / ".days"
    monkeypatch.setenv("DAYS_HOME", str(path))
    return path


@pytest.fixture
def events_file(data_dir):
    data_dir.mkdir()
    path = data_dir / "events.csv"
    path.write_text(
        HEADER
        + "2024-06-10,work,standup\n"
        + "2024-06-20,work,planning\n"
        + "bad-date,x,y\n"
        + "2024-06-15,,solo walk\n"
        + "2024-06-14,home,laundry\n"
    )
    return path


@pytest.fixture(autouse=True)
def today():
    with patch.object(DateValue, "today", return_value=DateValue(2024, 6, 15)):
        yield DateValue(2024, 6, 15)


@pytest.fixture
def runner():
    return CliRunner()


class TestInit:
    def test_creates_store(self, runner, data_dir):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert (data_dir / "events.csv").read_text() == HEADER

    def test_existing_store(self, runner, events_file):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output


class TestList:
    def test_missing_data_dir(self, runner, data_dir):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 1
        assert "does not exist, please create it" in result.output

    def test_lists_all_in_storage_order(self, runner, events_file):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith("2024")]
        assert lines == [
            "2024-06-10: standup (work) - 5 days ago",
            "2024-06-20: planning (work) - in 5 days",
            "2024-06-15: solo walk () - today",
            "2024-06-14: laundry (home) - 1 days ago",
        ]

    def test_empty_when_file_missing(self, runner, data_dir):
        data_dir.mkdir()
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_today(self, runner, events_file):
        result = runner.invoke(main, ["list", "--today"])
        assert "2024-06-15: solo walk () - today" in result.output
        assert "standup" not in result.output

    def test_before_and_after_range(self, runner, events_file):
        result = runner.invoke(main, ["list", "--before-date", "2024-06-15", "--after-date", "2024-06-14"])
        assert result.exit_code == 0
        assert "laundry" in result.output
        assert "standup" not in result.output
        assert "solo walk" not in result.output

    def test_on_date(self, runner, events_file):
        result = runner.invoke(main, ["list", "--date", "2024-06-20"])
        assert "planning" in result.output
        assert "standup" not in result.output

    def test_on_malformed_date_lists_nothing(self, runner, events_file):
        result = runner.invoke(main, ["list", "--date", "2024-06-31"])
        assert result.exit_code == 0
        assert "2024-06" not in result.output

    def test_categories_exclude(self, runner, events_file):
        result = runner.invoke(main, ["list", "--categories", "work,home", "--exclude"])
        assert "solo walk" in result.output
        assert "standup" not in result.output
        assert "laundry" not in result.output

    def test_no_category(self, runner, events_file):
        result = runner.invoke(main, ["list", "--no-category"])
        assert "solo walk" in result.output
        assert "work" not in result.output

    def test_missing_date_stops_listing(self, runner, events_file):
        result = runner.invoke(main, ["list", "--before-date"])
        assert result.exit_code == 1
        assert "Missing date." in result.output
        assert "2024-06" not in result.output

    def test_conflicting_options(self, runner, events_file):
        result = runner.invoke(main, ["list", "--today", "--no-category"])
        assert result.exit_code == 1
        assert "cannot be combined" in result.output

    def test_json(self, runner, events_file):
        result = runner.invoke(main, ["list", "--json", "--categories", "home"])
        assert result.exit_code == 0
        start = result.output.index("[")
        rows = json.loads(result.output[start:])
        assert rows == [
            {"date": "2024-06-14", "category": "home", "description": "laundry", "delta": -1},
        ]


class TestAdd:
    def test_short_form(self, runner, events_file):
        result = runner.invoke(main, ["add", "--category", "gym", "--description", "legs"])
        assert result.exit_code == 0
        assert events_file.read_text().endswith("2024-06-15,gym,legs\n")

    def test_long_form(self, runner, events_file):
        result = runner.invoke(
            main, ["add", "--date", "2024-01-05", "--category", "home", "--description", "boiler fixed"]
        )
        assert result.exit_code == 0
        assert events_file.read_text().endswith("2024-01-05,home,boiler fixed\n")

    def test_invalid_options_write_nothing(self, runner, events_file):
        before = events_file.read_text()
        result = runner.invoke(main, ["add", "--category", "gym"])
        assert result.exit_code == 1
        assert "Invalid options" in result.output
        assert events_file.read_text() == before

    def test_bad_date_writes_nothing(self, runner, events_file):
        before = events_file.read_text()
        result = runner.invoke(
            main, ["add", "--date", "2024-02-30", "--category", "x", "--description", "y"]
        )
        assert result.exit_code == 1
        assert events_file.read_text() == before

    def test_added_event_is_listed(self, runner, data_dir):
        runner.invoke(main, ["init"])
        runner.invoke(main, ["add", "--category", "", "--description", "nap"])
        result = runner.invoke(main, ["list", "--no-category"])
        assert "2024-06-15: nap () - today" in result.output


class TestDelete:
    def test_deletes_rows(self, runner, events_file):
        result = runner.invoke(main, ["delete", "--date", "2024-06-10"])
        assert result.exit_code == 0
        assert "standup" not in events_file.read_text()
        assert "planning" in events_file.read_text()

    def test_dry_run(self, runner, events_file):
        before = events_file.read_text()
        result = runner.invoke(main, ["delete", "--date", "2024-06-10", "--dry-run"])
        assert result.exit_code == 0
        assert "Dry run, would delete:" in result.output
        assert "2024-06-10,work,standup" in result.output
        assert events_file.read_text() == before

    def test_substring_match_reaches_description(self, runner, events_file):
        with events_file.open("a") as f:
            f.write("2024-06-12,work,postmortem for 2024-06-10\n")
        runner.invoke(main, ["delete", "--date", "2024-06-10"])
        assert "postmortem" not in events_file.read_text()

    def test_missing_date(self, runner, events_file):
        before = events_file.read_text()
        result = runner.invoke(main, ["delete", "--date"])
        assert result.exit_code == 1
        assert "Missing date." in result.output
        assert events_file.read_text() == before
