"""Tests for the seed timetable loader."""

import logging
from datetime import time
from pathlib import Path

import pytest

from train_dispatch.adapters.config import AppConfig, DepartureSeedLoader
from train_dispatch.adapters.config.departure_seed_loader import DEFAULT_TIMETABLE


def test_loads_builtin_timetable_without_config_file() -> None:
    """Given no config file, when loading, then the five built-in departures are returned."""
    departures = DepartureSeedLoader.load(AppConfig(_env_file=None))

    assert [d.train_number for d in departures] == ["101", "102", "103", "104", "105"]
    assert len(departures) == len(DEFAULT_TIMETABLE)
    assert departures[0].destination == "Oslo"
    assert departures[0].departure_time == time(20, 25)
    assert departures[3].destination == "Tromsø"
    assert all(d.departure_station == "Gjøvik" for d in departures)


def test_returns_nothing_when_seeding_disabled() -> None:
    """Given seeding disabled, when loading, then no departures are returned."""
    assert DepartureSeedLoader.load(AppConfig(_env_file=None, seed_departures=False)) == []


def test_uses_configured_station_name() -> None:
    """Given another station, when loading the built-in timetable, then it departs from there."""
    departures = DepartureSeedLoader.load(AppConfig(_env_file=None, station_name="Hamar"))

    assert {d.departure_station for d in departures} == {"Hamar"}


def test_loads_departures_from_toml(tmp_path: Path) -> None:
    """Given a TOML timetable, when loading, then its departures are built."""
    config_path = tmp_path / "timetable.toml"
    config_path.write_text(
        """
[[departures]]
train_number = "301"
destination = "Bergen"
departure_time = "06:40"
line = "F4"
track = 7
delay = 5

[[departures]]
train_number = 302
destination = "Oslo"
departure_time = 07:10:00
line = "R10"
track = 1
""",
        encoding="utf-8",
    )

    departures = DepartureSeedLoader.load(AppConfig(_env_file=None, config_file=str(config_path)))

    assert [d.train_number for d in departures] == ["301", "302"]
    assert departures[0].delay == 5
    assert departures[0].track == 7
    assert departures[1].departure_time == time(7, 10)


def test_skips_invalid_entries_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Given invalid entries, when loading, then they are skipped and a warning is logged."""
    config_path = tmp_path / "timetable.toml"
    config_path.write_text(
        """
[[departures]]
train_number = "401"
destination = "Oslo"
departure_time = "8:55"
line = "F1"
track = 1

[[departures]]
train_number = "402"
destination = "Oslo"
departure_time = "09:00"
line = "F1"
track = 11

[[departures]]
train_number = "403"
destination = "Oslo"
line = "F1"
track = 1

[[departures]]
train_number = "404"
destination = "Oslo"
departure_time = "10:00"
line = "F1"
track = 3
""",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        departures = DepartureSeedLoader.load(
            AppConfig(_env_file=None, config_file=str(config_path))
        )

    assert [d.train_number for d in departures] == ["404"]
    assert "Skipping invalid departure 401" in caplog.text
    assert "Skipping invalid departure 402" in caplog.text
    assert "Skipping invalid departure 403" in caplog.text
