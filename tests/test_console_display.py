"""Tests for the console presenter."""

import io
from collections.abc import Callable
from datetime import date, time

import pytest
from rich.cells import cell_len
from rich.console import Console

from train_dispatch.adapters.config import AppConfig
from train_dispatch.adapters.console import ConsoleDisplay, DepartureFormatter, build_console
from train_dispatch.application.services import DepartureRegister
from train_dispatch.domain.models import Departure

DepartureFactory = Callable[..., Departure]


@pytest.fixture
def register() -> DepartureRegister:
    return DepartureRegister("Gjøvik", station_time=time(9, 5))


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def display(register: DepartureRegister, output: io.StringIO) -> ConsoleDisplay:
    console = build_console(AppConfig(_env_file=None, use_color=False), file=output, width=120)
    return ConsoleDisplay(register, DepartureFormatter(), console)


def _table_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def test_station_header_shows_station_time_and_date(
    display: ConsoleDisplay, output: io.StringIO
) -> None:
    """Given a station time, when showing the header, then name, time and date are printed."""
    display.display_station_header()

    text = output.getvalue()
    assert "Gjøvik Station" in text
    assert "09:05" in text
    assert date.today().isoformat() in text


def test_departure_table_lists_every_departure(
    display: ConsoleDisplay,
    output: io.StringIO,
    register: DepartureRegister,
    departure_factory: DepartureFactory,
) -> None:
    """Given departures, when showing the table, then each appears as a row with all columns."""
    register.add_departure(departure_factory(train_number="101", destination="Oslo", line="F1", track=1))
    register.add_departure(departure_factory(train_number="104", destination="Tromsø", line="F2", track=4))

    display.display_departure_table(register.iterate_all())

    text = output.getvalue()
    for header in ["Departure Station", "Destination", "Departure Time", "Track", "Line", "Train Number"]:
        assert header in text
    rows = [line for line in text.splitlines() if "Gjøvik" in line]
    assert len(rows) == 2
    assert "Oslo" in rows[0] and "101" in rows[0] and "F1" in rows[0]
    assert "Tromsø" in rows[1] and "104" in rows[1]


def test_departure_table_rows_align_when_delayed(
    display: ConsoleDisplay,
    output: io.StringIO,
    register: DepartureRegister,
    departure_factory: DepartureFactory,
) -> None:
    """Given delayed and on-time departures, when showing the table, then every line has one width."""
    register.add_departure(departure_factory(train_number="101"))
    register.add_departure(departure_factory(train_number="102", delay=15))

    display.display_departure_table(register.iterate_all())

    text = output.getvalue()
    assert "08:55 (15 min delay)" in text
    assert len({cell_len(line) for line in _table_lines(text)}) == 1


def test_departure_table_aligns_wide_and_long_destinations(
    display: ConsoleDisplay,
    output: io.StringIO,
    register: DepartureRegister,
    departure_factory: DepartureFactory,
) -> None:
    """Given double-width and long destinations, when showing the table, then columns line up."""
    register.add_departure(departure_factory(train_number="201", destination="東京"))
    register.add_departure(departure_factory(train_number="202", destination="Kristiansand"))

    display.display_departure_table(register.iterate_all())

    lines = _table_lines(output.getvalue())
    assert len({cell_len(line) for line in lines}) == 1
    wide_row = next(line for line in lines if "東京" in line)
    long_row = next(line for line in lines if "Kristiansand" in line)
    assert cell_len(wide_row[: wide_row.index("08:55")]) == cell_len(long_row[: long_row.index("08:55")])


def test_empty_table_says_no_departures(display: ConsoleDisplay, output: io.StringIO) -> None:
    """Given an empty register, when showing the table, then a notice is printed."""
    display.display_departure_table([])

    assert "No train departures available" in output.getvalue()


def test_search_results_not_found(display: ConsoleDisplay, output: io.StringIO) -> None:
    """Given no matches, when showing search results, then says the train was not found."""
    display.display_search_results(iter([]))

    assert "Train was not found." in output.getvalue()


def test_search_results_show_matches(
    display: ConsoleDisplay, output: io.StringIO, departure_factory: DepartureFactory
) -> None:
    """Given matches, when showing search results, then they are listed."""
    display.display_search_results(iter([departure_factory(train_number="103", destination="Lillehammer")]))

    text = output.getvalue()
    assert "Lillehammer" in text
    assert "Train was not found." not in text


def test_removed_departures_listed(
    display: ConsoleDisplay, output: io.StringIO, departure_factory: DepartureFactory
) -> None:
    """Given removed departures, when showing them, then train and route are printed."""
    display.display_removed_departures([departure_factory(train_number="103", destination="Lillehammer")])

    text = output.getvalue()
    assert "Removed train departures" in text
    assert "103" in text
    assert "Gjøvik --> Lillehammer" in text


def test_no_removed_departures(display: ConsoleDisplay, output: io.StringIO) -> None:
    """Given nothing removed, when showing removed departures, then a notice is printed."""
    display.display_removed_departures([])

    assert "No departures have left" in output.getvalue()


def test_menu_lists_all_options(display: ConsoleDisplay, output: io.StringIO) -> None:
    """Given the menu, when showing it, then every option from 0 to 13 is listed."""
    display.display_menu()

    text = output.getvalue()
    for number in range(14):
        assert f"{number:>2}. " in text


def test_guide_mentions_station(display: ConsoleDisplay, output: io.StringIO) -> None:
    """Given the guide, when showing it, then it names the station and its track count."""
    display.display_guide()

    assert "Gjøvik Station has 10 tracks" in output.getvalue()


def test_no_color_console_writes_no_escape_codes(
    display: ConsoleDisplay,
    output: io.StringIO,
    register: DepartureRegister,
    departure_factory: DepartureFactory,
) -> None:
    """Given colors disabled, when showing a delayed departure, then the output is plain text."""
    register.add_departure(departure_factory(delay=5))

    display.display_departure_table(register.iterate_all())
    display.display_guide()

    assert "\x1b[" not in output.getvalue()


def test_no_color_config_builds_plain_console() -> None:
    """Given colors disabled, when building the console, then it is neither colored nor a terminal."""
    console = build_console(AppConfig(_env_file=None, use_color=False), file=io.StringIO())

    assert console.no_color is True
    assert console.is_terminal is False


def test_color_terminal_strikes_delayed_time(
    register: DepartureRegister, departure_factory: DepartureFactory
) -> None:
    """Given a color terminal, when showing a delayed departure, then the time is struck through."""
    output = io.StringIO()
    console = Console(file=output, width=120, force_terminal=True, color_system="standard")
    register.add_departure(departure_factory(delay=5))

    ConsoleDisplay(register, DepartureFormatter(), console).display_departure_table(
        register.iterate_all()
    )

    assert "\x1b[9" in output.getvalue()
