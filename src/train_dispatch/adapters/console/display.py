"""Console presenter for the departure register."""

from collections.abc import Iterable
from datetime import date

from rich.console import Console
from rich.table import Table
from rich.text import Text

from train_dispatch.adapters.console.formatters.departure_formatter import DepartureFormatter
from train_dispatch.application.services import DepartureRegister
from train_dispatch.domain.models import MAX_TRACK, Departure

SEPARATOR_LINE = "=" * 51

DEPARTURE_COLUMNS = [
    "Departure Station",
    "Destination",
    "Departure Time",
    "Track",
    "Line",
    "Train Number",
]

REMOVED_COLUMNS = ["Train Number", "Route", "Departed", "Line", "Track"]

MENU_OPTIONS = [
    (1, "View train departures (table)"),
    (2, "Add a new train departure"),
    (3, "Set delay for a train departure"),
    (4, "Assign a new track to a train departure"),
    (5, "Search for a departure by train number"),
    (6, "Search for a departure by destination"),
    (7, "Search for a departure by departure time"),
    (8, "Sort the departures by departure time"),
    (9, "Remove departures that have left (uses station time)"),
    (10, "Update the station time"),
    (11, "Remove a train departure"),
    (12, "Remove all train departures"),
    (13, "Help"),
    (0, "Exit"),
]


class ConsoleDisplay:
    """Renders register contents as tables on a rich console."""

    def __init__(
        self,
        register: DepartureRegister,
        formatter: DepartureFormatter,
        console: Console,
    ) -> None:
        self._register = register
        self._formatter = formatter
        self._console = console

    def _write(self, text: str, style: str | None = None) -> None:
        self._console.print(text, style=style, markup=False, soft_wrap=True)

    def _departure_table(self, departures: Iterable[Departure], title: str | None = None) -> Table:
        table = Table(title=title, title_justify="left", header_style="bold")
        for header in DEPARTURE_COLUMNS:
            table.add_column(header, no_wrap=True)
        for departure in departures:
            table.add_row(
                Text(departure.departure_station),
                Text(departure.destination),
                self._formatter.departure_time_text(departure),
                Text(str(departure.track)),
                Text(departure.line),
                Text(departure.train_number),
            )
        return table

    def display_station_header(self) -> None:
        """Show the station name, station time and today's date."""
        station_time = self._formatter.format_time(self._register.get_station_time())
        self._write(SEPARATOR_LINE)
        self._write(
            f"|   {self._register.station_name} Station   |  {station_time}  |  "
            f"{date.today().isoformat()}  |",
            style="bold",
        )
        self._write(SEPARATOR_LINE)

    def display_welcome(self) -> None:
        self._write(SEPARATOR_LINE)
        self._write("|       Welcome to the Train Dispatch System        |", style="bold cyan")
        self._write(SEPARATOR_LINE)

    def display_menu(self) -> None:
        self._write("Main Menu", style="bold")
        self._write("Please select an option from the menu below:")
        self._write(SEPARATOR_LINE)
        for number, label in MENU_OPTIONS:
            self._write(f"| {number:>2}. {label}")
        self._write(SEPARATOR_LINE)

    def display_departure_table(self, departures: Iterable[Departure]) -> None:
        """Show every departure in the given order."""
        table = self._departure_table(departures)
        if table.row_count == 0:
            table.caption = "No train departures available"
        self._console.print(table)

    def display_search_results(self, departures: Iterable[Departure]) -> None:
        """Show search matches, or a not-found notice when there are none."""
        table = self._departure_table(departures, title="Departure details from the search results:")
        if table.row_count == 0:
            self._write(SEPARATOR_LINE)
            self._write("Train was not found.", style="red")
            self._write(SEPARATOR_LINE)
            return
        self._console.print(table)

    def display_removed_departures(self, departures: list[Departure]) -> None:
        """Show the departures removed because they have left."""
        if not departures:
            self._write("No departures have left before the station time.")
            return

        table = Table(
            title="Removed train departures", title_justify="left", header_style="bold"
        )
        for header in REMOVED_COLUMNS:
            table.add_column(header, no_wrap=True)
        for departure in departures:
            table.add_row(
                Text(departure.train_number),
                Text(f"{departure.departure_station} --> {departure.destination}"),
                self._formatter.departed_time_text(departure),
                Text(departure.line),
                Text(str(departure.track)),
                style="yellow",
            )
        self._console.print(table)

    def display_guide(self) -> None:
        """Show the help text for the menu."""
        guide = [
            "#" * 79,
            "  Here are some tips to get you started:",
            "",
            " - Enter '1' to see the departure table.",
            " - Enter '2' to add a new departure. You will be asked for the train number,",
            "   destination, departure time (HH:mm), train line and track.",
            " - Enter '3' to set a delay (0-60 minutes). Enter '0' as the delay to remove it.",
            f" - Enter '4' to assign a new track. {self._register.station_name} Station has "
            f"{MAX_TRACK} tracks.",
            " - Options '5', '6' and '7' search by train number, destination and departure time.",
            " - Enter '8' to sort the departures by departure time.",
            " - Enter '9' to remove departures that have left, taking delays into account.",
            " - The station time is taken from your device. Enter '10' to change it.",
            " - Options '11' and '12' remove one or all departures.",
            " - Enter '0' to exit the application.",
            "#" * 79,
        ]
        self._write("\n".join(guide), style="green")
