"""Formatter for departure times and console table cells."""

from datetime import time

from rich.text import Text

from train_dispatch.domain.contracts.departure_formatter import DepartureFormatterProtocol
from train_dispatch.domain.models.departure import Departure

DELAY_STYLE = "yellow"
STRIKE_STYLE = "strike"


class DepartureFormatter(DepartureFormatterProtocol):
    """Formatter for departure times, rendering table cells as rich Text."""

    def format_time(self, value: time) -> str:
        """Format a time of day as absolute (HH:mm format)."""
        return value.strftime("%H:%M")

    def format_delay(self, departure: Departure) -> str:
        """Format the delay note, empty when the departure is on time."""
        if not departure.is_delayed:
            return ""
        return f"({departure.delay} min delay)"

    def format_effective_time(self, departure: Departure) -> str:
        """Format the delay-adjusted departure time."""
        return self.format_time(departure.effective_departure_time)

    def departure_time_text(self, departure: Departure) -> Text:
        """Departure time cell: the scheduled time, struck through with a note when delayed."""
        scheduled = self.format_time(departure.departure_time)
        if not departure.is_delayed:
            return Text(scheduled)

        cell = Text(style=DELAY_STYLE)
        cell.append(scheduled, style=STRIKE_STYLE)
        cell.append(f" {self.format_delay(departure)}")
        return cell

    def departed_time_text(self, departure: Departure) -> Text:
        return Text(self.format_effective_time(departure), style=STRIKE_STYLE)
