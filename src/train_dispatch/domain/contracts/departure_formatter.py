"""Protocol for formatting departures for display."""

from datetime import time
from typing import Protocol

from train_dispatch.domain.models.departure import Departure


class DepartureFormatterProtocol(Protocol):
    """Protocol for formatting departure times and delay notes."""

    def format_time(self, value: time) -> str:
        """Format a time of day as absolute (HH:mm format).

        Args:
            value: The time to format.

        Returns:
            Absolute time string like "14:30".
        """
        ...

    def format_delay(self, departure: Departure) -> str:
        """Format the delay note of a departure.

        Args:
            departure: The departure to format.

        Returns:
            "(N min delay)" when delayed, or an empty string when on time.
        """
        ...

    def format_effective_time(self, departure: Departure) -> str:
        """Format the delay-adjusted departure time (HH:mm format)."""
        ...
