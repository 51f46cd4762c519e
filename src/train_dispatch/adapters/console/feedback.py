"""User-facing prompts, error and success messages."""

from pydantic import ValidationError
from rich.console import Console

PROMPTS = {
    "menu_choice": "Please input your choice below (0-13):",
    "train_number": "Please enter the train number:",
    "destination": "Please enter the destination:",
    "departure_time": "Please enter the departure time (HH:mm):",
    "line": "Please enter the train line:",
    "track": "Please enter the track number (1-10):",
    "delay": "Please enter the delay in minutes (0-60):",
    "station_time": "Enter the new station time (HH:mm):",
}

ERRORS = {
    "invalid_choice": "Invalid choice. Please try again.",
    "invalid_input": "Invalid input! Please try again.",
    "invalid_integer": "Please enter a whole number.",
    "not_found": "Train departure was not found.",
    "train_not_added": "Train was not added. The train number may already be registered.",
    "failed_to_set_delay": "Failed to set the delay.",
    "failed_to_assign_track": "Failed to assign the track.",
}

SUCCESSES = {
    "added": "Train added successfully.",
    "delay_set": "Delay set successfully.",
    "track_assigned": "Track assigned successfully.",
    "sorted": "Train departures sorted successfully.",
    "expired_removed": "Departures updated successfully.",
    "station_time_updated": "Station time updated successfully.",
    "removed": "Train departure removed.",
    "all_removed": "All train departures removed.",
    "goodbye": "Exiting the application. Goodbye!",
}


def describe_error(error: ValueError) -> str:
    """Turn a validation or format error into a one-line message."""
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
            for detail in error.errors()
        )
    return str(error)


class UserFeedback:
    """Writes prompts, warnings and confirmations to the console."""

    def __init__(self, console: Console, error_console: Console | None = None) -> None:
        self._console = console
        self._error_console = error_console if error_console is not None else console

    def prompt(self, key: str) -> None:
        self._console.print(
            PROMPTS.get(key, f"{key}:"), style="black on yellow", markup=False, soft_wrap=True
        )

    def error(self, key: str) -> None:
        """Report a known error by key, or the given text if the key is unknown."""
        self._error_console.print(ERRORS.get(key, key), style="red", markup=False, soft_wrap=True)

    def error_from(self, error: ValueError) -> None:
        self.error(f"Error: {describe_error(error)}")

    def success(self, key: str) -> None:
        self._console.print(
            SUCCESSES.get(key, key), style="green", markup=False, soft_wrap=True
        )
