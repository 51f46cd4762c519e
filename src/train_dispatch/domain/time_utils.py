"""Time-of-day helpers shared by the register and the input boundary."""

import re
from datetime import time
from typing import TYPE_CHECKING

from train_dispatch.domain.errors import TimeFormatError

if TYPE_CHECKING:
    from train_dispatch.domain.models.departure import Departure

# ASCII digits only
HHMM_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def parse_hhmm(text: str) -> time:
    """Parse a strict 24-hour 'HH:mm' string (e.g. '08:55').

    Args:
        text: The string to parse. Surrounding whitespace is ignored.

    Returns:
        The parsed time with seconds set to zero.

    Raises:
        TimeFormatError: If the string is not two digits, a colon and two digits,
            or the hour/minute is out of range.
    """
    candidate = text.strip()
    if not HHMM_PATTERN.fullmatch(candidate):
        raise TimeFormatError(
            f"Invalid time format '{text}'. Please use HH:mm format (e.g., 08:30)."
        )
    hours, minutes = (int(part) for part in candidate.split(":"))
    try:
        return time(hours, minutes)
    except ValueError as e:
        raise TimeFormatError(f"Invalid time '{text}': {e}") from e


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def truncate_to_minute(value: time) -> time:
    return value.replace(second=0, microsecond=0)


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute


def effective_departure_minutes(departure: "Departure") -> int:
    """Delay-adjusted departure in minutes since midnight.

    Not wrapped at midnight: a 23:30 departure delayed 60 minutes yields 1470,
    so late trains never look like early-morning ones.
    """
    return minutes_since_midnight(departure.departure_time) + departure.delay
