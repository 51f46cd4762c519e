"""Departure register: the single owner of a station's departures."""

import logging
from collections.abc import Iterator
from datetime import datetime, time

from train_dispatch.domain.errors import TimeFormatError
from train_dispatch.domain.models import Departure, SearchAttribute
from train_dispatch.domain.time_utils import (
    effective_departure_minutes,
    format_hhmm,
    minutes_since_midnight,
    truncate_to_minute,
)

logger = logging.getLogger(__name__)


class DepartureRegister:
    """In-memory catalog of departures keyed by train number.

    The register is the only authority on train number uniqueness and on
    expiry. It also holds the station's adjustable notion of "now", which is
    the default reference point for removing departures that have left.
    Iteration order is insertion order until sort_by_departure_time() is called.
    """

    def __init__(self, station_name: str, station_time: time | None = None) -> None:
        """Initialize an empty register.

        Args:
            station_name: The only departure station accepted by this register.
            station_time: Initial station time. Defaults to the current wall clock.
        """
        self._station_name = station_name
        self._departures: dict[str, Departure] = {}
        if station_time is None:
            station_time = datetime.now().time()
        self._station_time = truncate_to_minute(station_time)

    @property
    def station_name(self) -> str:
        return self._station_name

    @property
    def station_time(self) -> time:
        return self._station_time

    def get_station_time(self) -> time:
        return self._station_time

    def update_station_time(self, new_time: time) -> None:
        """Set the station time.

        Raises:
            TimeFormatError: If new_time is not a time of day.
        """
        if not isinstance(new_time, time):
            raise TimeFormatError(
                f"Station time must be a time of day in HH:mm format, got {new_time!r}"
            )
        self._station_time = truncate_to_minute(new_time)
        logger.debug(f"Station time updated to {format_hhmm(self._station_time)}")

    def add_departure(self, departure: Departure | None) -> bool:
        """Register a departure under its train number.

        Duplicates are an expected condition in interactive use, so rejection is
        reported through the return value rather than an exception.

        Returns:
            True if the departure was added, False if it was None, belongs to
            another station, or its train number is already registered.
        """
        if departure is None:
            return False
        train_number = departure.train_number
        if not train_number:
            return False
        if departure.departure_station != self._station_name:
            logger.debug(
                f"Rejected train {train_number}: departs from "
                f"{departure.departure_station}, not {self._station_name}"
            )
            return False
        if train_number in self._departures:
            logger.debug(f"Rejected train {train_number}: train number already registered")
            return False

        self._departures[train_number] = departure
        return True

    def get_by_train_number(self, train_number: str) -> Departure | None:
        return self._departures.get(train_number)

    def remove_by_train_number(self, train_number: str) -> bool:
        """Remove a departure. Removing an unknown train number is a no-op.

        Returns:
            True if a departure was removed.
        """
        return self._departures.pop(train_number, None) is not None

    def remove_all(self) -> None:
        self._departures.clear()

    def sort_by_departure_time(self) -> None:
        """Reorder the register by departure time, ascending.

        Ties are broken by train number so the order is total and sorting is
        idempotent.
        """
        ordered = sorted(
            self._departures.values(),
            key=lambda d: (d.departure_time, d.train_number),
        )
        self._departures = {d.train_number: d for d in ordered}

    def remove_expired(self, reference_time: time | None = None) -> list[Departure]:
        """Remove departures whose delay-adjusted time is before the reference time.

        Args:
            reference_time: The cutoff. Defaults to the station time.

        Returns:
            The removed departures, in their previous iteration order.
        """
        if reference_time is None:
            reference_time = self._station_time
        cutoff = minutes_since_midnight(truncate_to_minute(reference_time))

        expired = [d for d in self._departures.values() if effective_departure_minutes(d) < cutoff]
        for departure in expired:
            del self._departures[departure.train_number]

        if expired:
            logger.debug(
                f"Removed {len(expired)} departure(s) before {format_hhmm(reference_time)}: "
                f"{', '.join(d.train_number for d in expired)}"
            )
        return expired

    def find_by_attribute(self, attribute_name: str, value: str) -> Iterator[Departure]:
        """Lazily yield departures whose attribute equals value.

        Supported attributes are train_number, destination and departure_time
        (camelCase names are accepted too). Departure times are compared in
        their HH:mm form. Unknown attribute names yield nothing.
        """
        attribute = SearchAttribute.from_name(attribute_name)
        if attribute is None:
            return
        for departure in self._departures.values():
            if _attribute_value(departure, attribute) == value:
                yield departure

    def iterate_all(self) -> Iterator[Departure]:
        """Iterate over current departures in current order.

        Reflects live state; do not mutate the register while iterating.
        """
        return iter(self._departures.values())

    def __iter__(self) -> Iterator[Departure]:
        return self.iterate_all()

    def __len__(self) -> int:
        return len(self._departures)

    def __contains__(self, train_number: object) -> bool:
        return train_number in self._departures


def _attribute_value(departure: Departure, attribute: SearchAttribute) -> str:
    if attribute is SearchAttribute.DEPARTURE_TIME:
        return format_hhmm(departure.departure_time)
    if attribute is SearchAttribute.DESTINATION:
        return departure.destination
    return departure.train_number
