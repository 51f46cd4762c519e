"""Seed timetable loader."""

import logging
from datetime import time
from typing import Any

from pydantic import ValidationError

from train_dispatch.adapters.config.app_config import AppConfig
from train_dispatch.domain.models.departure import Departure
from train_dispatch.domain.time_utils import parse_hhmm

logger = logging.getLogger(__name__)

DEFAULT_TIMETABLE: list[dict[str, Any]] = [
    {"train_number": "101", "destination": "Oslo", "departure_time": "20:25", "line": "F1", "track": 1},
    {"train_number": "102", "destination": "Bergen", "departure_time": "16:00", "line": "F1", "track": 2},
    {"train_number": "103", "destination": "Lillehammer", "departure_time": "08:55", "line": "F1", "track": 3},
    {"train_number": "104", "destination": "Tromsø", "departure_time": "15:55", "line": "F2", "track": 4},
    {"train_number": "105", "destination": "Gardermoen", "departure_time": "13:15", "line": "F13", "track": 5},
]


class DepartureSeedLoader:
    """Loads the initial departures from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[Departure]:
        """Load seed departures from app config.

        Uses the [[departures]] tables of the TOML config file if present,
        otherwise the built-in timetable. Invalid entries are skipped.
        """
        if not config.seed_departures:
            return []

        departures_data = config.get_departures_config()
        if departures_data is None:
            departures_data = DEFAULT_TIMETABLE

        departures: list[Departure] = []
        for departure_data in departures_data:
            try:
                departures.append(DepartureSeedLoader._build(departure_data, config.station_name))
            except (KeyError, ValueError) as e:
                # ValidationError and TimeFormatError are both ValueErrors
                reason = e.errors()[0]["msg"] if isinstance(e, ValidationError) else str(e)
                logger.warning(
                    f"Skipping invalid departure {departure_data.get('train_number', '?')}: {reason}"
                )

        return departures

    @staticmethod
    def _build(departure_data: dict[str, Any], station_name: str) -> Departure:
        departure_time = departure_data["departure_time"]
        # TOML local times (08:55:00) arrive as time objects, quoted values as strings
        if not isinstance(departure_time, time):
            departure_time = parse_hhmm(str(departure_time))

        return Departure(
            departure_station=departure_data.get("departure_station", station_name),
            destination=departure_data["destination"],
            departure_time=departure_time,
            line=str(departure_data["line"]),
            track=departure_data["track"],
            train_number=str(departure_data["train_number"]),
            delay=departure_data.get("delay", 0),
        )
