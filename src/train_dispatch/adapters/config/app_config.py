"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from datetime import time
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from train_dispatch.domain.time_utils import parse_hhmm


def _check_station_name(name: str) -> str:
    name = name.strip()
    if not name or not name.isalpha():
        raise ValueError("station_name must contain only letters and cannot be empty")
    return name


def _check_station_time(value: str) -> str:
    # Raises TimeFormatError (a ValueError) on anything but HH:mm
    parse_hhmm(value)
    return value.strip()


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Station configuration
    station_name: str = Field(
        default="Gjøvik",
        description="The single departure station served by this register",
    )
    station_time: str | None = Field(
        default=None,
        description="Initial station time in HH:mm format. Defaults to the device clock.",
    )

    # Timetable configuration
    # If not set, the built-in timetable is used for seeding
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [station] and [[departures]]",
    )
    seed_departures: bool = Field(
        default=True,
        description="Populate the register with the configured timetable on start",
    )

    # Console configuration
    use_color: bool = Field(default=True, description="Use colors in console output")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("station_name")
    @classmethod
    def validate_station_name(cls, v: str) -> str:
        """Validate the station name contains letters only."""
        return _check_station_name(v)

    @field_validator("station_time")
    @classmethod
    def validate_station_time(cls, v: str | None) -> str | None:
        """Validate station time is in strict HH:mm format."""
        if v is None:
            return v
        return _check_station_time(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def get_station_time(self) -> time | None:
        """Return the configured initial station time, if any."""
        if self.station_time is None:
            return None
        return parse_hhmm(self.station_time)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating station settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load the timetable")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # TOML only fills station settings not given explicitly (init, env or CLI)
        station = toml_data.get("station", {})
        if isinstance(station, dict):
            explicit = self.model_fields_set
            if "name" in station and "station_name" not in explicit:
                self.station_name = _check_station_name(str(station["name"]))
            if "time" in station and "station_time" not in explicit:
                self.station_time = _check_station_time(str(station["time"]))

        return toml_data

    def get_departures_config(self) -> list[dict[str, Any]] | None:
        """Parse and return the [[departures]] tables from the TOML file.

        Returns None when no config file is set or the file defines no departures,
        meaning the built-in timetable should be used.

        Raises ValueError if 'departures' is present but not a list of tables.
        """
        if not self.config_file:
            return None

        toml_data = self._load_toml_data()
        if "departures" not in toml_data:
            return None

        departures = toml_data["departures"]
        if not isinstance(departures, list):
            raise ValueError("TOML config 'departures' must be a list")
        return [d for d in departures if isinstance(d, dict)]
