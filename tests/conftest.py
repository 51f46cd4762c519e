"""Shared fixtures."""

from collections.abc import Callable
from datetime import time

import pytest

from train_dispatch.domain.models import Departure

CONFIG_ENV_VARS = (
    "STATION_NAME",
    "STATION_TIME",
    "CONFIG_FILE",
    "SEED_DEPARTURES",
    "USE_COLOR",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of AppConfig in tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_departure(
    train_number: str = "101",
    destination: str = "Oslo",
    departure_time: time = time(8, 55),
    line: str = "F1",
    track: int = 1,
    delay: int = 0,
    departure_station: str = "Gjøvik",
) -> Departure:
    return Departure(
        departure_station=departure_station,
        destination=destination,
        departure_time=departure_time,
        line=line,
        track=track,
        train_number=train_number,
        delay=delay,
    )


@pytest.fixture
def departure_factory() -> Callable[..., Departure]:
    """Build valid departures from Gjøvik, overriding only what a test cares about."""
    return make_departure
