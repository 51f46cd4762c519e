"""Departure domain model."""

from datetime import date, datetime, time, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from train_dispatch.domain.time_utils import truncate_to_minute

MIN_TRACK = 1
MAX_TRACK = 10
MAX_DELAY_MINUTES = 60


class Departure(BaseModel):
    """Represents one scheduled train trip from the station.

    Every assignment is validated, so an out-of-range track or delay is
    rejected and the previous value is kept. The train number is the
    register key and cannot be reassigned once the departure exists.
    """

    model_config = ConfigDict(validate_assignment=True)

    departure_station: str
    destination: str
    departure_time: time
    line: str
    track: int = Field(strict=True, ge=MIN_TRACK, le=MAX_TRACK)
    train_number: str = Field(frozen=True)
    delay: int = Field(default=0, strict=True, ge=0, le=MAX_DELAY_MINUTES)  # Minutes

    @field_validator("departure_station", "destination")
    @classmethod
    def validate_place_name(cls, v: str) -> str:
        """Validate place names are non-empty and contain letters only (e.g. 'Gjøvik')."""
        v = v.strip()
        if not v or not v.isalpha():
            raise ValueError("must contain only letters and cannot be empty")
        return v

    @field_validator("line", "train_number")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate identifiers are not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty")
        return v

    @field_validator("departure_time")
    @classmethod
    def validate_departure_time(cls, v: time) -> time:
        """Departures are scheduled with hour:minute granularity."""
        return truncate_to_minute(v)

    @property
    def is_delayed(self) -> bool:
        return self.delay > 0

    @property
    def effective_departure_time(self) -> time:
        """Scheduled time plus delay, as a time of day (wraps past midnight)."""
        scheduled = datetime.combine(date.min, self.departure_time)
        return (scheduled + timedelta(minutes=self.delay)).time()

    def set_delay(self, minutes: int) -> None:
        """Set the delay in minutes (0-60). Raises ValidationError when out of range."""
        self.delay = minutes

    def set_track(self, track: int) -> None:
        """Assign a new track (1-10). Raises ValidationError when out of range."""
        self.track = track

    def set_departure_time(self, departure_time: time) -> None:
        self.departure_time = departure_time
