"""Searchable departure attributes."""

from enum import StrEnum


class SearchAttribute(StrEnum):
    """Attributes a departure can be looked up by."""

    TRAIN_NUMBER = "train_number"
    DESTINATION = "destination"
    DEPARTURE_TIME = "departure_time"

    @classmethod
    def from_name(cls, name: str) -> "SearchAttribute | None":
        """Resolve an attribute name, accepting camelCase aliases.

        Returns None for unknown names so callers can treat them as "no matches".
        """
        try:
            return cls(name)
        except ValueError:
            return _CAMEL_CASE_ALIASES.get(name)


_CAMEL_CASE_ALIASES = {
    "trainNumber": SearchAttribute.TRAIN_NUMBER,
    "departureTime": SearchAttribute.DEPARTURE_TIME,
}
