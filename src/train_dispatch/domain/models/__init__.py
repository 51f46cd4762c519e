"""Domain models for train dispatch."""

from train_dispatch.domain.models.departure import (
    MAX_DELAY_MINUTES,
    MAX_TRACK,
    MIN_TRACK,
    Departure,
)
from train_dispatch.domain.models.search_attribute import SearchAttribute

__all__ = [
    "MAX_DELAY_MINUTES",
    "MAX_TRACK",
    "MIN_TRACK",
    "Departure",
    "SearchAttribute",
]
