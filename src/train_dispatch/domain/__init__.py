"""Domain layer - core business rules and models."""

from train_dispatch.domain.errors import TimeFormatError
from train_dispatch.domain.models import Departure, SearchAttribute
from train_dispatch.domain.ports import DisplayAdapter

__all__ = [
    "Departure",
    "DisplayAdapter",
    "SearchAttribute",
    "TimeFormatError",
]
