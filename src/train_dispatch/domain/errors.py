"""Domain errors."""


class TimeFormatError(ValueError):
    """Raised when a time value does not match the strict HH:mm format."""
