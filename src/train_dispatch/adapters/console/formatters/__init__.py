"""Console formatters."""

from train_dispatch.adapters.console.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
