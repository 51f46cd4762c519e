"""Contracts (protocols) implemented by adapters."""

from train_dispatch.domain.contracts.departure_formatter import DepartureFormatterProtocol

__all__ = ["DepartureFormatterProtocol"]
