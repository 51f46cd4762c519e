"""Application services (use cases) for departure management."""

from train_dispatch.application.services.departure_register import DepartureRegister

__all__ = ["DepartureRegister"]
