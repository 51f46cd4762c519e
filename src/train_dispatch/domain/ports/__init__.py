"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_dispatch.domain.ports.display_adapter import DisplayAdapter

__all__ = ["DisplayAdapter"]
