"""Application layer - use cases and services."""
