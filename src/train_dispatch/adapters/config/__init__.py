"""Configuration adapters."""

from train_dispatch.adapters.config.app_config import AppConfig
from train_dispatch.adapters.config.departure_seed_loader import DepartureSeedLoader

__all__ = ["AppConfig", "DepartureSeedLoader"]
