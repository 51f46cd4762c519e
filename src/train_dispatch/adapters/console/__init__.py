"""Console adapters: presenter, input boundary and menu."""

from train_dispatch.adapters.console.console_factory import build_console
from train_dispatch.adapters.console.display import ConsoleDisplay
from train_dispatch.adapters.console.feedback import UserFeedback
from train_dispatch.adapters.console.formatters import DepartureFormatter
from train_dispatch.adapters.console.input_handler import InputHandler
from train_dispatch.adapters.console.menu import MenuController

__all__ = [
    "ConsoleDisplay",
    "DepartureFormatter",
    "InputHandler",
    "MenuController",
    "UserFeedback",
    "build_console",
]
