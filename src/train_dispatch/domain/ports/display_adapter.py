"""Display adapter port."""

from abc import ABC, abstractmethod


class DisplayAdapter(ABC):
    """Port for the interactive front end driving the departure register."""

    @abstractmethod
    def start(self) -> None:
        """Start the display adapter and block until the user quits."""
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop the display adapter."""
        ...
