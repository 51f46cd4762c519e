"""Main entry point for the train dispatch application."""

import logging
import sys

from train_dispatch.adapters.config import AppConfig, DepartureSeedLoader
from train_dispatch.adapters.console import (
    ConsoleDisplay,
    DepartureFormatter,
    InputHandler,
    MenuController,
    UserFeedback,
    build_console,
)
from train_dispatch.application.services import DepartureRegister

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr so it never mixes with the menu output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_register(config: AppConfig) -> DepartureRegister:
    """Create the register and seed it with the configured timetable."""
    # Seed loading may override the station name and time from the TOML file
    departures = DepartureSeedLoader.load(config)
    register = DepartureRegister(config.station_name, station_time=config.get_station_time())

    for departure in departures:
        if not register.add_departure(departure):
            logger.warning(
                f"Seed departure {departure.train_number} was not added "
                f"(duplicate train number or other station)"
            )
    logger.info(f"Loaded {len(register)} departure(s) for {register.station_name}")
    return register


def build_menu(config: AppConfig, register: DepartureRegister) -> MenuController:
    console = build_console(config)
    feedback = UserFeedback(console, error_console=build_console(config, stderr=True))
    display = ConsoleDisplay(register, DepartureFormatter(), console)
    input_handler = InputHandler(feedback, stream=sys.stdin)
    return MenuController(register, display, input_handler, feedback)


def main(config: AppConfig | None = None) -> int:
    """Main application entry point. Returns the process exit code."""
    if config is None:
        config = AppConfig()
    configure_logging(config.log_level)

    try:
        register = build_register(config)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    build_menu(config, register).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
