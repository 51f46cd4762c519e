"""Command line entry point for the train dispatch application."""

import argparse
import sys
from typing import Any

from pydantic import ValidationError

from train_dispatch.adapters.config import AppConfig
from train_dispatch.main import main


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="train-dispatch",
        description="Interactive departure register for a single train station",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with the built-in timetable and the device clock
  train-dispatch

  # Load the timetable from a TOML file and pretend it is 09:00
  train-dispatch --config-file timetable.toml --station-time 09:00

  # Start with an empty register and no colors
  train-dispatch --no-seed --no-color
        """,
    )
    parser.add_argument("--config-file", help="TOML file with [station] and [[departures]]")
    parser.add_argument("--station-time", help="Initial station time in HH:mm format")
    parser.add_argument(
        "--no-seed", action="store_true", help="Start with an empty departure register"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG, INFO, WARNING)")
    return parser


def config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map parsed arguments to AppConfig overrides. Unset flags fall back to env/defaults."""
    overrides: dict[str, Any] = {}
    if args.config_file:
        overrides["config_file"] = args.config_file
    if args.station_time:
        overrides["station_time"] = args.station_time
    if args.no_seed:
        overrides["seed_departures"] = False
    if args.no_color:
        overrides["use_color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    return overrides


def cli_main(argv: list[str] | None = None) -> None:
    """Synchronous entry point for the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig(**config_overrides(args))
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    sys.exit(main(config))


if __name__ == "__main__":
    cli_main()
