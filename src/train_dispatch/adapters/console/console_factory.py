"""Builds rich consoles honoring the color settings."""

from typing import TextIO

from rich.console import Console

from train_dispatch.adapters.config.app_config import AppConfig


def build_console(
    config: AppConfig,
    file: TextIO | None = None,
    *,
    stderr: bool = False,
    width: int | None = None,
) -> Console:
    """Create a console for menu output.

    With colors disabled no escape codes are written at all, so the output
    stays plain text even on a terminal.

    Args:
        config: Application configuration with color settings.
        file: Stream to write to. Defaults to stdout (or stderr).
        stderr: Write to stderr when no file is given.
        width: Fixed width in cells. Defaults to the terminal width.
    """
    return Console(
        file=file,
        stderr=stderr,
        width=width,
        no_color=not config.use_color,
        force_terminal=None if config.use_color else False,
        highlight=False,
        emoji=False,
    )
