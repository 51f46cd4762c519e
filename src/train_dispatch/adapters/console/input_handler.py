"""Input boundary: reads and validates user input line by line."""

import sys
from datetime import time
from typing import TextIO

from train_dispatch.adapters.console.feedback import UserFeedback
from train_dispatch.domain.errors import TimeFormatError
from train_dispatch.domain.time_utils import parse_hhmm


class InputHandler:
    """Reads user input, re-prompting until it is well-formed.

    Only the shape of the input is checked here (non-empty, integer, HH:mm).
    Domain rules such as track ranges are enforced by the models.
    """

    def __init__(self, feedback: UserFeedback, stream: TextIO | None = None) -> None:
        self._feedback = feedback
        self._stream = stream if stream is not None else sys.stdin

    def _read_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("No more input")
        return line.strip()

    def read_string(self, prompt_key: str) -> str:
        """Read a non-empty, stripped line."""
        while True:
            self._feedback.prompt(prompt_key)
            value = self._read_line()
            if value:
                return value
            self._feedback.error("invalid_input")

    def read_int(self, prompt_key: str) -> int:
        while True:
            self._feedback.prompt(prompt_key)
            value = self._read_line()
            try:
                return int(value)
            except ValueError:
                self._feedback.error("invalid_integer")

    def read_time(self, prompt_key: str) -> time:
        """Read a time in strict HH:mm format."""
        while True:
            self._feedback.prompt(prompt_key)
            value = self._read_line()
            try:
                return parse_hhmm(value)
            except TimeFormatError as e:
                self._feedback.error(str(e))
