"""Scoped line reader for interactive prompts."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)


class InputClosedError(Exception):
    """The input stream ended or kept failing; no more answers will come."""


class InputReader:
    """
    Reads trimmed, lower-cased answers to prompts.

    End-of-stream raises InputClosedError. Read errors are logged and
    reported as an empty (invalid) answer so the caller re-prompts; after
    ``max_read_errors`` consecutive failures the stream is treated as closed.
    """

    def __init__(
        self,
        stream: TextIO,
        output: TextIO,
        max_read_errors: int = 3,
    ) -> None:
        self._stream = stream
        self._output = output
        self._max_read_errors = max_read_errors
        self._consecutive_errors = 0
        self._closed = False

    def ask(self, prompt: str) -> str:
        """Print ``prompt`` and return the normalised answer."""
        if self._closed:
            raise InputClosedError("Input scope has been closed")

        print(prompt, file=self._output, flush=True)
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            self._consecutive_errors += 1
            logger.warning(
                "Failed to read input (%d/%d): %s",
                self._consecutive_errors,
                self._max_read_errors,
                exc,
            )
            if self._consecutive_errors >= self._max_read_errors:
                raise InputClosedError("Too many input read errors") from exc
            return ""

        self._consecutive_errors = 0
        if line == "":
            raise InputClosedError("End of input")
        return line.strip().lower()

    def choose(self, prompt: str, choices: dict[str, str]) -> str:
        """
        Ask until the answer is one of ``choices``.

        Args:
            prompt: Text to show before each read
            choices: Accepted answers mapped to the value to return

        Returns:
            The value mapped to the accepted answer
        """
        while True:
            answer = self.ask(prompt)
            if answer in choices:
                return choices[answer]
            print("Invalid input.", file=self._output)

    def close(self) -> None:
        self._closed = True


@contextmanager
def input_scope(
    stream: TextIO | None = None,
    output: TextIO | None = None,
    max_read_errors: int = 3,
) -> Iterator[InputReader]:
    """Hold the input stream for the duration of the block."""
    reader = InputReader(
        stream if stream is not None else sys.stdin,
        output if output is not None else sys.stdout,
        max_read_errors=max_read_errors,
    )
    try:
        yield reader
    finally:
        reader.close()
