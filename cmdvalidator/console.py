"""
Interactive console loop for the command validator.

The loop reads one line at a time, validates and normalizes it, looks it
up in the command table and prints either the canonical action name or
an error. It cycles between AWAITING_INPUT and DISPATCHING until the
quit command (or end of input) moves it to TERMINATED.

Failures never end the session. Known failures are reported with the
offending input echoed; anything else raised while handling a line is
logged and reported generically.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TextIO

from cmdvalidator.config import ErrorStrategy
from cmdvalidator.core.commands import PROMPT, Action, dispatch, dispatch_or_raise, format_confirmation
from cmdvalidator.core.errors import CommandError, CommandFailure, ErrorKind
from cmdvalidator.core.validation import require_valid, validate

logger = logging.getLogger(__name__)

WELCOME = "Welcome to the Command Validator!\n\n"

# Message prefix per failure kind; the raw input follows
ERROR_PREFIXES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CHARACTER: "Bad string: ",
    ErrorKind.UNRECOGNIZED_COMMAND: "Unrecognized command: ",
    ErrorKind.INTERNAL: "Unexpected error: ",
}


class LoopState(Enum):
    """States of the console loop."""

    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


def format_failure(failure: CommandFailure) -> str:
    """Console text for a failed iteration."""
    return f"{ERROR_PREFIXES[failure.kind]}{failure.raw_input}\n\n"


class CommandLoop:
    """
    Read-validate-dispatch loop over a pair of text streams.

    Attributes:
        strategy: Whether failures come back as result objects or as
            raised CommandError exceptions.
    """

    def __init__(
        self,
        strategy: ErrorStrategy = ErrorStrategy.RESULT,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        show_banner: bool = True,
    ) -> None:
        self.strategy = strategy
        self.show_banner = show_banner
        self._stdin = stdin
        self._stdout = stdout
        self._state = LoopState.AWAITING_INPUT

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def terminated(self) -> bool:
        return self._state is LoopState.TERMINATED

    def _write(self, text: str) -> None:
        out = self._stdout if self._stdout is not None else sys.stdout
        out.write(text)
        out.flush()

    def _read_line(self) -> str | None:
        """Read one line without its line ending; None at end of input."""
        stream = self._stdin if self._stdin is not None else sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def report(self, failure: CommandFailure) -> None:
        """Print a failure and leave the loop ready for the next line."""
        logger.debug("Reporting %s for %r", failure.kind.value, failure.raw_input)
        self._write(format_failure(failure))

    def _resolve_with_results(self, line: str) -> Action | CommandFailure:
        validation = validate(line)
        if validation.failure is not None:
            return validation.failure

        # normalized is always set once validation passes
        result = dispatch(validation.normalized or "", raw_input=line)
        if result.action is None:
            return result.failure or CommandFailure(kind=ErrorKind.INTERNAL, raw_input=line)
        return result.action

    def _resolve_with_exceptions(self, line: str) -> Action | CommandFailure:
        try:
            command = require_valid(line)
            return dispatch_or_raise(command, raw_input=line)
        except CommandError as e:
            return e.failure

    def process_line(self, line: str) -> Action | None:
        """
        Handle one line of input.

        Args:
            line: The line as typed, without its line ending.

        Returns:
            The recognized Action, or None if the line was rejected.

        Raises:
            RuntimeError: The loop has already terminated.
        """
        if self.terminated:
            raise RuntimeError("Command loop has terminated")

        self._state = LoopState.DISPATCHING
        try:
            if self.strategy is ErrorStrategy.EXCEPTION:
                outcome = self._resolve_with_exceptions(line)
            else:
                outcome = self._resolve_with_results(line)
        except Exception:
            logger.exception("Unexpected error while handling %r", line)
            outcome = CommandFailure(kind=ErrorKind.INTERNAL, raw_input=line)

        if isinstance(outcome, CommandFailure):
            self.report(outcome)
            self._state = LoopState.AWAITING_INPUT
            return None

        self._write(format_confirmation(outcome))
        if outcome.is_terminal:
            logger.info("Quit requested")
            self._state = LoopState.TERMINATED
        else:
            self._state = LoopState.AWAITING_INPUT
        return outcome

    def run(self) -> int:
        """
        Run the loop until quit or end of input.

        Returns:
            Process exit status (always 0).
        """
        if self.show_banner:
            self._write(WELCOME)

        while not self.terminated:
            self._write(PROMPT)
            line = self._read_line()
            if line is None:
                logger.info("End of input, leaving command loop")
                self._write("\n")
                self._state = LoopState.TERMINATED
                break
            self.process_line(line)

        return 0
