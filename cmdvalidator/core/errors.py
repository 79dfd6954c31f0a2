"""
Failure kinds for the command validator.

Two failure kinds reach the user: an input containing characters other
than letters and dashes, and a well-formed input that names no command.
Each can be signalled two ways:

- as a CommandFailure carried inside a result object (result strategy)
- as a CommandError subclass raised to the loop (exception strategy)

Both paths end at the same reporter, so the transcript is identical.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure reported by the console loop."""

    INVALID_CHARACTER = "invalid_character"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    INTERNAL = "internal"


@dataclass(frozen=True)
class CommandFailure:
    """A single failed iteration: what went wrong and for which input."""

    kind: ErrorKind
    raw_input: str
    detail: str = ""


class CommandError(Exception):
    """Base class for failures raised by the exception strategy."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, raw_input: str, detail: str = "") -> None:
        self.raw_input = raw_input
        self.detail = detail
        super().__init__(f"{self.kind.value}: {raw_input!r}")

    @property
    def failure(self) -> CommandFailure:
        """The failure as a result-strategy value."""
        return CommandFailure(kind=self.kind, raw_input=self.raw_input, detail=self.detail)


class InvalidCharacterError(CommandError):
    """Input contains a character that is neither a letter nor a dash."""

    kind = ErrorKind.INVALID_CHARACTER


class UnrecognizedCommandError(CommandError):
    """Validated input matches no entry in the command table."""

    kind = ErrorKind.UNRECOGNIZED_COMMAND
