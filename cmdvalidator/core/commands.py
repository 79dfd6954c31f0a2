"""
Playback command table and dispatcher.

Each action is reachable by its full word or by a one-letter
abbreviation, matching the letters capitalized in the console prompt:

    P)lay, pA)use, R)ewind, F)ast-forward, S)top, or Q)uit?

Tokens are matched against already-normalized (lowercase) input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from cmdvalidator.core.errors import CommandFailure, ErrorKind, UnrecognizedCommandError

logger = logging.getLogger(__name__)


class Action(Enum):
    """Canonical playback actions, in dispatch precedence order."""

    PLAY = ("play", "p", "play")
    PAUSE = ("pause", "a", "pause")
    REWIND = ("rewind", "r", "rewind")
    FAST_FORWARD = ("fast-forward", "f", "fast-Forward")
    STOP = ("stop", "s", "stop")
    QUIT = ("quit", "q", "quit")

    def __init__(self, word: str, abbreviation: str, confirmation: str) -> None:
        self.word = word
        self.abbreviation = abbreviation
        self.confirmation = confirmation

    @property
    def is_terminal(self) -> bool:
        """True for the action that ends the session."""
        return self is Action.QUIT

    def matches(self, token: str) -> bool:
        """True if token is this action's full word or abbreviation."""
        return token == self.word or token == self.abbreviation


def _build_command_table() -> Mapping[str, Action]:
    table: dict[str, Action] = {}
    for action in Action:
        # Earlier actions win if two ever share a token
        table.setdefault(action.word, action)
        table.setdefault(action.abbreviation, action)
    return MappingProxyType(table)


COMMAND_TABLE: Mapping[str, Action] = _build_command_table()

PROMPT = "P)lay, pA)use, R)ewind, F)ast-forward, S)top, or Q)uit?: "
FAREWELL = "Goodbye!"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of looking up one normalized command."""

    command: str
    action: Action | None = None
    failure: CommandFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def lookup(command: str) -> Action | None:
    """Return the action named by a normalized command, or None."""
    return COMMAND_TABLE.get(command)


def dispatch(command: str, raw_input: str | None = None) -> DispatchResult:
    """
    Match a normalized command against the command table.

    Args:
        command: Lowercase command text (already validated).
        raw_input: The text as typed, echoed in the failure. Defaults
            to command.

    Returns:
        DispatchResult holding the matched Action, or an
        UNRECOGNIZED_COMMAND failure.
    """
    action = lookup(command)
    if action is None:
        echoed = command if raw_input is None else raw_input
        logger.debug("No command matches %r", echoed)
        return DispatchResult(
            command=command,
            failure=CommandFailure(kind=ErrorKind.UNRECOGNIZED_COMMAND, raw_input=echoed),
        )

    logger.debug("Dispatching %r -> %s", command, action.name)
    return DispatchResult(command=command, action=action)


def dispatch_or_raise(command: str, raw_input: str | None = None) -> Action:
    """
    Match a normalized command against the command table.

    Raises:
        UnrecognizedCommandError: no table entry matches command.
    """
    result = dispatch(command, raw_input)
    if result.action is None:
        raise UnrecognizedCommandError(command if raw_input is None else raw_input)
    return result.action


def format_confirmation(action: Action) -> str:
    """Console text printed once an action is recognized."""
    if action.is_terminal:
        return f"{action.confirmation}\n\n{FAREWELL}\n\n"
    return f"{action.confirmation}\n\n"
