"""
Input validation and normalization.

Accepted input is made of ASCII letters and dashes only. Validation runs
before normalization, so a normalized command never contains anything
else.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

from cmdvalidator.core.errors import CommandFailure, ErrorKind, InvalidCharacterError

logger = logging.getLogger(__name__)

ALLOWED_CHARACTERS = frozenset(string.ascii_letters + "-")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one line of input."""

    raw_input: str
    normalized: str | None = None
    failure: CommandFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def first_invalid_character(text: str) -> str | None:
    """Return the first character outside letters and dashes, if any."""
    for char in text:
        if char not in ALLOWED_CHARACTERS:
            return char
    return None


def is_valid_command_text(text: str) -> bool:
    """True if every character of text is an ASCII letter or a dash."""
    return first_invalid_character(text) is None


def normalize(text: str) -> str:
    """Lowercase a validated command string."""
    return text.lower()


def validate(text: str) -> ValidationResult:
    """
    Validate and normalize text, reporting failure as a value.

    Args:
        text: Raw line read from the console.

    Returns:
        ValidationResult holding the normalized command, or an
        INVALID_CHARACTER failure echoing the raw input.
    """
    bad = first_invalid_character(text)
    if bad is not None:
        logger.debug("Rejected %r: invalid character %r", text, bad)
        return ValidationResult(
            raw_input=text,
            failure=CommandFailure(
                kind=ErrorKind.INVALID_CHARACTER,
                raw_input=text,
                detail=f"invalid character {bad!r}",
            ),
        )
    return ValidationResult(raw_input=text, normalized=normalize(text))


def require_valid(text: str) -> str:
    """
    Validate and normalize text, raising on failure.

    Raises:
        InvalidCharacterError: text contains a character other than
            a letter or a dash.
    """
    bad = first_invalid_character(text)
    if bad is not None:
        logger.debug("Rejected %r: invalid character %r", text, bad)
        raise InvalidCharacterError(text, detail=f"invalid character {bad!r}")
    return normalize(text)
