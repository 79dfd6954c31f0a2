"""
Core command handling for the command validator.

Validation, normalization, the command table and its dispatcher.
"""

from cmdvalidator.core.commands import COMMAND_TABLE, Action, DispatchResult, dispatch, dispatch_or_raise
from cmdvalidator.core.errors import (
    CommandError,
    CommandFailure,
    ErrorKind,
    InvalidCharacterError,
    UnrecognizedCommandError,
)
from cmdvalidator.core.validation import ValidationResult, is_valid_command_text, normalize, require_valid, validate

__all__ = [
    "COMMAND_TABLE",
    "Action",
    "CommandError",
    "CommandFailure",
    "DispatchResult",
    "ErrorKind",
    "InvalidCharacterError",
    "UnrecognizedCommandError",
    "ValidationResult",
    "dispatch",
    "dispatch_or_raise",
    "is_valid_command_text",
    "normalize",
    "require_valid",
    "validate",
]
