"""
Configuration management for the command validator.

This module loads the console settings from a TOML file. The command
table, the prompt and the printed confirmations are fixed and are not
part of the configuration.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

# Path to the config directory
CONFIG_DIR = Path(__file__).parent


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


class ErrorStrategy(Enum):
    """How validation and dispatch signal failure to the loop."""

    RESULT = "result"  # Return result objects, checked by the caller
    EXCEPTION = "exception"  # Raise CommandError subclasses

    @classmethod
    def parse(cls, value: str) -> "ErrorStrategy":
        """Get a strategy from its configuration name."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ConfigError(f"Unknown error strategy {value!r} (expected one of: {choices})") from None


@dataclass
class ValidatorConfig:
    """Loaded console configuration."""

    strategy: ErrorStrategy = ErrorStrategy.RESULT
    show_banner: bool = True


def load_validator_config(config_path: Path | None = None) -> ValidatorConfig:
    """
    Load console configuration from a TOML file.

    Args:
        config_path: Path to validator.toml. If None, uses default location.

    Returns:
        Loaded ValidatorConfig instance.

    Raises:
        ConfigError: The file is missing, is not valid TOML, or holds an
            unknown strategy.
    """
    if config_path is None:
        config_path = CONFIG_DIR / "validator.toml"

    logger.debug("Loading validator config from %s", config_path)

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}") from None
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    console = data.get("console", {})

    return ValidatorConfig(
        strategy=ErrorStrategy.parse(console.get("strategy", ErrorStrategy.RESULT.value)),
        show_banner=bool(console.get("show_banner", True)),
    )


# Global singleton instance (lazy loaded)
_validator_config: ValidatorConfig | None = None


def get_validator_config() -> ValidatorConfig:
    """
    Get the global validator configuration (lazy loaded singleton).

    Returns:
        The ValidatorConfig instance.
    """
    global _validator_config

    if _validator_config is None:
        _validator_config = load_validator_config()

    return _validator_config


def reload_validator_config(config_path: Path | None = None) -> ValidatorConfig:
    """Force reload of the validator configuration."""
    global _validator_config
    _validator_config = load_validator_config(config_path)
    return _validator_config
