"""
Command Validator - Entry Point

Run with: python -m cmdvalidator
"""

import argparse
import logging
import sys
from pathlib import Path

from cmdvalidator import __version__
from cmdvalidator.config import ConfigError, ErrorStrategy, load_validator_config
from cmdvalidator.console import CommandLoop


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.WARNING

    # basicConfig writes to stderr, keeping stdout for the console itself
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cmdvalidator",
        description="Command Validator - validate and echo playback commands",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )

    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ErrorStrategy],
        default=None,
        help="Error signalling strategy (default: from config, 'result')",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a validator.toml file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    logger = logging.getLogger(__name__)

    try:
        config = load_validator_config(args.config)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    strategy = ErrorStrategy(args.strategy) if args.strategy else config.strategy
    logger.debug("Starting command loop (strategy=%s)", strategy.value)

    loop = CommandLoop(strategy=strategy, show_banner=config.show_banner)
    try:
        return loop.run()
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
