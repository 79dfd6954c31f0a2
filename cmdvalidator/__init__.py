"""
Command Validator - a console that validates and echoes playback commands.

Each line typed is checked for letters and dashes only, lowercased, and
matched against a fixed table of playback commands. Failures can be
signalled either as returned result objects or as raised exceptions.
"""

__version__ = "0.1.0"
__author__ = "Command Validator Contributors"
__license__ = "GPL-2.0"

from cmdvalidator.console import CommandLoop, LoopState

__all__ = ["CommandLoop", "LoopState", "__version__"]
