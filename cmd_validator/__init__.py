"""
Command Validator - playback command console

Reads lines from the console, accepts only letters and dashes, and maps them
to one of six playback commands (play, pause, rewind, fast-forward, stop, quit).
"""

__version__ = "0.1.0"
__author__ = "Command Validator Contributors"

from cmd_validator.commands import Action, dispatch, normalize, validate
from cmd_validator.session import CommandSession

__all__ = ["Action", "CommandSession", "dispatch", "normalize", "validate", "__version__"]
