"""
Command table and interpreter for the playback console.

A line is accepted only if it is made of ASCII letters and dashes. Accepted
lines are lowercased and matched against a fixed six-entry table:
P)lay, pA)use, R)ewind, F)ast-forward, S)top, Q)uit.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

DASH = "-"
ALLOWED_CHARS = frozenset(string.ascii_letters + DASH)

# Only ASCII letters change case; everything else passes through untouched
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

EMPTY_LINE_POLICIES = ("unrecognized", "ignore")


class Action(Enum):
    """Playback actions."""

    PLAY = "play"
    PAUSE = "pause"
    REWIND = "rewind"
    FAST_FORWARD = "fast-forward"
    STOP = "stop"
    QUIT = "quit"


@dataclass(frozen=True)
class CommandEntry:
    """
    Command table entry.

    Attributes:
        action: Action triggered by the entry.
        shorthand: Single-letter form.
        word: Full-word form.
        label: Text printed when the action is recognized.
        hint: Prompt fragment, capital letter marks the shorthand.
    """

    action: Action
    shorthand: str
    word: str
    label: str
    hint: str

    def matches(self, token: str) -> bool:
        """Check if a normalized token is one of this entry's two forms."""
        return token == self.shorthand or token == self.word


COMMAND_TABLE: Tuple[CommandEntry, ...] = (
    CommandEntry(Action.PLAY, "p", "play", "play", "P)lay"),
    CommandEntry(Action.PAUSE, "a", "pause", "pause", "pA)use"),
    CommandEntry(Action.REWIND, "r", "rewind", "rewind", "R)ewind"),
    CommandEntry(Action.FAST_FORWARD, "f", "fast-forward", "fast-forward", "F)ast-forward"),
    CommandEntry(Action.STOP, "s", "stop", "stop", "S)top"),
    CommandEntry(Action.QUIT, "q", "quit", "quit", "Q)uit"),
)


def validate(raw: str) -> bool:
    """
    Check that a line contains only ASCII letters and dashes.

    Args:
        raw: Line as read, without its newline.

    Returns:
        True if every character is allowed. An empty line is valid.
    """
    return all(c in ALLOWED_CHARS for c in raw)


def require_valid(raw: str) -> None:
    """
    Exception-raising form of validate().

    Raises:
        InvalidCharacterError: If the line holds any other character.
    """
    if not validate(raw):
        raise InvalidCharacterError(raw)


def normalize(raw: str) -> str:
    """Lowercase ASCII letters, leave everything else as is."""
    return raw.translate(_LOWER_TABLE)


def find_entry(action: Action) -> CommandEntry:
    """Get the table entry for an action."""
    for entry in COMMAND_TABLE:
        if entry.action is action:
            return entry
    raise KeyError(action)


def label_for(action: Action) -> str:
    """Get the printed label for an action."""
    return find_entry(action).label


def prompt_text() -> str:
    """Build the prompt from the table hints."""
    hints = [entry.hint for entry in COMMAND_TABLE]
    return ", ".join(hints[:-1]) + f", or {hints[-1]}?: "


def dispatch(token: str) -> Optional[Action]:
    """
    Match a normalized token against the command table.

    Args:
        token: Normalized command token.

    Returns:
        Matching action, or None if the token is not one of the
        twelve recognized forms.
    """
    for entry in COMMAND_TABLE:
        if entry.matches(token):
            return entry.action
    return None


def interpret(raw: str, empty_line: str = "unrecognized") -> Optional[Action]:
    """
    Run one raw line through validation, normalization and dispatch.

    Args:
        raw: Line as read, without its newline.
        empty_line: "unrecognized" reports an empty line as an unknown
            command, "ignore" returns None for it.

    Returns:
        Recognized action, or None for an ignored empty line.

    Raises:
        InvalidCharacterError: If the line holds a disallowed character.
        UnrecognizedCommandError: If the line matches no table entry.
        ValueError: If empty_line is not a known policy.
    """
    if empty_line not in EMPTY_LINE_POLICIES:
        raise ValueError(f"Unknown empty line policy: {empty_line!r}")

    if raw == "" and empty_line == "ignore":
        return None

    require_valid(raw)

    action = dispatch(normalize(raw))
    if action is None:
        raise UnrecognizedCommandError(raw)
    return action


class CommandError(Exception):
    """Base exception for rejected input lines."""

    prefix = "Command error"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{self.prefix}: {text}")


class InvalidCharacterError(CommandError):
    """Line contains a character that is neither a letter nor a dash."""

    prefix = "Bad string"


class UnrecognizedCommandError(CommandError):
    """Valid line that matches none of the table entries."""

    prefix = "Unrecognized command"
