"""
Interactive command session.

Reads one line per prompt, runs it through the interpreter and reports the
outcome until the quit command (or end of input) is reached.
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from cmd_validator import commands
from cmd_validator.commands import Action, CommandError, InvalidCharacterError
from cmd_validator.config import ConsoleConfig

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Session execution state."""

    RUNNING = "running"
    TERMINATED = "terminated"


class CommandSession:
    """
    Console session for the playback command interpreter.

    Rejected lines are reported and the loop keeps going; only quit or the end
    of input moves the session to TERMINATED. The session never exits the
    process itself, run() hands the exit code back to the caller.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        config: Optional[ConsoleConfig] = None,
    ):
        """
        Initialize session.

        Args:
            stdin: Input stream (default: sys.stdin).
            stdout: Output stream (default: sys.stdout).
            config: Console configuration (default: ConsoleConfig()).
        """
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.config = config if config is not None else ConsoleConfig()
        self.state = SessionState.RUNNING
        self.prompt = commands.prompt_text()

        # Statistics
        self.stats = {
            "lines": 0,
            "actions": 0,
            "bad_strings": 0,
            "unrecognized": 0,
            "empty": 0,
        }

    @property
    def is_running(self) -> bool:
        """Check if the session still accepts input."""
        return self.state == SessionState.RUNNING

    def _write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def greet(self) -> None:
        """Print the startup banner."""
        self._write(self.config.greeting)
        self._write()

    def read_line(self) -> Optional[str]:
        """
        Prompt for and read one line.

        Returns:
            Line without its trailing newline, or None at end of input.
        """
        if self.config.show_prompt:
            self.stdout.write(self.prompt)
            self.stdout.flush()

        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def step(self, raw: str) -> Optional[Action]:
        """
        Process one input line.

        Args:
            raw: Line without its trailing newline.

        Returns:
            Recognized action, or None if the line was rejected or ignored.

        Raises:
            RuntimeError: If the session is already terminated.
        """
        if not self.is_running:
            raise RuntimeError("Session is terminated")

        self.stats["lines"] += 1
        logger.debug(f"Input line: {raw!r}")

        if raw == "":
            self.stats["empty"] += 1

        try:
            action = commands.interpret(raw, empty_line=self.config.empty_line)
        except CommandError as e:
            if isinstance(e, InvalidCharacterError):
                self.stats["bad_strings"] += 1
            else:
                self.stats["unrecognized"] += 1
            logger.info(f"Rejected {raw!r}: {type(e).__name__}")
            self._write(str(e))
            self._write()
            return None

        if action is None:
            logger.debug("Empty line ignored")
            return None

        self.stats["actions"] += 1
        logger.info(f"Action: {action.name}")
        self._write(commands.label_for(action))
        self._write()

        if action is Action.QUIT:
            self.finish()

        return action

    def finish(self) -> None:
        """Print the farewell and terminate the session."""
        self._write(self.config.farewell)
        self._write()
        self.state = SessionState.TERMINATED
        logger.info(f"Session terminated, stats: {self.stats}")

    def run(self) -> int:
        """
        Run the read/dispatch loop until quit.

        Returns:
            Process exit code (0).
        """
        self.greet()

        while self.is_running:
            raw = self.read_line()
            if raw is None:
                # Closed input counts as quit
                self._write()
                logger.info("End of input")
                self.finish()
                break
            self.step(raw)

        return 0
