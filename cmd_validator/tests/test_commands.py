"""
Unit tests for command validation, normalization and dispatch.
"""

import pytest

from cmd_validator import commands
from cmd_validator.commands import Action


class TestValidate:
    """Test character set validation."""

    @pytest.mark.parametrize("raw", ["play", "PLAY", "Fast-Forward", "-", "a-b-c", "Q"])
    def test_letters_and_dashes_are_valid(self, raw):
        """Lines made of letters and dashes pass."""
        assert commands.validate(raw) is True

    @pytest.mark.parametrize(
        "raw", ["xyz123", "fast forward", "play!", "p_l", " q", "q\t", "café", "В"]
    )
    def test_other_characters_are_invalid(self, raw):
        """Digits, whitespace, punctuation and non-ASCII letters fail."""
        assert commands.validate(raw) is False

    def test_empty_is_valid(self):
        """Empty line satisfies the character rule."""
        assert commands.validate("") is True

    def test_require_valid_raises(self):
        """Exception form raises with the offending text."""
        with pytest.raises(commands.InvalidCharacterError) as excinfo:
            commands.require_valid("xyz123")

        assert excinfo.value.text == "xyz123"
        assert str(excinfo.value) == "Bad string: xyz123"

    def test_require_valid_accepts(self):
        """Exception form is silent on a valid line."""
        commands.require_valid("Rewind")


class TestNormalize:
    """Test case normalization."""

    def test_lowercases_letters(self):
        """Upper-case letters become lower-case."""
        assert commands.normalize("PLAY") == "play"
        assert commands.normalize("Fast-Forward") == "fast-forward"

    @pytest.mark.parametrize("raw", ["", "Play", "FAST-forward", "-A-", "xyz123", "ÉtÉ"])
    def test_idempotent(self, raw):
        """Normalizing twice equals normalizing once."""
        once = commands.normalize(raw)
        assert commands.normalize(once) == once

    def test_preserves_length_and_dashes(self):
        """Only letter case changes."""
        raw = "A-bC--D"
        normalized = commands.normalize(raw)

        assert len(normalized) == len(raw)
        assert [i for i, c in enumerate(normalized) if c == "-"] == [
            i for i, c in enumerate(raw) if c == "-"
        ]

    def test_input_unmodified(self):
        """Original string is left as is."""
        raw = "STOP"
        commands.normalize(raw)
        assert raw == "STOP"


class TestDispatch:
    """Test command table lookup."""

    @pytest.mark.parametrize(
        "token, action",
        [
            ("p", Action.PLAY),
            ("play", Action.PLAY),
            ("a", Action.PAUSE),
            ("pause", Action.PAUSE),
            ("r", Action.REWIND),
            ("rewind", Action.REWIND),
            ("f", Action.FAST_FORWARD),
            ("fast-forward", Action.FAST_FORWARD),
            ("s", Action.STOP),
            ("stop", Action.STOP),
            ("q", Action.QUIT),
            ("quit", Action.QUIT),
        ],
    )
    def test_recognized_forms(self, token, action):
        """Both shorthand and full word map to the action."""
        assert commands.dispatch(token) is action

    @pytest.mark.parametrize("token", ["", "dance", "px", "plays", "fast", "-", "x", "PLAY"])
    def test_unrecognized(self, token):
        """Anything else yields no action."""
        assert commands.dispatch(token) is None

    def test_table_has_six_entries_in_order(self):
        """Table order is play, pause, rewind, fast-forward, stop, quit."""
        assert [entry.action for entry in commands.COMMAND_TABLE] == [
            Action.PLAY,
            Action.PAUSE,
            Action.REWIND,
            Action.FAST_FORWARD,
            Action.STOP,
            Action.QUIT,
        ]

    def test_table_is_immutable(self):
        """Entries cannot be reassigned."""
        entry = commands.COMMAND_TABLE[0]
        with pytest.raises(AttributeError):
            entry.word = "go"

    def test_label_for(self):
        """Labels come from the table."""
        assert commands.label_for(Action.FAST_FORWARD) == "fast-forward"
        assert commands.label_for(Action.QUIT) == "quit"

    def test_prompt_text(self):
        """Prompt lists all six options."""
        assert commands.prompt_text() == (
            "P)lay, pA)use, R)ewind, F)ast-forward, S)top, or Q)uit?: "
        )


class TestInterpret:
    """Test the combined validate/normalize/dispatch path."""

    def test_mixed_case_word(self):
        """'Play' is recognized as play."""
        assert commands.interpret("Play") is Action.PLAY

    def test_upper_shorthand(self):
        """'Q' is recognized as quit."""
        assert commands.interpret("Q") is Action.QUIT

    def test_bad_string(self):
        """Digits raise InvalidCharacterError."""
        with pytest.raises(commands.InvalidCharacterError, match="xyz123"):
            commands.interpret("xyz123")

    def test_unknown_word(self):
        """Valid but unknown line raises UnrecognizedCommandError."""
        with pytest.raises(commands.UnrecognizedCommandError) as excinfo:
            commands.interpret("dance")

        assert excinfo.value.text == "dance"
        assert str(excinfo.value) == "Unrecognized command: dance"

    def test_empty_line_default(self):
        """Empty line is an unrecognized command by default."""
        with pytest.raises(commands.UnrecognizedCommandError):
            commands.interpret("")

    def test_empty_line_ignored(self):
        """Empty line yields None with the ignore policy."""
        assert commands.interpret("", empty_line="ignore") is None

    def test_unknown_policy(self):
        """Unknown empty line policy is rejected."""
        with pytest.raises(ValueError, match="policy"):
            commands.interpret("play", empty_line="skip")

    def test_errors_share_base(self):
        """Both error kinds derive from CommandError."""
        assert issubclass(commands.InvalidCharacterError, commands.CommandError)
        assert issubclass(commands.UnrecognizedCommandError, commands.CommandError)
