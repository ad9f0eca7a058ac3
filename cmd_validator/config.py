"""
Configuration management for the command validator.

Loads/saves TOML configuration for console texts, empty line handling and logging.
"""

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_RELPATH = Path("cmd_validator") / "config.toml"


class ConsoleConfig(BaseModel):
    """Console interaction configuration."""

    greeting: str = Field(
        default="Welcome to the Command Validator!", description="Banner printed at startup"
    )
    farewell: str = Field(default="Goodbye!", description="Message printed after quit")
    show_prompt: bool = Field(default=True, description="Print the option prompt before each read")
    empty_line: Literal["unrecognized", "ignore"] = Field(
        default="unrecognized",
        description="Empty line handling (report as unknown command, or re-prompt silently)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(
        default="WARNING", description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Optional[str] = Field(default=None, description="Log file path (stderr if unset)")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class Config(BaseModel):
    """Complete command validator configuration."""

    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Default location: $XDG_CONFIG_HOME/cmd_validator/config.toml, else under ~/.config."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / CONFIG_RELPATH


def load_config(path: Optional[Path] = None) -> Config:
    """
    Read configuration from a TOML file.

    A missing file is not an error; the built-in defaults apply.

    Raises:
        pydantic.ValidationError: If the file holds invalid values.
        tomli.TOMLDecodeError: If the file is not valid TOML.
    """
    path = path or get_config_path()
    if not path.is_file():
        return Config()

    import tomli

    return Config.model_validate(tomli.loads(path.read_text(encoding="utf-8")))


def apply_overrides(config: Config, **logging_overrides: Optional[str]) -> Config:
    """
    Return a copy of config with command-line logging overrides applied.

    None values are skipped. The result is validated again, so a bad
    override fails the same way a bad config file does.
    """
    data = config.model_dump()
    data["logging"].update({k: v for k, v in logging_overrides.items() if v is not None})
    return Config.model_validate(data)


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    """Write config as TOML, creating parent directories. Returns the path written."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    import tomli_w

    # TOML has no null, unset fields are left out
    path.write_text(tomli_w.dumps(config.model_dump(exclude_none=True)), encoding="utf-8")
    return path
