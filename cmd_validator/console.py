#!/usr/bin/env python3
"""
Console entry point for the command validator.

Usage: python -m cmd_validator.console [--config PATH] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from cmd_validator.config import apply_overrides, load_config, save_config
from cmd_validator.session import CommandSession

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure root logging.

    Log records go to stderr or a file, never to stdout where the
    interactive dialogue happens.

    Args:
        level: Log level name.
        log_file: Optional log file path.
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(Path(log_file).expanduser())
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[handler],
        force=True,
    )


def tolerate_undecodable(*streams) -> None:
    """
    Switch text streams to surrogateescape error handling.

    A byte that does not decode in the locale encoding reaches the interpreter
    as a lone surrogate, fails validation as any other non-letter does, and is
    echoed back unchanged. Streams without reconfigure() are left alone.
    """
    for stream in streams:
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for cmd-validator."""
    parser = argparse.ArgumentParser(description="Validate playback commands typed at the console")
    parser.add_argument("--config", type=Path, default=None, help="Configuration file (TOML)")
    parser.add_argument(
        "--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument(
        "--write-config",
        type=Path,
        default=None,
        help="Write the effective configuration to this file and exit",
    )

    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = apply_overrides(
            load_config(args.config), level=args.log_level, log_file=args.log_file
        )
    except (ValidationError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.write_config:
        path = save_config(config, args.write_config)
        print(f"Configuration written to {path}")
        return 0

    configure_logging(config.logging.level, config.logging.log_file)
    tolerate_undecodable(sys.stdin, sys.stdout)

    try:
        return CommandSession(config=config.console).run()
    except KeyboardInterrupt:
        print("\nStopped by user")
        return 130
    except Exception as e:
        logger.critical(f"Command validator crashed: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())
