from __future__ import annotations

import argparse
import logging
import sys

from ..config import DEFAULT_EXPORT_FILENAME
from ..config import LOG_LEVEL
from ..config import MAX_PRECISION
from ..config import VERSION
from ..types import AngleMode

_logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def repl_loop() -> int:
    """
    Run an interactive session on stdin/stdout.
    Returns the exit code (0 on exit or end-of-input, 1 on a read failure).
    """
    from .repl_core import REPL

    # Ensure consistent encoding for REPL interaction (Windows console)
    if sys.platform == "win32":
        try:
            sys.stdin.reconfigure(encoding="utf-8")
            sys.stdout.reconfigure(encoding="utf-8")
        except AttributeError:
            pass

    repl = REPL()
    return repl.start()


def print_help_text(angle_mode: AngleMode = AngleMode.RADIANS) -> None:
    """Print help text for REPL commands."""
    help_text = f"""opcalc v{VERSION}

USAGE
  Type an operator, then enter numbers one or more per line
  (separated by spaces or commas). A blank line evaluates.

OPERATORS
  + - * / ^ %          binary ('+' and '*' take 2 or more numbers)
  sin cos tan          trig, angles in {angle_mode.value}
  sqrt log             square root, natural log
  pow mod ln           aliases for ^ % log

NUMBERS
  ans, last            previous result
  pi, e                constants

COMMANDS
  help      Show this help
  ops       List operators and aliases
  history   Show previous calculations
  stats     Count, min, max and average of results
  degrees   Trig functions take degrees
  radians   Trig functions take radians
  mode      Show angle mode, precision and last result
  precision Set output precision (auto or 0-{MAX_PRECISION})
  clear     Clear history and last result
  export    Save history to a file (default: {DEFAULT_EXPORT_FILENAME})
  debug     debug <on|off> evaluation logging
  exit      Quit the calculator
"""
    print(help_text)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the opcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="opcalc", description="Interactive operator-first calculator."
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=_LOG_LEVELS,
        default=LOG_LEVEL.upper() if LOG_LEVEL.upper() in _LOG_LEVELS else "WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    if args.version:
        print(VERSION)
        return 0

    from ..logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)
    _logger.debug("Starting interactive session")

    return repl_loop()
