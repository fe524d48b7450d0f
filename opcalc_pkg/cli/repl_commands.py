"""
Session command handlers for the opcalc REPL.
Operators are handled by repl_core; everything else typed at the prompt lands here.
"""

import logging

from ..config import DEFAULT_EXPORT_FILENAME
from ..config import MAX_PRECISION
from ..export import export_history_to_file
from ..operators import describe_operators
from ..types import AngleMode
from ..types import NoHistory
from ..utils.formatting import format_precision
from ..utils.formatting import format_stats
from .commands import handle_debug_command
from .context import ReplContext

logger = logging.getLogger(__name__)

# Registry of session commands (operators and exit are not listed)
COMMAND_REGISTRY = {
    "help",
    "?",
    "history",
    "degrees",
    "radians",
    "mode",
    "precision",
    "stats",
    "ops",
    "clear",
    "export",
    "debug",
}


def handle_command(text: str, ctx: ReplContext) -> bool:
    """
    Attempt to handle the input text as a session command.
    Returns True if handled, False otherwise.
    CalculatorError subclasses raised by handlers propagate to the REPL.
    """
    name, _, argument = text.strip().partition(" ")
    name = name.lower()
    argument = argument.strip()

    if name not in COMMAND_REGISTRY:
        return False
    logger.debug("Dispatching command %r", name)

    session = ctx.session

    if name in ("help", "?"):
        from .app import print_help_text

        print_help_text(session.angle_mode)
        return True

    if name == "history":
        _handle_history(ctx)
        return True

    if name == "degrees":
        session.set_angle_mode(AngleMode.DEGREES)
        print("Angle mode: degrees")
        return True

    if name == "radians":
        session.set_angle_mode(AngleMode.RADIANS)
        print("Angle mode: radians")
        return True

    if name == "mode":
        last = session.format(session.last_result) if session.has_last else "none"
        print(f"Angle mode: {session.angle_mode.value}")
        print(f"Precision: {format_precision(session.precision)}")
        print(f"Last result: {last}")
        return True

    if name == "precision":
        _handle_precision(argument, ctx)
        return True

    if name == "stats":
        _handle_stats(ctx)
        return True

    if name == "ops":
        print("Operators:")
        for line in describe_operators():
            print(line)
        return True

    if name == "clear":
        session.clear()
        print("Memory cleared.")
        return True

    if name == "export":
        _handle_export(argument, ctx)
        return True

    if name == "debug":
        handle_debug_command(ctx, text)
        return True

    return False


def _handle_history(ctx: ReplContext):
    lines = ctx.session.history_lines()
    if not lines:
        print("No history yet.")
        return
    print("History:")
    for line in lines:
        print(line)


def _handle_precision(argument: str, ctx: ReplContext):
    # precision [auto|0-10]; prompts when no value is given inline
    value = argument
    if not value:
        value = ctx.reader.prompt(f"Precision (auto or 0-{MAX_PRECISION}): ")
    precision = ctx.session.set_precision(value)
    print(f"Precision: {format_precision(precision)}")


def _handle_stats(ctx: ReplContext):
    session = ctx.session
    stats = session.stats()
    if stats is None:
        print("No results yet.")
        return
    print("Stats:")
    for line in format_stats(stats, session.precision):
        print(line)


def _handle_export(argument: str, ctx: ReplContext):
    # export [path]; prompts for the path, blank means the default file
    session = ctx.session
    if not session.history:
        raise NoHistory("no history to export")
    filename = argument
    if not filename:
        filename = ctx.reader.prompt(f"Export file (default: {DEFAULT_EXPORT_FILENAME}): ")
    path = export_history_to_file(session.export_text(), filename)
    print(f"History exported to {path}")
