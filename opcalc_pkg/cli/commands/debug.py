from ..context import ReplContext
import logging

from ...logging_config import set_level

def handle_debug_command(ctx: ReplContext, cmd: str) -> None:
    """Handle the 'debug' command."""
    parts = str(cmd).split()
    if len(parts) > 1:
        mode = parts[1].lower()
        if mode in ("on", "true", "enabled"):
            ctx.debug_mode = True
            set_level(logging.DEBUG)
            print("Debug mode enabled (evaluation logging).")
        elif mode in ("off", "false", "disabled"):
            ctx.debug_mode = False
            set_level(logging.WARNING)
            print("Debug mode disabled.")
        else:
            print("Usage: debug <on|off>")
    else:
        state = "on" if ctx.debug_mode else "off"
        print(f"Debug mode is {state}. Usage: debug <on|off>")
