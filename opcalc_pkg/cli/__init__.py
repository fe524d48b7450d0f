from .app import main_entry
from .app import print_help_text
from .app import repl_loop

__all__ = ["main_entry", "repl_loop", "print_help_text"]
