from dataclasses import dataclass, field

from ..session import SessionState
from .line_reader import LineReader

@dataclass
class ReplContext:
    """Holds the state of the interactive REPL session."""
    session: SessionState = field(default_factory=SessionState.from_config)
    reader: LineReader = field(default_factory=LineReader)
    debug_mode: bool = False
