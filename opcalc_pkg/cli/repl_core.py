import logging
from typing import Optional

from ..config import VERSION
from ..operators import normalize_operator
from ..types import CalculatorError
from ..types import EndOfInput
from ..types import Operator
from ..types import UnknownOperator
from .context import ReplContext
from .operands import collect_operands
from .repl_commands import handle_command

logger = logging.getLogger(__name__)


class REPL:
    """
    Read-evaluate-print loop: one operator or command per prompt.
    Session state lives in the context; a failed round never changes it.
    """
    def __init__(self, context: Optional[ReplContext] = None):
        self.ctx = context if context else ReplContext()
        self.running = True
        self.exit_code = 0
        self._setup_readline()

    def _setup_readline(self):
        try:
            import readline  # noqa: F401  line editing for input()
        except ImportError:
            pass

    def start(self) -> int:
        """Main loop entry point. Returns the process exit code."""
        print(f"opcalc v{VERSION} - type 'help' for commands, 'exit' to quit.")

        while self.running:
            self.loop_once()

        print("Goodbye.")
        return self.exit_code

    def loop_once(self):
        """Single iteration of the read-eval-print loop."""
        try:
            prompt = ">>> " if not self.ctx.debug_mode else "DEBUG>>> "
            text, more = self.ctx.reader.read_line(prompt)
            if not more:
                self.running = False
                return

            self.process_input(text)
        except EndOfInput:
            self.running = False
        except CalculatorError as e:
            logger.info("Round failed: %s", e.display())
            print(e.display())
        except OSError as e:
            logger.exception("Failed to read input")
            print(f"Read error: {e}")
            self.running = False
            self.exit_code = 1
        except KeyboardInterrupt:
            self.handle_interrupt()
        except Exception as e:
            logger.exception("Unexpected error in REPL loop")
            print(f"Error: {e}")

    def handle_interrupt(self):
        print("\n[Interrupted]")

    def process_input(self, text: str):
        """Dispatch input to specific handlers."""
        text = text.strip()
        if not text:
            return

        # 1. exit/quit end the session
        if text.lower() in ("exit", "quit"):
            self.running = False
            return

        # 2. Session commands (help, history, precision, ...) via registry
        if handle_command(text, self.ctx):
            return

        # 3. Operators; anything else is rejected and the user is reprompted
        try:
            op = normalize_operator(text)
        except UnknownOperator:
            print("Please enter a valid operator or command.")
            return

        self._handle_operator(op)

    def _handle_operator(self, op: Operator):
        session = self.ctx.session
        operands = collect_operands(self.ctx.reader, op, session)
        entry = session.evaluate(op, operands)
        print(f"Result: {entry.result}")
