"""Line-oriented input for the interactive session."""

from __future__ import annotations

from typing import Callable

from ..types import EndOfInput


class LineReader:
    """Reads trimmed lines and reports end-of-input.

    ``read_line`` returns ``(text, more_input)``; ``more_input`` is False once
    the input stream is exhausted. Any other read failure (``OSError``)
    propagates to the caller.
    """

    def __init__(self, input_func: Callable[[str], str] | None = None):
        self._input_func = input_func

    def read_line(self, prompt: str = "") -> tuple[str, bool]:
        read = self._input_func or input
        try:
            raw = read(prompt)
        except EOFError:
            return "", False
        return raw.strip(), True

    def prompt(self, prompt: str) -> str:
        """Read one line, raising EndOfInput when the stream is exhausted."""
        text, more = self.read_line(prompt)
        if not more:
            raise EndOfInput()
        return text
