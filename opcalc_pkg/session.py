"""Session state: angle mode, precision, last result and history."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Sequence

import numpy as np

from . import config
from .evaluator import evaluate
from .types import AngleMode
from .types import EvaluationRecord
from .types import InvalidPrecision
from .types import Operator
from .utils.formatting import format_expression
from .utils.formatting import format_number

logger = logging.getLogger(__name__)


def parse_precision(text: str) -> int | None:
    """Parse a precision setting: blank or 'auto' -> None, else an int 0-10.

    Raises:
        InvalidPrecision: for non-integers and out-of-range values
    """
    value = text.strip().lower()
    if value in ("", "auto"):
        return None
    try:
        digits = int(value)
    except ValueError:
        raise InvalidPrecision(
            f"expected 'auto' or an integer 0-{config.MAX_PRECISION}, got '{text.strip()}'"
        ) from None
    if not 0 <= digits <= config.MAX_PRECISION:
        raise InvalidPrecision(f"precision must be between 0 and {config.MAX_PRECISION}")
    return digits


@dataclass
class SessionState:
    """Mutable state owned by one interactive session.

    ``history`` and ``results`` always have the same length; ``last_result``
    is set iff at least one evaluation succeeded since the last clear.
    """

    angle_mode: AngleMode = AngleMode.RADIANS
    precision: int | None = None
    last_result: float | None = None
    history: list[EvaluationRecord] = field(default_factory=list)
    results: list[float] = field(default_factory=list)

    @classmethod
    def from_config(cls) -> "SessionState":
        """Create a session using the configured defaults."""
        state = cls()
        try:
            state.angle_mode = AngleMode(config.DEFAULT_ANGLE_MODE.strip().lower())
        except ValueError:
            logger.warning("Ignoring invalid OPCALC_ANGLE_MODE %r", config.DEFAULT_ANGLE_MODE)
        try:
            state.precision = parse_precision(config.DEFAULT_PRECISION)
        except InvalidPrecision:
            logger.warning(
                "Ignoring invalid OPCALC_DEFAULT_PRECISION %r", config.DEFAULT_PRECISION
            )
        return state

    @property
    def has_last(self) -> bool:
        return self.last_result is not None

    def evaluate(self, op: Operator, operands: Sequence[float]) -> EvaluationRecord:
        """Evaluate and, only on success, commit the result to the session."""
        result = evaluate(op, operands, self.angle_mode)
        return self.record(op, operands, result)

    def record(self, op: Operator, operands: Sequence[float], result: float) -> EvaluationRecord:
        entry = EvaluationRecord(
            expression=format_expression(op, operands, self.precision),
            result=self.format(result),
        )
        self.history.append(entry)
        self.results.append(result)
        self.last_result = result
        return entry

    def format(self, value: float) -> str:
        return format_number(value, self.precision)

    def set_angle_mode(self, mode: AngleMode) -> None:
        self.angle_mode = mode
        logger.info("Angle mode set to %s", mode.value)

    def set_precision(self, text: str) -> int | None:
        """Apply a precision setting; on error the current precision is kept."""
        self.precision = parse_precision(text)
        logger.info("Precision set to %s", "auto" if self.precision is None else self.precision)
        return self.precision

    def clear(self) -> None:
        """Forget history and last result; angle mode and precision persist."""
        self.history.clear()
        self.results.clear()
        self.last_result = None
        logger.info("Session history cleared")

    def stats(self) -> dict[str, Any] | None:
        """Count/min/max/avg over recorded results, or None when there are none."""
        if not self.results:
            return None
        values = np.asarray(self.results, dtype=float)
        return {
            "count": int(values.size),
            "min": float(np.min(values)),
            "max": float(np.max(values)),
            "avg": float(np.mean(values)),
        }

    def history_lines(self) -> list[str]:
        return [f"  {i}) {entry}" for i, entry in enumerate(self.history, start=1)]

    def export_text(self) -> str:
        """History as written by the export command: one 'expr = result' per line."""
        return "".join(f"{entry}\n" for entry in self.history)
