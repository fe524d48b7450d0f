"""opcalc package: operator-first interactive calculator (evaluator, session, CLI)."""

__version__ = "1.0.0"

from . import cli, config, evaluator, logging_config, operators, session, types
from .evaluator import evaluate
from .operators import normalize_operator
from .session import SessionState
from .types import AngleMode, CalculatorError, EvaluationRecord, Operator
from .utils.parsing import parse_number

__all__ = [
    "config",
    "cli",
    "evaluator",
    "logging_config",
    "operators",
    "session",
    "types",
    "evaluate",
    "normalize_operator",
    "parse_number",
    "SessionState",
    "AngleMode",
    "CalculatorError",
    "EvaluationRecord",
    "Operator",
]
