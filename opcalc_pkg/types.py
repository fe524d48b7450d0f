"""Shared types for opcalc: error hierarchy, operators and session records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from enum import auto


class CalculatorError(Exception):
    """Base class for calculator errors.

    ``category`` is the short prefix shown to the user in front of the message.
    """

    category = "Error"

    def display(self) -> str:
        return f"{self.category}: {self}"


class InvalidNumber(CalculatorError):
    """Raised when an operand token is not a number."""

    category = "Input error"


class NoPriorResult(CalculatorError):
    """Raised when 'ans' or 'last' is used before any successful evaluation."""

    category = "Input error"


class ArityError(CalculatorError):
    """Raised when an operator receives the wrong number of operands."""

    category = "Input error"


class DomainError(CalculatorError):
    """Raised when a function is evaluated outside its domain."""

    category = "Calculation error"


class DivisionByZero(CalculatorError):
    """Raised on division or remainder by exactly zero."""

    category = "Calculation error"


class UnknownOperator(CalculatorError):
    """Raised when a token is not a supported operator or alias."""

    category = "Operator error"


class InvalidPrecision(CalculatorError):
    """Raised when a precision value is not 'auto' or an integer in range."""

    category = "Precision error"


class NoHistory(CalculatorError):
    """Raised when exporting an empty history."""

    category = "Export error"


class ExportIOError(CalculatorError):
    """Raised when the history file cannot be written."""

    category = "Export error"


class EndOfInput(Exception):
    """The line reader reported end-of-input; the session must end."""


class OperatorKind(Enum):
    BINARY = auto()
    UNARY = auto()


class Operator(Enum):
    """Supported operators, keyed by their canonical token."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    MOD = "%"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQRT = "sqrt"
    LOG = "log"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def kind(self) -> OperatorKind:
        if self in _UNARY:
            return OperatorKind.UNARY
        return OperatorKind.BINARY

    @property
    def is_unary(self) -> bool:
        return self.kind is OperatorKind.UNARY

    @property
    def uses_angle_mode(self) -> bool:
        return self in (Operator.SIN, Operator.COS, Operator.TAN)

    @property
    def min_operands(self) -> int:
        return 1 if self.is_unary else 2

    @property
    def max_operands(self) -> int | None:
        """Upper bound on operand count, or None when any number is allowed."""
        if self in (Operator.ADD, Operator.MUL):
            return None
        return self.min_operands


_UNARY = frozenset(
    {Operator.SIN, Operator.COS, Operator.TAN, Operator.SQRT, Operator.LOG}
)


class AngleMode(Enum):
    RADIANS = "radians"
    DEGREES = "degrees"


@dataclass(frozen=True)
class EvaluationRecord:
    """One successful evaluation as it appears in the history."""

    expression: str
    result: str

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"
