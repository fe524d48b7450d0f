"""Arithmetic evaluation of one operator over a flat operand list.

Binary operators reduce left to right: ``- [10, 3]`` is ``10 - 3`` and
``+ [2, 3, 5]`` is ``(2 + 3) + 5``. Unary operators take exactly one
operand. Nothing here touches session state.
"""

from __future__ import annotations

import logging
from typing import Callable
from typing import Sequence

import numpy as np

from .config import TAN_UNDEFINED_TOLERANCE
from .operators import validate_arity
from .types import AngleMode
from .types import DivisionByZero
from .types import DomainError
from .types import Operator

logger = logging.getLogger(__name__)


def _divide(x: float, y: float) -> float:
    if y == 0:
        raise DivisionByZero("division by zero")
    return x / y


def _remainder(x: float, y: float) -> float:
    # Truncated remainder: the result takes the sign of the dividend.
    if y == 0:
        raise DivisionByZero("division by zero")
    with np.errstate(all="ignore"):
        return float(np.fmod(x, y))


def _power(x: float, y: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(x), np.float64(y)))


def _tan(x: float) -> float:
    with np.errstate(all="ignore"):
        if abs(np.cos(x)) < TAN_UNDEFINED_TOLERANCE:
            raise DomainError("tan is undefined for this angle")
        return float(np.tan(x))


def _sqrt(x: float) -> float:
    if x < 0:
        raise DomainError("square root of a negative number")
    return float(np.sqrt(x))


def _log(x: float) -> float:
    if x <= 0:
        raise DomainError("logarithm of a non-positive number")
    return float(np.log(x))


def _trig(func: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        with np.errstate(all="ignore"):
            return float(func(x))

    return apply


BINARY_OPERATORS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda x, y: x + y,
    Operator.SUB: lambda x, y: x - y,
    Operator.MUL: lambda x, y: x * y,
    Operator.DIV: _divide,
    Operator.POW: _power,
    Operator.MOD: _remainder,
}

UNARY_OPERATORS: dict[Operator, Callable[[float], float]] = {
    Operator.SIN: _trig(np.sin),
    Operator.COS: _trig(np.cos),
    Operator.TAN: _tan,
    Operator.SQRT: _sqrt,
    Operator.LOG: _log,
}


def apply_unary(op: Operator, value: float, angle_mode: AngleMode = AngleMode.RADIANS) -> float:
    """Apply a unary operator, converting degrees to radians for sin/cos/tan."""
    if op.uses_angle_mode and angle_mode is AngleMode.DEGREES:
        value = float(np.deg2rad(value))
    return UNARY_OPERATORS[op](value)


def reduce_binary(op: Operator, operands: Sequence[float]) -> float:
    """Fold operands left to right; the first failing step aborts the fold."""
    func = BINARY_OPERATORS[op]
    result = float(operands[0])
    for value in operands[1:]:
        result = func(result, float(value))
    return result


def evaluate(
    op: Operator, operands: Sequence[float], angle_mode: AngleMode = AngleMode.RADIANS
) -> float:
    """Evaluate ``op`` over ``operands``.

    Raises:
        ArityError: wrong operand count for the operator
        DivisionByZero: '/' or '%' with a zero divisor
        DomainError: tan at an odd multiple of 90 degrees, sqrt of a
            negative number, log of a non-positive number
    """
    validate_arity(op, operands)
    if op.is_unary:
        result = apply_unary(op, float(operands[0]), angle_mode)
    else:
        result = reduce_binary(op, operands)
    logger.debug("evaluate %s %s (%s) -> %r", op.symbol, list(operands), angle_mode.value, result)
    return result
