from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence

import numpy as np

from ..types import Operator

# %g switches to exponent notation outside this decimal exponent range
_MIN_FIXED_EXPONENT = -4
_MAX_FIXED_EXPONENT = 6


def format_special_values(value: float) -> str | None:
    """Return the display form of inf/nan, or None for finite values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return None


def format_number(value: float, precision: int | None = None) -> str:
    """Format a result for display.

    With ``precision=None`` (AUTO) this is the shortest representation that
    round-trips, laid out like C's ``%g``: ``1024``, ``0.1``, ``1e+06``,
    ``1.5e-05``. Otherwise the value gets exactly ``precision`` decimals.
    """
    value = float(value)
    special = format_special_values(value)
    if special is not None:
        return special

    if precision is not None:
        return f"{value:.{precision}f}"

    exponent = Decimal(repr(value)).adjusted()
    if exponent < _MIN_FIXED_EXPONENT or exponent >= _MAX_FIXED_EXPONENT:
        return np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)
    return np.format_float_positional(value, unique=True, trim="-")


def format_expression(
    op: Operator, operands: Sequence[float], precision: int | None = None
) -> str:
    """Render an evaluated expression: ``2 + 3 + 5`` or ``sin(90)``."""
    parts = [format_number(x, precision) for x in operands]
    if op.is_unary:
        return f"{op.symbol}({parts[0]})"
    return f" {op.symbol} ".join(parts)


def format_precision(precision: int | None) -> str:
    return "auto" if precision is None else str(precision)


def format_stats(stats: dict, precision: int | None = None) -> list[str]:
    """Lines for the 'stats' command from a count/min/max/avg mapping."""
    return [
        f"  count: {stats['count']}",
        f"  min:   {format_number(stats['min'], precision)}",
        f"  max:   {format_number(stats['max'], precision)}",
        f"  avg:   {format_number(stats['avg'], precision)}",
    ]
