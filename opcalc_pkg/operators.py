"""Operator lookup and arity rules."""

from __future__ import annotations

from typing import Sequence

from .types import ArityError
from .types import Operator
from .types import UnknownOperator

OPERATOR_ALIASES = {
    "pow": Operator.POW,
    "mod": Operator.MOD,
    "ln": Operator.LOG,
}

_BY_TOKEN = {op.symbol: op for op in Operator}


def normalize_operator(token: str) -> Operator:
    """Resolve a typed token (symbol, function name or alias) to an Operator.

    Word tokens are matched case-insensitively.

    Raises:
        UnknownOperator: if the token names no supported operator
    """
    text = token.strip()
    op = _BY_TOKEN.get(text) or _BY_TOKEN.get(text.lower())
    if op is None:
        op = OPERATOR_ALIASES.get(text.lower())
    if op is None:
        raise UnknownOperator(f"unknown operator '{text}'")
    return op


def validate_arity(op: Operator, operands: Sequence[float]) -> None:
    """Check the operand count against the operator's arity rule.

    Raises:
        ArityError: unary operators need exactly one operand, '+' and '*'
            need two or more, the other binary operators exactly two
    """
    count = len(operands)
    if op.max_operands is None:
        if count < op.min_operands:
            raise ArityError(f"'{op.symbol}' needs at least {op.min_operands} numbers, got {count}")
        return
    if count != op.min_operands:
        noun = "number" if op.min_operands == 1 else "numbers"
        raise ArityError(f"'{op.symbol}' needs exactly {op.min_operands} {noun}, got {count}")


def describe_operators() -> list[str]:
    """Lines listing every operator and its aliases, for the 'ops' command."""
    aliases: dict[Operator, list[str]] = {}
    for alias, op in OPERATOR_ALIASES.items():
        aliases.setdefault(op, []).append(alias)

    lines = []
    for op in Operator:
        arity = "unary" if op.is_unary else "binary"
        if op.max_operands is None:
            arity += ", 2+ numbers"
        line = f"  {op.symbol:<5} {arity}"
        if op in aliases:
            line += f" (alias: {', '.join(aliases[op])})"
        lines.append(line)
    return lines
