from __future__ import annotations

import logging

from ..operators import validate_arity
from ..session import SessionState
from ..types import Operator
from ..utils.parsing import parse_number
from ..utils.parsing import split_operand_tokens
from .line_reader import LineReader

logger = logging.getLogger(__name__)


def collect_operands(reader: LineReader, op: Operator, session: SessionState) -> list[float]:
    """
    Read operand lines for ``op`` until a blank line.
    Each line may hold several numbers separated by spaces or commas.

    Raises EndOfInput if input ends mid-collection; a bad token aborts the
    round at once with InvalidNumber/NoPriorResult; ArityError if the final
    count does not fit the operator.
    """
    operands: list[float] = []
    last = session.last_result if session.has_last else 0.0

    while True:
        line = reader.prompt(f"Number {len(operands) + 1} (blank line to finish): ")
        if not line:
            break
        for token in split_operand_tokens(line):
            operands.append(parse_number(token, last, session.has_last))

    logger.debug("Collected operands for %s: %s", op.symbol, operands)
    validate_arity(op, operands)
    return operands
