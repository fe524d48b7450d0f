import math
import re

from ..config import LAST_RESULT_ALIASES
from ..config import SYMBOLIC_CONSTANTS
from ..types import InvalidNumber
from ..types import NoPriorResult

_OPERAND_SEPARATORS = re.compile(r"[\s,]+")
_INFINITY_WORDS = ("inf", "infinity")


def parse_number(token: str, last_result: float = 0.0, has_last: bool = False) -> float:
    """
    Convert an operand token to float.
    Handles 'ans'/'last' (previous result), 'pi', 'e' and decimal literals.
    Literals that overflow a float, and digit-grouping underscores, are rejected.
    """
    text = token.strip()
    lowered = text.lower()

    if lowered in LAST_RESULT_ALIASES:
        if not has_last:
            raise NoPriorResult("no previous result")
        return last_result

    if lowered in SYMBOLIC_CONSTANTS:
        return SYMBOLIC_CONSTANTS[lowered]

    if "_" in text:
        raise InvalidNumber(f"invalid number '{text}'")
    try:
        value = float(text)
    except ValueError:
        raise InvalidNumber(f"invalid number '{text}'") from None

    if math.isinf(value) and lowered.lstrip("+-") not in _INFINITY_WORDS:
        raise InvalidNumber(f"number out of range '{text}'")
    return value


def split_operand_tokens(line: str) -> list[str]:
    """Split one input line into operand tokens on whitespace and commas."""
    return [tok for tok in _OPERAND_SEPARATORS.split(line.strip()) if tok]
