"""Centralized configuration for opcalc.

This module defines:
- Session defaults (output precision, angle mode)
- Numeric tolerances for domain checks
- Symbolic constants recognized as operands
- Export and logging defaults

Configuration can be overridden via environment variables (prefixed with OPCALC_).
"""

import logging
import os

import sympy as sp

logger = logging.getLogger(__name__)


def env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to default on bad values."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s %r, using %r", name, raw, default)
        return default


VERSION = "1.0.0"

# Session defaults (can be overridden via environment variables)
DEFAULT_PRECISION = os.getenv("OPCALC_DEFAULT_PRECISION", "auto")  # "auto" or 0-10
DEFAULT_ANGLE_MODE = os.getenv("OPCALC_ANGLE_MODE", "radians")  # "radians" or "degrees"
MAX_PRECISION = 10

# Numeric tolerance constants
TAN_UNDEFINED_TOLERANCE = env_float(
    "OPCALC_TAN_UNDEFINED_TOLERANCE", 1e-12
)  # |cos(x)| below this makes tan(x) undefined

# Export configuration
DEFAULT_EXPORT_FILENAME = os.getenv("OPCALC_EXPORT_FILENAME", "calculator_history.txt")

# Logging configuration
LOG_LEVEL = os.getenv("OPCALC_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Tokens accepted as operands besides decimal literals
SYMBOLIC_CONSTANTS = {
    "pi": float(sp.pi.evalf()),
    "e": float(sp.E.evalf()),
}
LAST_RESULT_ALIASES = ("ans", "last")
