"""Writing session history to a text file."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_EXPORT_FILENAME
from .types import ExportIOError

logger = logging.getLogger(__name__)


def export_history_to_file(content: str, filename: str | None = None) -> Path:
    """Write exported history text, overwriting any existing file.

    Args:
        content: Newline-joined history entries
        filename: Target path; blank or None uses DEFAULT_EXPORT_FILENAME

    Returns:
        The path that was written

    Raises:
        ExportIOError: if the file cannot be written
    """
    target = Path((filename or "").strip() or DEFAULT_EXPORT_FILENAME)
    try:
        target.write_text(content, encoding="utf-8")
    except (OSError, ValueError) as exc:
        # ValueError covers invalid paths such as embedded null bytes
        logger.warning("Export to %r failed: %s", str(target), exc)
        reason = getattr(exc, "strerror", None) or exc
        raise ExportIOError(f"could not write {target}: {reason}") from exc
    logger.info("Exported history to %s", target)
    return target
