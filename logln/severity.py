"""Severity levels and their display labels."""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    """Log severities in their fixed numeric order."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3
    PANIC = 4
    DEBUG = 5


_LABELS = {int(level): level.name for level in Severity}


def severity_label(level: int) -> str:
    """Return the display label for a level.

    Args:
        level: Severity or plain integer.

    Returns:
        The label for levels 0-5, otherwise an empty string.
    """
    try:
        return _LABELS.get(int(level), "")
    except (TypeError, ValueError):
        return ""
