"""Timestamp helpers for log lines and default log file names."""

from __future__ import annotations

from datetime import datetime

from logln.severity import severity_label


LOG_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
FILE_TIMESTAMP_FORMAT = "%Y_%m_%d-%H_%M_%S"


def current_timestamp_log_format(now: datetime | None = None) -> str:
    """Return local time as YYYY/MM/DD HH:MM:SS."""
    return (now or datetime.now()).strftime(LOG_TIMESTAMP_FORMAT)


def current_timestamp_file_format(now: datetime | None = None) -> str:
    """Return local time as YYYY_MM_DD-HH_MM_SS."""
    return (now or datetime.now()).strftime(FILE_TIMESTAMP_FORMAT)


def default_log_file_name(now: datetime | None = None) -> str:
    """Build a log file name from a timestamp.

    Args:
        now: Optional datetime override for deterministic tests.

    Returns:
        File name such as ``2024_01_02-03_04_05.log``.
    """
    return f"{current_timestamp_file_format(now)}.log"


# Fixed for the lifetime of the process.
DEFAULT_LOG_FILE_NAME = default_log_file_name()


def render_line(text: str, level: int, now: datetime | None = None) -> str:
    """Render one record as ``<date> <LEVEL> <text>`` or ``<date> <text>``."""
    date = current_timestamp_log_format(now)
    label = severity_label(level)
    if label:
        return f"{date} {label} {text}"
    return f"{date} {text}"
