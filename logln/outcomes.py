"""Result types returned by the severity helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from logln.severity import Severity


@dataclass(frozen=True)
class Ok:
    """Nothing failed; a success line may have been written."""

    message: str = ""


@dataclass(frozen=True)
class Recoverable:
    """A failure was logged and the caller may continue."""

    severity: int
    message: str


@dataclass(frozen=True)
class Fatal:
    """A failure was logged and the process should exit."""

    message: str


@dataclass(frozen=True)
class Unrecoverable:
    """A failure was logged and a fault should be raised."""

    message: str


Outcome = Union[Ok, Recoverable, Fatal, Unrecoverable]


def outcome_for(severity: int, message: str) -> Outcome:
    """Map a logged severity to the outcome the caller must act on."""
    if severity == Severity.FATAL:
        return Fatal(message)
    if severity == Severity.PANIC:
        return Unrecoverable(message)
    return Recoverable(severity, message)
