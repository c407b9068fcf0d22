"""Process-level handling of helper outcomes."""

from __future__ import annotations

import sys

from logln.outcomes import Fatal, Outcome, Unrecoverable


FATAL_EXIT_CODE = 1


class PanicError(RuntimeError):
    """Raised after a panic line is written; carries the logged message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def resolve(outcome: Outcome) -> Outcome:
    """Act on an outcome.

    Args:
        outcome: Result of a dispatch helper.

    Returns:
        The outcome unchanged when it is ``Ok`` or ``Recoverable``.

    Raises:
        SystemExit: With status 1 for ``Fatal``.
        PanicError: For ``Unrecoverable``.
    """
    if isinstance(outcome, Fatal):
        sys.exit(FATAL_EXIT_CODE)
    if isinstance(outcome, Unrecoverable):
        raise PanicError(outcome.message)
    return outcome
