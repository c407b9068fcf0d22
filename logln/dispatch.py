"""Severity helpers and condition dispatchers.

Nothing here exits or raises on a logged failure. Each helper writes its line
through a ``Logger`` and returns an outcome; ``logln.shell.resolve`` turns
``Fatal`` into a process exit and ``Unrecoverable`` into ``PanicError``.
"""

from __future__ import annotations

from logln.logger import Logger
from logln.outcomes import Ok, Outcome, outcome_for
from logln.severity import Severity


ERROR_PREFIX = "Error occurred "
FATAL_ERROR_PREFIX = "Fatal error encountered "
FATAL_CONDITION_PREFIX = "Fatal error occurred "
PANIC_PREFIX = "Panic "

_CONDITION_PREFIXES = {
    Severity.WARNING: "",
    Severity.ERROR: ERROR_PREFIX,
    Severity.FATAL: FATAL_CONDITION_PREFIX,
    Severity.PANIC: PANIC_PREFIX,
}

_ERROR_PREFIXES = {
    Severity.WARNING: "",
    Severity.ERROR: ERROR_PREFIX,
    Severity.FATAL: FATAL_ERROR_PREFIX,
    Severity.PANIC: PANIC_PREFIX,
}


def with_error(msg: str, err: BaseException | str | None) -> str:
    """Append ``": <error text>"`` to a message when an error is given."""
    if err is None:
        return msg
    return f"{msg}: {err}"


def _log(logger: Logger, message: str, severity: int) -> Outcome:
    logger.write_line(message, severity, False)
    return outcome_for(severity, message)


def log_error(
    logger: Logger,
    severity: int,
    msg: str,
    err: BaseException | str | None = None,
) -> Outcome:
    """Log a message (and optional error) at a severity with its fixed prefix.

    Args:
        logger: Destination logger.
        severity: Severity of the line.
        msg: Message text.
        err: Optional error whose text is appended.

    Returns:
        The outcome associated with the severity.
    """
    prefix = _ERROR_PREFIXES.get(severity, "")
    return _log(logger, with_error(prefix + msg, err), severity)


def warning(logger: Logger, msg: str, err: BaseException | str | None = None) -> Outcome:
    return log_error(logger, Severity.WARNING, msg, err)


def warning_with_error(logger: Logger, msg: str, err: BaseException | str | None) -> Outcome:
    return log_error(logger, Severity.WARNING, msg, err)


def print_error(logger: Logger, msg: str, err: BaseException | str | None = None) -> Outcome:
    return log_error(logger, Severity.ERROR, msg, err)


def fatal_error(logger: Logger, msg: str, err: BaseException | str | None = None) -> Outcome:
    return log_error(logger, Severity.FATAL, msg, err)


def panic_error(logger: Logger, msg: str, err: BaseException | str | None = None) -> Outcome:
    return log_error(logger, Severity.PANIC, msg, err)


def log_if_false(logger: Logger, condition: bool, severity: int, msg: str) -> Outcome:
    """Log ``"<prefix><msg>: false"`` when the condition is false.

    A true condition writes nothing and returns ``Ok``.
    """
    if condition:
        return Ok()
    prefix = _CONDITION_PREFIXES.get(severity, "")
    return _log(logger, f"{prefix}{msg}: false", severity)


def warn_if_not_false(logger: Logger, b: bool, msg: str) -> Outcome:
    return log_if_false(logger, b, Severity.WARNING, msg)


def error_if_not_false(logger: Logger, b: bool, msg: str) -> Outcome:
    return log_if_false(logger, b, Severity.ERROR, msg)


def fatal_if_not_false(logger: Logger, b: bool, msg: str) -> Outcome:
    return log_if_false(logger, b, Severity.FATAL, msg)


def panic_if_not_false(logger: Logger, b: bool, msg: str) -> Outcome:
    return log_if_false(logger, b, Severity.PANIC, msg)


warn_if_not_ok = warn_if_not_false
error_if_not_ok = error_if_not_false
fatal_if_not_ok = fatal_if_not_false
panic_if_not_ok = panic_if_not_false


def print_success(logger: Logger, msg: str, success_level: int, silent: bool) -> Outcome:
    """Write ``"Success <msg>."`` at the requested level."""
    message = f"Success {msg}."
    logger.write_line(message, success_level, silent)
    return Ok(message)


def or_success_if_not_ok(
    logger: Logger,
    severity: int,
    ok: bool,
    msg: str,
    success_level: int,
    is_success_silent: bool,
) -> Outcome:
    """Log the failure at ``severity`` when not ok, otherwise a success line."""
    if not ok:
        return log_if_false(logger, ok, severity, msg)
    return print_success(logger, msg, success_level, is_success_silent)


def or_success(
    logger: Logger,
    severity: int,
    msg: str,
    err: BaseException | str | None,
    success_level: int,
    is_success_silent: bool,
) -> Outcome:
    """Log the error at ``severity`` when present, otherwise a success line."""
    if err is not None:
        return log_error(logger, severity, msg, err)
    return print_success(logger, msg, success_level, is_success_silent)


def print_warning_or_success_if_not_ok(
    logger: Logger, ok: bool, msg: str, success_level: int, is_success_silent: bool
) -> Outcome:
    return or_success_if_not_ok(logger, Severity.WARNING, ok, msg, success_level, is_success_silent)


def print_error_or_success_if_not_ok(
    logger: Logger, ok: bool, msg: str, success_level: int, is_success_silent: bool
) -> Outcome:
    return or_success_if_not_ok(logger, Severity.ERROR, ok, msg, success_level, is_success_silent)


def print_fatal_or_success_if_not_ok(
    logger: Logger, ok: bool, msg: str, success_level: int, is_success_silent: bool
) -> Outcome:
    return or_success_if_not_ok(logger, Severity.FATAL, ok, msg, success_level, is_success_silent)


def print_panic_or_success_if_not_ok(
    logger: Logger, ok: bool, msg: str, success_level: int, is_success_silent: bool
) -> Outcome:
    return or_success_if_not_ok(logger, Severity.PANIC, ok, msg, success_level, is_success_silent)


def print_warning_or_success(
    logger: Logger,
    msg: str,
    err: BaseException | str | None,
    success_level: int,
    is_success_silent: bool,
) -> Outcome:
    return or_success(logger, Severity.WARNING, msg, err, success_level, is_success_silent)


def print_error_or_success(
    logger: Logger,
    msg: str,
    err: BaseException | str | None,
    success_level: int,
    is_success_silent: bool,
) -> Outcome:
    return or_success(logger, Severity.ERROR, msg, err, success_level, is_success_silent)


def print_fatal_or_success(
    logger: Logger,
    msg: str,
    err: BaseException | str | None,
    success_level: int,
    is_success_silent: bool,
) -> Outcome:
    return or_success(logger, Severity.FATAL, msg, err, success_level, is_success_silent)


def print_panic_or_success(
    logger: Logger,
    msg: str,
    err: BaseException | str | None,
    success_level: int,
    is_success_silent: bool,
) -> Outcome:
    return or_success(logger, Severity.PANIC, msg, err, success_level, is_success_silent)
