"""Leveled console and file logging with condition helpers."""

from logln.api import (
    close,
    configure,
    custom_init,
    error_if_not_false,
    error_if_not_ok,
    fatal_error,
    fatal_if_not_false,
    fatal_if_not_ok,
    init,
    log_if_false,
    logln,
    manual_logf,
    panic_error,
    panic_if_not_false,
    panic_if_not_ok,
    print_error,
    print_error_or_success,
    print_error_or_success_if_not_ok,
    print_fatal_or_success,
    print_fatal_or_success_if_not_ok,
    print_panic_or_success,
    print_panic_or_success_if_not_ok,
    print_success,
    print_warning_or_success,
    print_warning_or_success_if_not_ok,
    printf,
    start_manual_logf,
    warn_if_not_false,
    warn_if_not_ok,
    warning,
    warning_with_error,
)
from logln.logger import LogFileError, Logger, get_logger
from logln.outcomes import Fatal, Ok, Outcome, Recoverable, Unrecoverable
from logln.severity import Severity, severity_label
from logln.shell import PanicError, resolve
from logln.timefmt import (
    DEFAULT_LOG_FILE_NAME,
    current_timestamp_file_format,
    current_timestamp_log_format,
    default_log_file_name,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LOG_FILE_NAME",
    "Fatal",
    "LogFileError",
    "Logger",
    "Ok",
    "Outcome",
    "PanicError",
    "Recoverable",
    "Severity",
    "Unrecoverable",
    "close",
    "configure",
    "current_timestamp_file_format",
    "current_timestamp_log_format",
    "custom_init",
    "default_log_file_name",
    "error_if_not_false",
    "error_if_not_ok",
    "fatal_error",
    "fatal_if_not_false",
    "fatal_if_not_ok",
    "get_logger",
    "init",
    "log_if_false",
    "logln",
    "manual_logf",
    "panic_error",
    "panic_if_not_false",
    "panic_if_not_ok",
    "print_error",
    "print_error_or_success",
    "print_error_or_success_if_not_ok",
    "print_fatal_or_success",
    "print_fatal_or_success_if_not_ok",
    "print_panic_or_success",
    "print_panic_or_success_if_not_ok",
    "print_success",
    "print_warning_or_success",
    "print_warning_or_success_if_not_ok",
    "printf",
    "resolve",
    "severity_label",
    "start_manual_logf",
    "warn_if_not_false",
    "warn_if_not_ok",
    "warning",
    "warning_with_error",
]
