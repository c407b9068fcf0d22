"""Process-wide logging functions over the shared logger.

These wrap ``logln.dispatch`` and resolve each outcome: fatal helpers exit
with status 1 and panic helpers raise ``PanicError``.
"""

from __future__ import annotations

import sys
from pathlib import Path

from logln import dispatch
from logln.config import Config, SuccessConfig, load_config
from logln.logger import LogFileError, get_logger
from logln.outcomes import Outcome
from logln.shell import FATAL_EXIT_CODE, resolve
from logln.timefmt import DEFAULT_LOG_FILE_NAME

_SUCCESS_DEFAULTS = SuccessConfig()

ErrorLike = BaseException | str | None


def _open_or_exit(path: Path) -> Path:
    try:
        return get_logger().open(path)
    except LogFileError as exc:
        print(f"Error opening log file: {exc.path}", file=sys.stderr)
        sys.exit(FATAL_EXIT_CODE)


def init() -> Path:
    """Open the default timestamped log file in the working directory."""
    return _open_or_exit(Path(DEFAULT_LOG_FILE_NAME))


def custom_init(file_path: Path | str) -> Path:
    """Open the log file at ``file_path``; exit with status 1 if that fails."""
    return _open_or_exit(Path(file_path))


def close() -> None:
    get_logger().close()


def configure(path: Path | str | None = None) -> Config:
    """Apply a config file to the shared logger.

    Args:
        path: Optional JSON config overlaying the packaged defaults.

    Returns:
        The loaded Config.
    """
    global _SUCCESS_DEFAULTS
    cfg = load_config(Path(path) if path is not None else None)
    logger = get_logger()
    logger.set_console_enabled(cfg.console.enabled)
    logger.set_encoding(cfg.file.encoding)
    _SUCCESS_DEFAULTS = cfg.success
    if cfg.file.enabled:
        name = cfg.file.name or DEFAULT_LOG_FILE_NAME
        directory = Path(cfg.file.directory) if cfg.file.directory else Path()
        if cfg.file.directory:
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError:
                print(f"Error opening log file: {directory / name}", file=sys.stderr)
                sys.exit(FATAL_EXIT_CODE)
        _open_or_exit(directory / name)
    return cfg


def _success_args(success_level: int | None, is_success_silent: bool | None) -> tuple[int, bool]:
    level = _SUCCESS_DEFAULTS.level if success_level is None else success_level
    silent = _SUCCESS_DEFAULTS.silent if is_success_silent is None else is_success_silent
    return level, silent


# Line primitives


def logln(line: str, level: int, is_silent: bool = False) -> str:
    return get_logger().write_line(line, level, is_silent)


def start_manual_logf(text: str, level: int, is_silent: bool = False) -> str:
    return get_logger().start_line(text, level, is_silent)


def manual_logf(text: str, level: int = 0, is_silent: bool = False) -> None:
    get_logger().raw_write(text, is_silent)


def printf(text: str, level: int = 0, is_silent: bool = False) -> None:
    get_logger().raw_write(text, is_silent)


# Severity helpers


def warning(msg: str, err: ErrorLike = None) -> Outcome:
    return resolve(dispatch.warning(get_logger(), msg, err))


def warning_with_error(msg: str, err: ErrorLike) -> Outcome:
    return resolve(dispatch.warning_with_error(get_logger(), msg, err))


def print_error(msg: str, err: ErrorLike = None) -> Outcome:
    return resolve(dispatch.print_error(get_logger(), msg, err))


def fatal_error(msg: str, err: ErrorLike = None) -> Outcome:
    return resolve(dispatch.fatal_error(get_logger(), msg, err))


def panic_error(msg: str, err: ErrorLike = None) -> Outcome:
    return resolve(dispatch.panic_error(get_logger(), msg, err))


def log_if_false(condition: bool, severity: int, msg: str) -> Outcome:
    return resolve(dispatch.log_if_false(get_logger(), condition, severity, msg))


# Condition dispatchers


def warn_if_not_false(b: bool, msg: str) -> Outcome:
    return resolve(dispatch.warn_if_not_false(get_logger(), b, msg))


def error_if_not_false(b: bool, msg: str) -> Outcome:
    return resolve(dispatch.error_if_not_false(get_logger(), b, msg))


def fatal_if_not_false(b: bool, msg: str) -> Outcome:
    return resolve(dispatch.fatal_if_not_false(get_logger(), b, msg))


def panic_if_not_false(b: bool, msg: str) -> Outcome:
    return resolve(dispatch.panic_if_not_false(get_logger(), b, msg))


warn_if_not_ok = warn_if_not_false
error_if_not_ok = error_if_not_false
fatal_if_not_ok = fatal_if_not_false
panic_if_not_ok = panic_if_not_false


# Success/failure combinators


def print_success(msg: str, success_level: int | None = None, is_silent: bool | None = None) -> Outcome:
    level, silent = _success_args(success_level, is_silent)
    return dispatch.print_success(get_logger(), msg, level, silent)


def print_warning_or_success_if_not_ok(
    ok: bool, msg: str, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_warning_or_success_if_not_ok(get_logger(), ok, msg, level, silent))


def print_error_or_success_if_not_ok(
    ok: bool, msg: str, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_error_or_success_if_not_ok(get_logger(), ok, msg, level, silent))


def print_fatal_or_success_if_not_ok(
    ok: bool, msg: str, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_fatal_or_success_if_not_ok(get_logger(), ok, msg, level, silent))


def print_panic_or_success_if_not_ok(
    ok: bool, msg: str, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_panic_or_success_if_not_ok(get_logger(), ok, msg, level, silent))


def print_warning_or_success(
    msg: str, err: ErrorLike, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_warning_or_success(get_logger(), msg, err, level, silent))


def print_error_or_success(
    msg: str, err: ErrorLike, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_error_or_success(get_logger(), msg, err, level, silent))


def print_fatal_or_success(
    msg: str, err: ErrorLike, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_fatal_or_success(get_logger(), msg, err, level, silent))


def print_panic_or_success(
    msg: str, err: ErrorLike, success_level: int | None = None, is_success_silent: bool | None = None
) -> Outcome:
    level, silent = _success_args(success_level, is_success_silent)
    return resolve(dispatch.print_panic_or_success(get_logger(), msg, err, level, silent))
