"""Console and file logger with a process-wide shared instance."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from logln.timefmt import DEFAULT_LOG_FILE_NAME, render_line


class LogFileError(RuntimeError):
    """Raised when the log file cannot be opened."""

    def __init__(self, path: Path, original: OSError | None = None) -> None:
        super().__init__(f"Error opening log file: {path}")
        self.path = path
        self.original = original


class Logger:
    """Writes rendered lines to the console and to at most one log file.

    Every call is written; the level only selects the label.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        console_enabled: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self._stream = stream
        self._console_enabled = console_enabled
        self._encoding = encoding
        self._file: TextIO | None = None
        self._owns_file = False
        self._path: Path | None = None

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def set_console_enabled(self, enabled: bool) -> None:
        self._console_enabled = enabled

    def set_encoding(self, encoding: str) -> None:
        self._encoding = encoding

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def path(self) -> Path | None:
        return self._path

    def open(self, path: Path | str) -> Path:
        """Open a log file in append mode, creating it if needed.

        Any previously open file is closed first.

        Args:
            path: Log file path.

        Returns:
            The opened path.

        Raises:
            LogFileError: If the file cannot be opened.
        """
        target = Path(path)
        self.close()
        try:
            handle = target.open("a", encoding=self._encoding)
        except OSError as exc:
            raise LogFileError(target, exc) from exc
        self._file = handle
        self._owns_file = True
        self._path = target
        return target

    def open_default(self, directory: Path | str | None = None) -> Path:
        """Open the default timestamped log file, optionally inside a directory."""
        if directory:
            return self.open(Path(directory) / DEFAULT_LOG_FILE_NAME)
        return self.open(Path(DEFAULT_LOG_FILE_NAME))

    def attach(self, stream: TextIO) -> None:
        """Use an already-open text stream as the file sink.

        The caller keeps ownership: ``close`` flushes it but leaves it open.
        """
        self.close()
        self._file = stream
        self._owns_file = False
        self._path = None

    def close(self) -> None:
        """Close the log file if one is open.

        Attached streams are only flushed.
        """
        if self._file is None:
            return
        handle = self._file
        owned = self._owns_file
        self._file = None
        self._owns_file = False
        self._path = None
        if owned:
            handle.close()
        else:
            handle.flush()

    def _console(self) -> TextIO:
        return self._stream or sys.stdout

    def raw_write(self, text: str, silent: bool = False) -> None:
        """Write text verbatim without a timestamp or trailing newline."""
        if not silent and self._console_enabled:
            self._console().write(text)
        if self._file is not None:
            self._file.write(text)

    def write_line(self, line: str, level: int, silent: bool = False) -> str:
        """Write one rendered record terminated by a newline.

        Args:
            line: Message text.
            level: Severity used for the label.
            silent: Skip console output; the file still receives the line.

        Returns:
            The rendered record without the newline.
        """
        msg = render_line(line, level)
        if not silent and self._console_enabled:
            print(msg, file=self._console())
        if self._file is not None:
            self._file.write(msg + "\n")
            self._file.flush()
        return msg

    def start_line(self, text: str, level: int, silent: bool = False) -> str:
        """Write a rendered record without a newline so it can be continued."""
        msg = render_line(text, level)
        self.raw_write(msg, silent)
        return msg


_LOGGER = Logger()


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _LOGGER
