import io
import re
from pathlib import Path

import pytest

from logln.logger import LogFileError, Logger, get_logger


LINE_RE = r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}"


def test_write_line_console_format(capsys) -> None:
    logger = Logger()

    logger.write_line("x", 0, False)

    out = capsys.readouterr().out
    assert re.fullmatch(rf"{LINE_RE} INFO x\n", out)


def test_write_line_writes_same_line_to_file(tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "run.log"
    logger = Logger()
    logger.open(log_path)

    logger.write_line("x", 0, False)
    logger.close()

    out = capsys.readouterr().out
    assert log_path.read_text(encoding="utf-8") == out


def test_write_line_without_label_for_unknown_level() -> None:
    stream = io.StringIO()
    logger = Logger(stream=stream)

    logger.write_line("plain", 17)

    assert re.fullmatch(rf"{LINE_RE} plain\n", stream.getvalue())


def test_silent_write_skips_console_but_not_file() -> None:
    stream = io.StringIO()
    sink = io.StringIO()
    logger = Logger(stream=stream)
    logger.attach(sink)

    logger.write_line("quiet", 1, silent=True)

    assert stream.getvalue() == ""
    assert re.fullmatch(rf"{LINE_RE} WARNING quiet\n", sink.getvalue())


def test_writes_without_file_only_reach_console() -> None:
    stream = io.StringIO()
    logger = Logger(stream=stream)

    logger.raw_write("a")
    logger.write_line("b", 0)

    assert not logger.is_open
    assert stream.getvalue().startswith("a")
    assert stream.getvalue().endswith(" INFO b\n")


def test_silent_write_without_file_produces_nothing() -> None:
    stream = io.StringIO()
    logger = Logger(stream=stream)

    logger.raw_write("a", silent=True)
    logger.write_line("b", 0, silent=True)

    assert stream.getvalue() == ""


def test_raw_write_is_verbatim() -> None:
    stream = io.StringIO()
    sink = io.StringIO()
    logger = Logger(stream=stream)
    logger.attach(sink)

    logger.raw_write("50%")

    assert stream.getvalue() == "50%"
    assert sink.getvalue() == "50%"


def test_start_line_builds_a_line_incrementally() -> None:
    stream = io.StringIO()
    logger = Logger(stream=stream)

    logger.start_line("Progress:", 0)
    logger.raw_write(" 10%")
    logger.raw_write(" done\n")

    assert re.fullmatch(rf"{LINE_RE} INFO Progress: 10% done\n", stream.getvalue())


def test_console_disabled_behaves_like_silent(tmp_path: Path) -> None:
    stream = io.StringIO()
    logger = Logger(stream=stream, console_enabled=False)
    log_path = logger.open(tmp_path / "quiet.log")

    logger.write_line("only file", 0)
    logger.close()

    assert stream.getvalue() == ""
    assert "INFO only file" in log_path.read_text(encoding="utf-8")


def test_open_appends_to_existing_content(tmp_path: Path) -> None:
    log_path = tmp_path / "app.log"
    logger = Logger(stream=io.StringIO())

    logger.open(log_path)
    logger.write_line("first", 0)
    logger.close()
    logger.open(log_path)
    logger.write_line("second", 0)
    logger.close()

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("INFO first")
    assert lines[1].endswith("INFO second")


def test_open_replaces_previous_file(tmp_path: Path) -> None:
    logger = Logger(stream=io.StringIO())
    logger.open(tmp_path / "one.log")
    logger.open(tmp_path / "two.log")

    logger.write_line("x", 0)
    logger.close()

    assert (tmp_path / "one.log").read_text(encoding="utf-8") == ""
    assert "INFO x" in (tmp_path / "two.log").read_text(encoding="utf-8")


def test_open_default_uses_timestamped_name(tmp_path: Path) -> None:
    from logln.timefmt import DEFAULT_LOG_FILE_NAME

    logger = Logger(stream=io.StringIO())

    path = logger.open_default(tmp_path)
    logger.close()

    assert path == tmp_path / DEFAULT_LOG_FILE_NAME
    assert path.exists()


def test_open_failure_raises_log_file_error(tmp_path: Path) -> None:
    logger = Logger(stream=io.StringIO())

    with pytest.raises(LogFileError) as exc_info:
        logger.open(tmp_path)

    assert exc_info.value.path == tmp_path
    assert "Error opening log file" in str(exc_info.value)
    assert not logger.is_open


def test_start_line_writes_prefix_to_file_without_newline() -> None:
    sink = io.StringIO()
    logger = Logger(stream=io.StringIO())
    logger.attach(sink)

    logger.start_line("Copying", 2)

    assert re.fullmatch(rf"{LINE_RE} ERROR Copying", sink.getvalue())


def test_close_leaves_attached_stream_open() -> None:
    sink = io.StringIO()
    logger = Logger(stream=io.StringIO())
    logger.attach(sink)
    logger.write_line("x", 0)

    logger.close()

    assert not logger.is_open
    assert not sink.closed
    assert sink.getvalue().endswith(" INFO x\n")


class _NoSpaceFile(io.StringIO):
    def flush(self) -> None:
        raise OSError(28, "No space left on device")


def test_close_releases_owned_file_when_flush_fails(tmp_path: Path, monkeypatch) -> None:
    handle = _NoSpaceFile()
    monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: handle)
    logger = Logger(stream=io.StringIO())
    logger.open(tmp_path / "full.log")

    logger.close()

    assert not logger.is_open
    assert handle.closed


def test_set_stream_redirects_console() -> None:
    first = io.StringIO()
    second = io.StringIO()
    logger = Logger(stream=first)

    logger.write_line("a", 0)
    logger.set_stream(second)
    logger.write_line("b", 0)

    assert first.getvalue().endswith(" INFO a\n")
    assert second.getvalue().endswith(" INFO b\n")


def test_close_is_a_noop_without_file() -> None:
    logger = Logger(stream=io.StringIO())

    logger.close()
    logger.close()

    assert logger.path is None


def test_get_logger_returns_shared_instance() -> None:
    assert get_logger() is get_logger()
