import io
from datetime import datetime

import pytest

from shellguard.logger import Logger, open_logger


@pytest.mark.parametrize(
    "cmd, args, allowed, want",
    [
        ("ls", ["-l"], True, "ALLOWED"),
        ("rm", ["-rf", "/"], False, "BLOCKED"),
    ],
)
def test_command_attempt(cmd, args, allowed, want):
    buf = io.StringIO()
    Logger(buf).command_attempt(cmd, args, allowed)
    out = buf.getvalue()
    assert want in out
    assert cmd in out


def test_command_attempt_formats_args():
    buf = io.StringIO()
    Logger(buf).command_attempt("rm", ["-rf", "/"], False)
    assert "[BLOCKED] Command: rm [-rf /]" in buf.getvalue()


@pytest.mark.parametrize(
    "fmt, args, want",
    [
        ("Error: %s", ("test error",), "[ERROR] Error: test error"),
        ("Multiple values: %d, %s", (42, "test"), "[ERROR] Multiple values: 42, test"),
    ],
)
def test_error(fmt, args, want):
    buf = io.StringIO()
    Logger(buf).error(fmt, *args)
    assert want in buf.getvalue()


@pytest.mark.parametrize(
    "fmt, args, want",
    [
        ("Info: %s", ("test info",), "[INFO] Info: test info"),
        ("Multiple values: %d, %s", (42, "test"), "[INFO] Multiple values: 42, test"),
    ],
)
def test_info(fmt, args, want):
    buf = io.StringIO()
    Logger(buf).info(fmt, *args)
    assert want in buf.getvalue()


def test_message_without_args_is_not_formatted():
    buf = io.StringIO()
    Logger(buf).info("100% done")
    assert "[INFO] 100% done" in buf.getvalue()


def test_line_shape():
    buf = io.StringIO()
    Logger(buf).info("hello")
    out = buf.getvalue()
    assert out.count("\n") == 1
    assert out.endswith("\n")
    date_part, time_part, stamp, rest = out.split(" ", 3)
    assert rest == "[INFO] hello\n"
    parsed = datetime.strptime(f"{date_part} {time_part}", "%Y/%m/%d %H:%M:%S")
    assert parsed.year >= 2000
    assert stamp.startswith(str(parsed.year))


def test_open_logger_with_valid_path(tmp_path):
    path = tmp_path / "test.log"
    logger = open_logger(path)
    logger.info("Test log message")
    logger.close()
    assert "Test log message" in path.read_text(encoding="utf-8")


def test_open_logger_appends(tmp_path):
    path = tmp_path / "test.log"
    with open_logger(path) as logger:
        logger.info("first")
    with open_logger(path) as logger:
        logger.info("second")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("first")
    assert lines[1].endswith("second")


def test_open_logger_with_empty_path_discards(capsys):
    logger = open_logger("")
    logger.info("This should not be logged")
    logger.close()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_open_logger_with_invalid_path(tmp_path):
    with pytest.raises(OSError, match="failed to open log file"):
        open_logger(tmp_path / "does" / "not" / "exist" / "test.log")


def test_default_logger_has_no_output(capsys):
    logger = Logger()
    logger.info("This should be discarded")
    logger.error("This error should be discarded: %s", "test")
    logger.command_attempt("test", ["arg1", "arg2"], True)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""