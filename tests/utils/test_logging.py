"""Tests for logging utilities: sinks, transcript file loggers and formatters."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import pytest

from pretty_httpx_logger.config import LoggerColor
from pretty_httpx_logger.utils.logging.iso_formatter import ISO8601LineFormatter
from pretty_httpx_logger.utils.logging.logger_setup import setup_text_logger
from pretty_httpx_logger.utils.logging.sinks import colored_sink, console_sink, logger_sink
from pretty_httpx_logger.utils.logging.system_logger import ConsoleFormatter, get_system_logger

TIMESTAMP = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z"


def make_record(msg: object, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, msg, None, None)


class TestSinks:
    """Tests for line sinks."""

    def test_console_sink_writes_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        # Act
        console_sink()("║ hello")

        # Assert
        assert capsys.readouterr().out == "║ hello\n"

    def test_console_sink_can_write_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        # Act
        console_sink(err=True)("║ oops")

        # Assert
        captured = capsys.readouterr()
        assert captured.err == "║ oops\n"
        assert captured.out == ""

    def test_logger_sink_logs_each_line(self, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        logger = logging.getLogger("pretty-httpx-logger.test-sink")

        # Act
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            emit = logger_sink(logger, logging.DEBUG)
            emit("one")
            emit("two")

        # Assert
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.DEBUG, "one"),
            (logging.DEBUG, "two"),
        ]

    def test_reset_color_returns_sink_unchanged(self) -> None:
        lines: list[str] = []
        assert colored_sink(lines.append, LoggerColor.RESET) == lines.append

    def test_color_wraps_every_line(self) -> None:
        # Arrange
        lines: list[str] = []
        emit = colored_sink(lines.append, LoggerColor.RED)

        # Act
        emit("a")
        emit("b")

        # Assert
        assert lines == ["\x1b[31ma\x1b[0m", "\x1b[31mb\x1b[0m"]


class TestSetupTextLogger:
    """Tests for transcript file loggers."""

    def test_writes_timestamped_lines(self, tmp_path: Path) -> None:
        # Arrange
        log_file = tmp_path / "logs" / "transcript.log"
        logger = setup_text_logger("pretty-httpx-logger.test-file", log_file)

        # Act
        logger.info("╔╣ Request ║ GET ")
        for handler in logger.handlers:
            handler.flush()

        # Assert
        content = log_file.read_text(encoding="utf-8")
        assert re.fullmatch(TIMESTAMP + r" ╔╣ Request ║ GET \n", content)

    def test_does_not_propagate(self, tmp_path: Path) -> None:
        logger = setup_text_logger("pretty-httpx-logger.test-propagate", tmp_path / "t.log")
        assert logger.propagate is False

    def test_repeated_setup_keeps_one_handler(self, tmp_path: Path) -> None:
        # Act
        setup_text_logger("pretty-httpx-logger.test-repeat", tmp_path / "a.log")
        logger = setup_text_logger("pretty-httpx-logger.test-repeat", tmp_path / "b.log")

        # Assert
        assert len(logger.handlers) == 1


class TestFormatters:
    """Tests for ISO8601LineFormatter and ConsoleFormatter."""

    def test_iso_formatter_plain_message(self) -> None:
        output = ISO8601LineFormatter().format(make_record("║ line"))
        assert re.fullmatch(TIMESTAMP + " ║ line", output)

    def test_iso_formatter_dict_message(self) -> None:
        output = ISO8601LineFormatter().format(make_record({"event": "pretty_log_failed"}))
        assert output.endswith(" pretty_log_failed")

    def test_console_formatter_prefers_message(self) -> None:
        # Arrange
        record = make_record({"event": "pretty_log_failed", "message": "Failed to print HTTP response"}, logging.WARNING)

        # Act
        output = ConsoleFormatter().format(record)

        # Assert
        assert output == "WARNING: Failed to print HTTP response"


class TestSystemLogger:
    """Tests for the system logger singleton."""

    def test_is_singleton(self) -> None:
        assert get_system_logger() is get_system_logger()

    def test_configuration(self) -> None:
        logger = get_system_logger()
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
