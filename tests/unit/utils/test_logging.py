"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from easekit.core.utils.logging import (
    DEFAULT_FORMAT,
    StructuredJSONFormatter,
    configure_logging,
)


def _make_record(msg: str = "Test message", args: tuple = ()) -> logging.LogRecord:
    record = logging.LogRecord(
        name="easekit.test",
        level=logging.INFO,
        pathname="/path/to/library.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=None,
    )
    record.funcName = "build_default_registry"
    record.module = "library"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        """Record is rendered as a single JSON object."""
        formatter = StructuredJSONFormatter()
        data = json.loads(formatter.format(_make_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "easekit.test"
        assert data["context"]["module"] == "library"
        assert data["context"]["function"] == "build_default_registry"
        assert data["context"]["line"] == 42

    def test_message_arguments_are_applied(self) -> None:
        """%-style arguments are merged into the message."""
        formatter = StructuredJSONFormatter()
        data = json.loads(formatter.format(_make_record("Built %s with %d curves", ("x", 3))))
        assert data["message"] == "Built x with 3 curves"

    def test_extra_fields_go_to_context(self) -> None:
        """Caller-supplied extras appear in the context."""
        formatter = StructuredJSONFormatter()
        record = _make_record()
        record.catalogue = "tween_equations"

        data = json.loads(formatter.format(record))
        assert data["context"]["catalogue"] == "tween_equations"
        assert "msg" not in data["context"]

    def test_exception_info(self) -> None:
        """Exception type and message are captured."""
        formatter = StructuredJSONFormatter()
        try:
            raise ValueError("bad curve")
        except ValueError:
            record = logging.LogRecord(
                name="easekit.test",
                level=logging.ERROR,
                pathname=__file__,
                lineno=1,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        data = json.loads(formatter.format(record))
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad curve"
        assert "Traceback" in data["context"]["stack_trace"]


@pytest.mark.usefixtures("restore_root_logging")
class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_level_case_insensitive(self) -> None:
        """Level names are accepted in any case."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_default_text_format(self) -> None:
        """Text output uses the default format string."""
        configure_logging(level="INFO")
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.formatter is not None
        assert handler.formatter._fmt == DEFAULT_FORMAT

    def test_structured_file_output(self, tmp_path) -> None:
        """Structured logging to a file writes JSON lines."""
        log_file = tmp_path / "easekit.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("easekit.test").info("Registered %d curves", 5)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert len(lines) == 1
        data = json.loads(lines[0])
        assert data["message"] == "Registered 5 curves"
        assert data["context"]["logger_name"] == "easekit.test"
