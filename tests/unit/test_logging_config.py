"""Unit tests for logging configuration and the JSON formatter."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

from ghostscript_transcoder.config.models import LoggingConfig
from ghostscript_transcoder.logging.config import configure_logging
from ghostscript_transcoder.logging.handlers import JSONFormatter


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


def _record(msg="Test", args=(), name="test", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("info", logging.INFO),
            ("debug", logging.DEBUG),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("DEBUG", logging.DEBUG),
        ],
    )
    def test_configure_level(self, level: str, expected: int) -> None:
        """Root logger level should follow the configured level."""
        configure_logging(LoggingConfig(level=level))
        assert logging.getLogger().level == expected

    def test_configure_stderr_only(self) -> None:
        """Should add a single stderr handler when no file specified."""
        configure_logging(LoggingConfig(file=None))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_configure_file_handler(self, tmp_path: Path) -> None:
        """Should log only to the file when include_stderr is False."""
        log_file = tmp_path / "gst.log"
        configure_logging(LoggingConfig(file=log_file, include_stderr=False))

        logging.getLogger("ghostscript_transcoder.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert len(logging.getLogger().handlers) == 1
        assert "written to file" in log_file.read_text()

    def test_configure_file_and_stderr(self, tmp_path: Path) -> None:
        """Should add both handlers when file and include_stderr."""
        configure_logging(LoggingConfig(file=tmp_path / "gst.log", include_stderr=True))
        assert len(logging.getLogger().handlers) == 2

    def test_configure_creates_log_directory(self, tmp_path: Path) -> None:
        """Should create log directory if it doesn't exist."""
        log_dir = tmp_path / "logs" / "nested"
        configure_logging(LoggingConfig(file=log_dir / "gst.log"))
        assert log_dir.exists()

    def test_configure_fallback_on_file_error(self, tmp_path: Path) -> None:
        """Should fall back to stderr when the log path is unusable."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        configure_logging(LoggingConfig(file=blocker / "gst.log"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_configure_json_formatter(self) -> None:
        """Should use JSON formatter when format is json."""
        configure_logging(LoggingConfig(format="json"))
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_configure_text_formatter(self) -> None:
        """Should use a plain formatter when format is text."""
        configure_logging(LoggingConfig(format="text"))
        formatter = logging.getLogger().handlers[0].formatter
        assert not isinstance(formatter, JSONFormatter)

    def test_configure_clears_existing_handlers(self) -> None:
        """Reconfiguring should not accumulate handlers."""
        configure_logging(LoggingConfig(level="info"))
        count = len(logging.getLogger().handlers)

        configure_logging(LoggingConfig(level="debug"))

        assert len(logging.getLogger().handlers) == count


class TestJSONFormatter:
    """Tests for JSONFormatter output."""

    def test_basic_log_entry(self) -> None:
        """Should produce valid JSON with required fields."""
        data = json.loads(JSONFormatter().format(_record(name="gst.core")))

        assert data["level"] == "INFO"
        assert data["message"] == "Test"
        assert data["logger"] == "gst.core"
        assert "context" not in data

    def test_timestamp_uses_record_created_time(self) -> None:
        """Timestamp should be the record's creation time in UTC."""
        record = _record()
        record.created = 1577836800.0

        data = json.loads(JSONFormatter().format(record))

        assert datetime.fromisoformat(data["timestamp"]) == datetime(
            2020, 1, 1, tzinfo=timezone.utc
        )

    def test_message_formatting_with_args(self) -> None:
        """Should format message with arguments."""
        data = json.loads(JSONFormatter().format(_record("Exit code %d", (3,))))
        assert data["message"] == "Exit code 3"

    @pytest.mark.parametrize("name", ["root", ""])
    def test_no_logger_field_for_root(self, name: str) -> None:
        """Root or unnamed records should omit the logger field."""
        data = json.loads(JSONFormatter().format(_record(name=name)))
        assert "logger" not in data

    def test_extra_context_included(self) -> None:
        """Extra attributes should be grouped under context."""
        record = _record()
        record.operation = "PDF"
        record.returncode = 1
        record.destination = Path("/tmp/out.pdf")

        data = json.loads(JSONFormatter().format(record))

        assert data["context"] == {
            "operation": "PDF",
            "returncode": 1,
            "destination": "/tmp/out.pdf",
        }

    def test_exception_info_included(self) -> None:
        """Should include exception info when present."""
        try:
            raise ValueError("bad page range")
        except ValueError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError" in data["exception"]
        assert "bad page range" in data["exception"]

    def test_special_characters_escaped(self) -> None:
        """Quotes and newlines should survive a JSON round trip."""
        msg = 'Unable to locate input file: "a b.pdf"\nnext'
        data = json.loads(JSONFormatter().format(_record(msg)))
        assert data["message"] == msg
