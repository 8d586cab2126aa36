"""
Tests for logging utilities and configuration.
"""

import json
import logging
import threading
from pathlib import Path

import pytest

from geoconvert.core.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    LogContext,
    get_log_level,
    setup_logging,
)
from geoconvert.utils.logging import PerformanceTimer, log_performance


def make_record(msg: str = "test") -> logging.LogRecord:
    return logging.getLogRecordFactory()(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
        func=None,
        sinfo=None,
    )


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        """Test log level name conversion."""
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("warning") == logging.WARNING
        assert get_log_level("invalid") == logging.INFO

    def test_setup_logging_console_only(self):
        """Test logging setup with console handler only."""
        setup_logging(log_level="DEBUG", enable_console=True)

        logger = logging.getLogger()
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_json_file(self, tmp_path: Path):
        """Test file logging writes JSON records."""
        log_file = tmp_path / "logs" / "geoconvert.log"
        setup_logging(log_level="INFO", log_file=log_file, json_logs=True, enable_console=False)

        logging.getLogger("geoconvert.test").info("written", extra={"source_epsg": 4326})
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "written"
        assert record["source_epsg"] == 4326


class TestLogContext:
    """Tests for LogContext."""

    def test_fields_added_inside_context(self):
        with LogContext(source_epsg=4326, target_epsg=3857):
            record = make_record()

        assert record.source_epsg == 4326
        assert record.target_epsg == 3857

    def test_fields_removed_after_context(self):
        with LogContext(request_id="abc"):
            pass

        assert not hasattr(make_record(), "request_id")

    def test_nested_contexts(self):
        with LogContext(request_id="abc"):
            with LogContext(source_epsg=28992):
                record = make_record()
            outer = make_record()

        assert record.request_id == "abc"
        assert record.source_epsg == 28992
        assert not hasattr(outer, "source_epsg")

    def test_context_is_per_thread(self):
        """Test a context in one thread does not leak into another."""
        seen = {}
        entered = threading.Event()
        release = threading.Event()

        def worker():
            with LogContext(request_id="worker"):
                entered.set()
                release.wait(timeout=5)

        thread = threading.Thread(target=worker)
        thread.start()
        entered.wait(timeout=5)
        seen["main"] = getattr(make_record(), "request_id", None)
        release.set()
        thread.join()

        assert seen["main"] is None


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="test.module",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        record.target_epsg = 3857

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.module"
        assert data["message"] == "Test message"
        assert data["line"] == 42
        assert data["target_epsg"] == 3857

    def test_colored_formatter_restores_levelname(self):
        record = make_record()
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in output
        assert record.levelname == "INFO"


class TestPerformanceLogging:
    """Tests for timing helpers."""

    def test_performance_timer(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="geoconvert.utils.logging"):
            with PerformanceTimer("convert") as timer:
                pass

        assert timer.duration_ms is not None
        assert "convert completed in" in caplog.text

    def test_performance_timer_failure(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="geoconvert.utils.logging"):
            with pytest.raises(RuntimeError):
                with PerformanceTimer("convert"):
                    raise RuntimeError("boom")

        assert "convert failed in" in caplog.text

    def test_performance_timer_threshold(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="geoconvert.utils.logging"):
            with PerformanceTimer("fast", threshold_ms=60_000):
                pass

        assert "fast" not in caplog.text

    def test_log_performance(self, caplog: pytest.LogCaptureFixture):
        @log_performance(log_level=logging.INFO)
        def add(a, b):
            return a + b

        with caplog.at_level(logging.INFO, logger="geoconvert.utils.logging"):
            assert add(1, 2) == 3

        assert "add executed in" in caplog.text
