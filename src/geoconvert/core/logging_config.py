"""
Centralized logging configuration for geoconvert.

Console output is colored in development and plain elsewhere; an optional
rotating file handler can emit JSON records for log aggregation.
"""

import json
import logging
import logging.handlers
import sys
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Any, Dict, Optional

from geoconvert.core.config import settings

# Attributes every LogRecord carries; anything else was attached via ``extra``
# or LogContext and is copied into the JSON payload.
_RESERVED_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Conversion context such as ``source_epsg``, ``target_epsg`` or
    ``input_format`` ends up as top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of the log record
        """
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Formatter adding ANSI colors to the level name for console output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        formatted = super().format(record)

        # Other handlers share the record
        record.levelname = levelname

        return formatted


def get_log_level(level_name: str) -> int:
    """
    Convert log level name to logging constant.

    Args:
        level_name: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Logging level constant, INFO for unknown names
    """
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_name.upper(), logging.INFO)


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: bool = False,
    enable_console: bool = True,
) -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Log level name; derived from the environment when omitted
        log_file: Path to a rotating log file, or None for no file logging
        json_logs: Whether to use JSON format for file logs
        enable_console: Whether to enable console logging
    """
    if log_level is None:
        log_level = settings.log_level or (
            "DEBUG" if settings.environment == "development" else "INFO"
        )

    level = get_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if settings.environment == "development":
            console_formatter: logging.Formatter = ColoredFormatter(
                "%(levelname)s | %(asctime)s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            console_formatter = logging.Formatter(
                "%(levelname)s - %(asctime)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # 10MB per file, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)

        if json_logs:
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - "
                "%(module)s:%(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pyproj").setLevel(logging.WARNING)

    root_logger.info(
        f"Logging initialized: level={log_level}, "
        f"environment={settings.environment}, "
        f"json_logs={json_logs}, "
        f"file={log_file is not None}"
    )


_log_context: ContextVar[Dict[str, Any]] = ContextVar("geoconvert_log_context", default={})
_base_record_factory = logging.getLogRecordFactory()


def _context_record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
    record = _base_record_factory(*args, **kwargs)
    for key, value in _log_context.get().items():
        setattr(record, key, value)
    return record


logging.setLogRecordFactory(_context_record_factory)


class LogContext:
    """
    Context manager for adding contextual information to logs.

    Fields are scoped to the current thread or task, so concurrent
    conversions do not see each other's context.

    Usage:
        with LogContext(source_epsg=4326, target_epsg=3857):
            logger.info("Transforming")
    """

    def __init__(self, **kwargs: Any):
        """
        Initialize LogContext with contextual fields.

        Args:
            **kwargs: Key-value pairs to add to log records
        """
        self.context = kwargs
        self._token: Optional[Token] = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.context})
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None
