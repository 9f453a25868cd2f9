"""
Logging utilities for the AWS snippet programs and integration scenarios.

Human-readable lines are written during development; JSON lines are written when
running inside AWS Lambda or when AWS_SNIPPETS_LOG_FORMAT=json, so scenario runs
can be shipped to CloudWatch Logs unchanged.
"""

import json
import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

DEFAULT_LOGGER_NAME = "aws_snippets"


def _json_output_enabled() -> bool:
    if os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
        return True
    return os.environ.get("AWS_SNIPPETS_LOG_FORMAT", "").lower() == "json"


class StructuredFormatter(logging.Formatter):
    """
    Formatter that outputs JSON for CloudWatch or human-readable text for a terminal.

    Every line names the component that emitted it: the logger name below
    "aws_snippets", e.g. "lifecycle" or "sqs". In JSON, keyword context is nested
    under "context" and never overwrites the fixed keys.
    """

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra
        self.as_json = _json_output_enabled()

    def format(self, record: logging.LogRecord) -> str:
        if self.as_json:
            return self._format_json(record)
        else:
            return self._format_human(record)

    @staticmethod
    def component(record: logging.LogRecord) -> str:
        prefix = DEFAULT_LOGGER_NAME + "."
        if record.name.startswith(prefix):
            return record.name[len(prefix):]
        return record.name

    def _format_json(self, record: logging.LogRecord) -> str:
        """Format log record as JSON for CloudWatch."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "component": self.component(record),
            "message": record.getMessage(),
        }

        if self.include_extra and getattr(record, "extra_data", None):
            log_data["context"] = dict(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)

    def _format_human(self, record: logging.LogRecord) -> str:
        """Format log record for a terminal."""
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        message = record.getMessage()

        if self.include_extra and hasattr(record, "extra_data"):
            extra_parts = [f"{k}={v}" for k, v in record.extra_data.items()]
            if extra_parts:
                message += f" [{', '.join(extra_parts)}]"

        formatted = f"{timestamp} - {record.levelname:8} - {self.component(record)}: {message}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class StdoutHandler(logging.StreamHandler):
    """StreamHandler that always writes to the current sys.stdout."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


class SnippetLogger:
    """
    Logger wrapper that accepts keyword context and times scenario steps.
    """

    def __init__(self, name: str = DEFAULT_LOGGER_NAME, level: Optional[str] = None):
        self.logger = logging.getLogger(name)
        if name == DEFAULT_LOGGER_NAME:
            self._setup_logger(level)
        else:
            # Children share the package handler
            SnippetLogger(DEFAULT_LOGGER_NAME)
            if level:
                self.logger.setLevel(getattr(logging, level.upper()))

    def _setup_logger(self, level: Optional[str] = None):
        """Attach the structured handler once to the package logger."""
        if level:
            self.logger.setLevel(getattr(logging, level.upper()))

        if self.logger.handlers:
            return  # Already configured

        if not level:
            self.logger.setLevel(logging.INFO)

        handler = StdoutHandler()
        handler.setFormatter(StructuredFormatter())
        self.logger.addHandler(handler)

        # Keep pytest's caplog working: records still reach the root logger
        self.logger.propagate = True

    def info(self, message: str, **extra):
        """Log info message with optional extra context."""
        self._log_with_extra(logging.INFO, message, extra)

    def debug(self, message: str, **extra):
        """Log debug message with optional extra context."""
        self._log_with_extra(logging.DEBUG, message, extra)

    def warning(self, message: str, **extra):
        """Log warning message with optional extra context."""
        self._log_with_extra(logging.WARNING, message, extra)

    def error(self, message: str, exc_info: bool = False, **extra):
        """Log error message with optional exception info and extra context."""
        self._log_with_extra(logging.ERROR, message, extra, exc_info=exc_info)

    def _log_with_extra(
        self, level: int, message: str, extra: Dict[str, Any], exc_info: bool = False
    ):
        if not self.logger.isEnabledFor(level):
            return
        if extra:
            exc_info_tuple = sys.exc_info() if exc_info else None
            record = self.logger.makeRecord(
                self.logger.name, level, "", 0, message, (), exc_info_tuple
            )
            record.extra_data = extra
            self.logger.handle(record)
        else:
            self.logger.log(level, message, exc_info=exc_info)

    @contextmanager
    def timer(self, operation: str):
        """Context manager for timing operations."""
        start_time = time.time()
        self.info(f"Starting {operation}")

        try:
            yield
            duration = time.time() - start_time
            self.info(f"Completed {operation}", duration_seconds=f"{duration:.2f}")
        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {operation}",
                duration_seconds=f"{duration:.2f}",
                error=str(e),
            )
            raise


def setup_logging(level: str = "INFO") -> SnippetLogger:
    """
    Set up logging for a CLI program.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured SnippetLogger instance
    """
    return SnippetLogger(level=level)


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> SnippetLogger:
    """
    Get a logger instance.

    Child names ("aws_snippets.sqs") share the handler of the package logger.

    Args:
        name: Logger name

    Returns:
        SnippetLogger instance
    """
    if name != DEFAULT_LOGGER_NAME and not name.startswith(DEFAULT_LOGGER_NAME + "."):
        name = f"{DEFAULT_LOGGER_NAME}.{name}"
    return SnippetLogger(name)
