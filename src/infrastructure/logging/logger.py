"""Structured logging."""

import json
import logging
import sys
from datetime import datetime
from typing import Any

_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    json_output: bool = True,
    silence_noisy_loggers: bool = True,
) -> None:
    """
    Configure the root logger once for the whole application.

    Args:
        level: Root log level name
        json_output: Emit JSON lines instead of human-readable text
        silence_noisy_loggers: Raise chatty HTTP client loggers to WARNING
    """
    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))

    if silence_noisy_loggers:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


class StructuredLogger:
    """Structured logger for pipeline events."""

    def __init__(self, name: str = __name__):
        """Initialize structured logger."""
        self.logger = logging.getLogger(name)

    def log_step(
        self,
        step: str,
        state: dict[str, Any],
        duration_ms: float | None = None,
    ) -> None:
        """Log a pipeline step."""
        log_data: dict[str, Any] = {
            "step": step,
            "timestamp": datetime.utcnow().isoformat(),
            "state": state,
        }
        if duration_ms is not None:
            log_data["duration_ms"] = round(duration_ms, 2)

        self.logger.info(json.dumps(log_data, ensure_ascii=False, default=str))

    def log_error(
        self,
        step: str,
        error: Exception,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Log an error with context."""
        log_data: dict[str, Any] = {
            "step": step,
            "error": str(error),
            "error_type": type(error).__name__,
            "timestamp": datetime.utcnow().isoformat(),
        }
        if context:
            log_data["context"] = context

        self.logger.error(json.dumps(log_data, ensure_ascii=False, default=str), exc_info=error)
