"""Structured logging configuration."""

import logging
import sys
from typing import Any

from medcalc.core.config import settings

EXTRA_FIELDS = ("calculator_type", "session_id", "correlation_id", "action")


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Simple key=value format for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def setup_logging() -> None:
    """Configure application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if settings.is_dev:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = StructuredFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class UserActionLogger:
    """Logger for user-facing calculator actions (exports, submissions)."""

    def __init__(self) -> None:
        self.logger = get_logger("medcalc.actions")

    def log(
        self,
        action: str,
        details: dict[str, Any] | None = None,
        calculator_type: str | None = None,
    ) -> None:
        """Log a user action."""
        self.logger.info(
            f"ACTION: action={action} calculator={calculator_type or '-'} "
            f"details={details or {}}",
            extra={"action": action, "calculator_type": calculator_type or "-"},
        )


user_action_logger = UserActionLogger()
