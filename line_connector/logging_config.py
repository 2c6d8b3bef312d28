"""
Logging configuration.

Configures structured JSON logging to stdout. The level is read from the
LOG_LEVEL environment variable (default INFO).
"""

import json
import logging
import os
from datetime import UTC, datetime


class JsonFormatter(logging.Formatter):
    """
    Custom JSON log formatter.

    Emits one JSON object per record.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format.

        Returns:
            A JSON string representing the log record.
        """
        log_object = {
            "timestamp": datetime.now(UTC).isoformat(),
            "severity": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if they exist
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_object.update(record.extra_fields)

        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_object, default=str)


def setup_global_logging(level: str | None = None) -> None:
    """
    Configure the root logger with a single JSON stdout handler.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(level_name)

    # Remove default handlers to avoid duplicate logs
    for h in root_logger.handlers[:]:
        if h is not handler:
            root_logger.removeHandler(h)

    # Keep httpx request lines out of INFO output
    logging.getLogger("httpx").setLevel(logging.WARNING)
