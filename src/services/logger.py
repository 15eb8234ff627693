"""Structured JSON logging for Kubernetes."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


# Process instance ID for correlation across log entries
INSTANCE_ID = str(uuid.uuid4())


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that adds instance_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        )
        log_record["instance_id"] = INSTANCE_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Args:
        verbose: Log at DEBUG instead of INFO.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(message)s",
        timestamp=True,
    )
    json_handler.setFormatter(formatter)
    logger.addHandler(json_handler)

    return logger


def log_verification(
    ip: str | None,
    result: str,
    reason: str,
    status: int,
    duration_ms: int,
) -> None:
    """Log structured per-request verification result.

    Args:
        ip: Value of the ip query parameter (None if absent).
        result: Result tag (yes, no, error).
        reason: Human-readable reason returned to the client.
        status: HTTP status returned.
        duration_ms: Processing time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Verification completed",
        extra={
            "ip": ip,
            "result": result,
            "reason": reason,
            "status": status,
            "duration_ms": duration_ms,
        },
    )
