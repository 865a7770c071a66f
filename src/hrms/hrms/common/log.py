"""JSON logging.

Usage:
    from ..common.log import get_logger

    logger = get_logger(__name__)
    logger.info("Staff created", extra={"staff_id": "1700000001"})
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.json import JsonFormatter

_SENSITIVE = ("password", "secret")


class HrmsJsonFormatter(JsonFormatter):
    """Adds timestamp and environment, redacts sensitive keys."""

    def __init__(self, *args: Any, environment: str = "unknown", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._environment = environment

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["environment"] = self._environment

        for key in list(log_record):
            if any(s in key.lower() for s in _SENSITIVE):
                log_record[key] = "***REDACTED***"


def setup_logging(level: str = "INFO", environment: str = "dev") -> None:
    """Configure JSON logging on the root logger."""

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        HrmsJsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
            environment=environment,
        )
    )
    root_logger.addHandler(handler)

    # Werkzeug prints its own access lines; we log requests ourselves.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
