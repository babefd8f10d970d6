"""Logging configuration for the Map Distance service."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

from .config import ObservabilityConfig

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: ObservabilityConfig) -> None:
    """Configure the root logger.

    Args:
        config: Level, format and whether to emit JSON lines.
    """
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    if config.structured:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={"level": config.level, "structured": config.structured},
    )
