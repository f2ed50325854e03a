"""Logging utilities for UICONS asset resolution."""

from __future__ import annotations

import json
import logging
from logging import Logger
from logging.config import dictConfig
from typing import Optional

_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Structured JSON formatter that keeps ``extra`` context."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


PACKAGE_LOGGER = "uicons"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(
    *,
    level: str = "INFO",
    json_logs: bool = False,
    log_file: Optional[str] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> Logger:
    """Attach handlers to the resolver's package logger and return it.

    Only ``logger_name`` (``uicons`` by default) is touched, so a host
    application keeps its own root configuration. Records stop propagating
    once the package logger has handlers of its own, to avoid printing
    resolver warnings twice. Library code never calls this.
    """

    formatter = "json" if json_logs else "text"
    handlers = {"uicons_console": {"class": "logging.StreamHandler", "formatter": formatter}}
    if log_file:
        handlers["uicons_file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "encoding": "utf-8",
            "formatter": formatter,
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": _TEXT_FORMAT, "datefmt": _DATE_FORMAT},
                "json": {"()": JSONFormatter, "datefmt": _DATE_FORMAT},
            },
            "handlers": handlers,
            "loggers": {
                logger_name: {
                    "handlers": sorted(handlers),
                    "level": level.upper(),
                    "propagate": False,
                }
            },
        }
    )
    return logging.getLogger(logger_name)


def get_logger(name: str) -> Logger:
    """Return a module-scoped logger."""

    return logging.getLogger(name)
