"""Central logging configuration for norgrefile.

Call :func:`configure_logging` once at start-up (the CLI and the API server do
this) and obtain module loggers through :func:`get_logger`. Structured fields
passed with ``extra={...}`` are appended to each record as ``key=value`` pairs.
"""

from __future__ import annotations

import logging
import logging.config

from norgrefile.config import NORGREFILE_LOG_LEVEL

__all__ = ["ExtraFieldsFormatter", "configure_logging", "get_logger"]

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields after the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {fields}"


def configure_logging(level: str | int | None = None) -> None:
    """Configure console logging for the ``norgrefile`` and ``server`` loggers."""
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "extra": {
                "()": ExtraFieldsFormatter,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "extra",
            },
        },
        "loggers": {
            "norgrefile": {
                "handlers": ["console"],
                "level": level or NORGREFILE_LOG_LEVEL,
                "propagate": False,
            },
            "server": {
                "handlers": ["console"],
                "level": level or NORGREFILE_LOG_LEVEL,
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)
