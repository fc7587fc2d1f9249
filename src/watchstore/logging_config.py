"""Structured JSON logging for watchstore.

Every logger lives under the ``watchstore`` namespace. Records are
rendered as one JSON object per line; anything passed through
``extra=`` ends up as a top-level field.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

__all__ = [
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "reset_logging",
]

_LOGGER_PREFIX = "watchstore"

_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "taskName"}


class _JSONEncoder(json.JSONEncoder):
    """Handle Decimal, datetime and enums in log payloads."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, cls=_JSONEncoder, default=str)


class _StderrHandler(logging.Handler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    terminator = "\n"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stderr
            stream.write(self.format(record) + self.terminator)
            stream.flush()
        except Exception:
            self.handleError(record)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the watchstore namespace."""
    if name.startswith(f"{_LOGGER_PREFIX}.") or name == _LOGGER_PREFIX:
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False


def configure_logging(level: str | int = logging.INFO, stream=None) -> None:
    """Attach the JSON handler to the watchstore root logger.

    Safe to call more than once; only the level changes on later calls.
    """
    global _configured

    root = logging.getLogger(_LOGGER_PREFIX)
    root.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
    root.propagate = False

    # SQL statements are only wanted when explicitly echoed.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True


def reset_logging() -> None:
    """Remove the handlers installed by configure_logging (for tests)."""
    global _configured

    root = logging.getLogger(_LOGGER_PREFIX)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)
    _configured = False
