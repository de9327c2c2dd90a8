from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from argcheck.config import Settings


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logs with stable keys."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Set by the HTTP handler when a guard rejects an argument
        if hasattr(record, "param_name"):
            data["param_name"] = record.param_name
        if hasattr(record, "error_kind"):
            data["error_kind"] = record.error_kind

        return json.dumps(data, ensure_ascii=False, default=str)


def setup_logging(level: str | None = None) -> None:
    """Configure root logging with the JSON formatter; safe to call twice."""
    resolved = level or Settings.from_env().log_level
    root = logging.getLogger()
    root.setLevel(getattr(logging, resolved.upper(), logging.INFO))
    if any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return module logger."""
    return logging.getLogger(name)
