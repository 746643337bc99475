from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone


SERVICE_NAME = "fitcoach-engine"

# Loggers from the server stack that are too chatty below WARNING
_QUIET_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, tagged with the emitting service.

    Attributes passed via extra= with a ctx_ prefix are collected under
    "context" with the prefix stripped.
    """

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = {
                "type": type(record.exc_info[1]).__name__,
                "message": str(record.exc_info[1]),
            }
        context = {k[4:]: v for k, v in record.__dict__.items() if k.startswith("ctx_")}
        if context:
            log_entry["context"] = context
        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", service: str = SERVICE_NAME) -> None:
    """Configure structured JSON logging to stdout."""
    root = logging.getLogger()
    if any(isinstance(h.formatter, JSONFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(service))
    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger for a module."""
    return logging.getLogger(name)
