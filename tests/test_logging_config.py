"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
import sys

from fitcore.logging_config import JSONFormatter, get_logger, setup_logging


def _record(msg="hello %s", args=("world",), level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test", level=level, pathname="test.py",
        lineno=1, msg=msg, args=args, exc_info=exc_info
    )


def test_json_formatter_outputs_valid_json():
    parsed = json.loads(JSONFormatter().format(_record()))
    assert parsed["message"] == "hello world"
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "test"
    assert "timestamp" in parsed


def test_json_formatter_includes_exception():
    try:
        raise ValueError("test error")
    except ValueError:
        exc_info = sys.exc_info()
    parsed = json.loads(JSONFormatter().format(_record("fail", (), logging.ERROR, exc_info)))
    assert parsed["exception"]["type"] == "ValueError"
    assert parsed["exception"]["message"] == "test error"


def test_json_formatter_groups_context_fields():
    record = _record("fatigue_detected", ())
    record.ctx_score = 7
    record.ctx_days_since = 1
    parsed = json.loads(JSONFormatter().format(record))
    assert parsed["context"] == {"score": 7, "days_since": 1}


def test_get_logger_returns_named_logger():
    log = get_logger("my.module")
    assert log.name == "my.module"
    assert isinstance(log, logging.Logger)


def test_setup_logging_idempotent():
    root = logging.getLogger()
    initial_count = len(root.handlers)
    setup_logging()
    setup_logging()
    # Should not add duplicate handlers
    assert len(root.handlers) <= initial_count + 1


def test_json_formatter_tags_service():
    assert json.loads(JSONFormatter().format(_record()))["service"] == "fitcoach-engine"
    assert json.loads(JSONFormatter("worker").format(_record()))["service"] == "worker"
