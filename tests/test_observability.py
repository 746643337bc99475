"""Tests for request-scoped logging helpers."""

from __future__ import annotations

import logging

from fitapi.observability import (
    RequestIdFilter,
    get_request_id,
    new_request_id,
    request_log_fields,
    reset_request_id,
    set_request_id,
)


def test_request_id_context_roundtrip():
    token = set_request_id("req-1")
    try:
        assert get_request_id() == "req-1"
    finally:
        reset_request_id(token)
    assert get_request_id() is None


def test_new_request_id_unique():
    assert new_request_id() != new_request_id()


def test_filter_attaches_request_id():
    record = logging.makeLogRecord({"msg": "x"})
    token = set_request_id("req-2")
    try:
        assert RequestIdFilter().filter(record) is True
    finally:
        reset_request_id(token)
    assert record.ctx_request_id == "req-2"


def test_filter_without_request_id():
    record = logging.makeLogRecord({"msg": "x"})
    RequestIdFilter().filter(record)
    assert not hasattr(record, "ctx_request_id")


def test_request_log_fields():
    fields = request_log_fields(method="GET", path="/health", status_code=200, duration_ms=1.23456, client_ip=None)
    assert fields["ctx_status_code"] == 200
    assert fields["ctx_duration_ms"] == 1.23
    assert fields["ctx_client_ip"] == ""
