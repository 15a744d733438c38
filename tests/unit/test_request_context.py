"""Request context carried into log records."""

import logging

from app.shared.context import clear_current_user, set_current_user, set_request_id
from app.shared.telemetry.logging import RequestContextFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("app", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_adds_request_id_and_uid() -> None:
    set_request_id("req-1")
    set_current_user("abc123", is_admin=True)
    try:
        record = _record()
        assert RequestContextFilter().filter(record)
        assert (record.request_id, record.uid) == ("req-1", "abc123")
    finally:
        set_request_id(None)
        clear_current_user()


def test_filter_uses_dash_outside_a_request() -> None:
    set_request_id(None)
    clear_current_user()
    record = _record()
    RequestContextFilter().filter(record)
    assert (record.request_id, record.uid) == ("-", "-")
