"""Tests for request ID normalization and the logging filter."""

import logging

from orgperm.middleware.request_id import (
    REQUEST_ID_MAX_LENGTH,
    RequestIDLogFilter,
    get_request_id,
    normalize_request_id,
)


def test_valid_request_id_kept() -> None:
    assert normalize_request_id("abc-123_XYZ") == "abc-123_XYZ"
    assert normalize_request_id("  abc  ") == "abc"


def test_invalid_request_id_replaced() -> None:
    for raw in (None, "", "has space", "semi;colon", "a" * (REQUEST_ID_MAX_LENGTH + 1)):
        generated = normalize_request_id(raw)
        assert generated != raw
        assert len(generated) == 36


def test_log_filter_outside_request() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    assert RequestIDLogFilter().filter(record)
    assert record.request_id == "-"
    assert get_request_id() == "-"
