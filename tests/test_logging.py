"""Tests for request-scoped logging."""

import logging

import pytest

from cardgen.core.logging import (
    NO_REQUEST,
    RequestIdFilter,
    RequestLogger,
    request_logger,
)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("cardgen.test", logging.INFO, __file__, 1, "hello", None, None)
    record.__dict__.update(extra)
    return record


class TestRequestIdFilter:
    def test_fills_missing_request_id(self) -> None:
        record = _record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == NO_REQUEST

    def test_keeps_existing_request_id(self) -> None:
        record = _record(request_id="abc123")
        RequestIdFilter().filter(record)
        assert record.request_id == "abc123"


class TestRequestLogger:
    def test_records_carry_request_id(self, caplog: pytest.LogCaptureFixture) -> None:
        log = request_logger("cardgen.test", "req42")
        with caplog.at_level(logging.INFO, logger="cardgen.test"):
            log.info("Generate request")
        assert caplog.records[-1].request_id == "req42"

    def test_caller_extra_is_merged(self, caplog: pytest.LogCaptureFixture) -> None:
        log = request_logger("cardgen.test", "req42")
        with caplog.at_level(logging.INFO, logger="cardgen.test"):
            log.info("Generation result", extra={"cards": 3})
        assert caplog.records[-1].request_id == "req42"
        assert caplog.records[-1].cards == 3

    def test_generates_id_when_missing(self) -> None:
        first = request_logger("cardgen.test")
        second = request_logger("cardgen.test")
        assert isinstance(first, RequestLogger)
        assert len(first.extra["request_id"]) == 8
        assert first.extra["request_id"] != second.extra["request_id"]
