"""Tests for structured logging setup."""

import io
import json
import logging
from decimal import Decimal

from brokerage.logging_config import configure_logging, get_logger


def test_records_are_json_lines_with_extras():
    stream = io.StringIO()
    configure_logging(level="INFO", stream=stream)

    get_logger("payment").info("job_paid", extra={"job_id": 7, "amount": Decimal("200.00")})

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "job_paid"
    assert payload["logger"] == "brokerage.payment"
    assert payload["level"] == "INFO"
    assert payload["job_id"] == 7
    assert payload["amount"] == "200.00"


def test_configure_is_idempotent():
    first, second = io.StringIO(), io.StringIO()
    configure_logging(level=logging.DEBUG, stream=first)
    configure_logging(level=logging.DEBUG, stream=second)

    get_logger("test").debug("hello")

    assert "hello" in first.getvalue()
    assert second.getvalue() == ""


def test_level_filters_records():
    stream = io.StringIO()
    configure_logging(level="WARNING", stream=stream)

    get_logger("deposit").info("deposit_accepted")

    assert stream.getvalue() == ""


def test_exceptions_are_included():
    stream = io.StringIO()
    configure_logging(level="ERROR", stream=stream)

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        get_logger("database").error("store_failure", exc_info=True)

    payload = json.loads(stream.getvalue().strip())
    assert payload["exc_type"] == "RuntimeError"
    assert "boom" in payload["traceback"]
