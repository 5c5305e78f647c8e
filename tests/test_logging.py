"""Tests for the JSON log formatter."""

import json
import logging

from src.shared.infrastructure.logging import CustomJsonFormatter


def format_record(**extra) -> dict:
    formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s", environment="test")
    record = logging.LogRecord("lottery", logging.INFO, __file__, 1, "Login failed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(formatter.format(record))


def test_adds_context_fields():
    output = format_record(correlation_id="abc-123", user_id=7)

    assert output["message"] == "Login failed"
    assert output["environment"] == "test"
    assert output["correlation_id"] == "abc-123"
    assert output["user_id"] == 7
    assert "timestamp" in output


def test_redacts_credentials():
    output = format_record(password="hunter22", access_token="eyJ...", username="mgmg")

    assert output["password"] == "***REDACTED***"
    assert output["access_token"] == "***REDACTED***"
    assert output["username"] == "mgmg"
