"""
tests.shared.test_error_log_schema

Purpose:
    Contract tests for the frontend error-log payload.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from backend.shared.schemas.log import ErrorLog


def _base(**overrides) -> dict:
    body = {
        "message": "boom",
        "url": "https://app.example.com/weights",
        "timestamp": "2026-01-06T08:00:00Z",
    }
    body.update(overrides)
    return body


def test_camel_case_payload_parses() -> None:
    log = ErrorLog.model_validate(
        _base(
            userAgent="Mozilla/5.0",
            requestId="12345678-1234-4234-8234-123456789abc",
            userId="user-1",
        )
    )
    assert log.user_agent == "Mozilla/5.0"
    assert log.request_id == "12345678-1234-4234-8234-123456789abc"
    assert log.user_id == "user-1"
    assert log.timestamp.year == 2026


def test_dump_uses_camel_case() -> None:
    log = ErrorLog.model_validate(_base(userAgent="ua"))
    dumped = log.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert dumped["userAgent"] == "ua"
    assert "requestId" not in dumped


def test_unknown_keys_are_ignored() -> None:
    log = ErrorLog.model_validate(_base(colno=7))
    assert not hasattr(log, "colno")


@pytest.mark.parametrize(
    "overrides",
    [
        {"message": ""},
        {"url": "not a url"},
        {"timestamp": "yesterday"},
        {"timestamp": 1767686400},
        {"timestamp": "2026-01-06"},
        {"timestamp": "2026-01-06 08:00:00Z"},
        {"timestamp": "2026-01-06T08:00:00+09:00"},
        {"requestId": "not-a-uuid"},
        {"requestId": "12345678-1234-1234-8234-123456789abc"},
        {"userId": ""},
    ],
)
def test_invalid_fields_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        ErrorLog.model_validate(_base(**overrides))


def test_fractional_seconds_timestamp_accepted() -> None:
    log = ErrorLog.model_validate(_base(timestamp="2026-01-06T08:00:00.123Z"))
    assert log.timestamp.microsecond == 123000


def test_datetime_instance_accepted_from_python_callers() -> None:
    now = datetime.now(timezone.utc)
    log = ErrorLog(message="boom", url="https://app.example.com/", timestamp=now)
    assert log.timestamp == now
