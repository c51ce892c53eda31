"""
tests.api.test_error_envelope

Purpose:
    Every error response carries requestId in the JSON body, equal to the
    X-Request-ID response header.

Covers:
    - Payload validation errors (400 VALIDATION_ERROR)
    - ApiError raised by a handler
    - Unknown route / wrong method (HTTP_ERROR)
    - Unhandled exceptions (500 INTERNAL_ERROR)
"""

from __future__ import annotations

from backend.shared.tracing.request_id import is_valid_request_id

RID = "0b8f6a1e-5c3d-4f2a-9e7b-1d2c3b4a5f60"


def _assert_correlated(r) -> dict:
    data = r.json()
    assert "requestId" in data
    assert data["requestId"] == r.headers["x-request-id"]
    assert is_valid_request_id(data["requestId"])
    return data


def test_validation_error_carries_client_request_id(client) -> None:
    r = client.post(
        "/api/logs/error",
        json={"invalid": "data"},
        headers={"X-Request-ID": RID},
    )
    assert r.status_code == 400, r.text

    data = _assert_correlated(r)
    assert data["requestId"] == RID
    assert data["code"] == "VALIDATION_ERROR"
    assert data["message"] == "Request validation failed"
    paths = {e["path"] for e in data["errors"]}
    assert {"message", "url", "timestamp"} <= paths
    assert any(e["message"] == "Missing required field: url." for e in data["errors"])


def test_validation_error_with_generated_id(client) -> None:
    r = client.post("/api/logs/error", json={}, headers={"X-Request-ID": "not-a-uuid"})
    assert r.status_code == 400
    data = _assert_correlated(r)
    assert data["requestId"] != "not-a-uuid"


def test_validator_message_prefix_is_stripped(client) -> None:
    r = client.post(
        "/api/logs/error",
        json={
            "message": "boom",
            "url": "https://app.example.com/meals",
            "timestamp": "2026-01-06T08:00:00Z",
            "requestId": "not-a-uuid",
        },
    )
    assert r.status_code == 400
    data = _assert_correlated(r)
    assert {"path": "requestId", "message": "Valid UUID v4 required"} in data["errors"]


def test_api_error_envelope(client) -> None:
    r = client.get("/_test/api-error", headers={"X-Request-ID": RID})
    assert r.status_code == 409
    data = _assert_correlated(r)
    assert data == {
        "requestId": RID,
        "code": "HTTP_ERROR",
        "message": "Conflict for test",
        "details": {"reason": "diagnostic"},
    }


def test_unknown_route_envelope(client) -> None:
    r = client.get("/does-not-exist", headers={"X-Request-ID": RID})
    assert r.status_code == 404
    data = _assert_correlated(r)
    assert data["code"] == "HTTP_ERROR"
    assert data["message"] == "Not Found"


def test_method_not_allowed_envelope(client) -> None:
    r = client.post("/health")
    assert r.status_code == 405
    data = _assert_correlated(r)
    assert data["code"] == "HTTP_ERROR"


def test_unhandled_exception_still_correlated(client) -> None:
    r = client.get("/_test/crash", headers={"X-Request-ID": RID})
    assert r.status_code == 500
    data = _assert_correlated(r)
    assert data == {
        "requestId": RID,
        "code": "INTERNAL_ERROR",
        "message": "Internal server error",
    }


def test_unhandled_exception_generated_id(client) -> None:
    r = client.get("/_test/crash")
    assert r.status_code == 500
    _assert_correlated(r)
