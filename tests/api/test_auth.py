"""
tests.api.test_auth

Purpose:
    Session authentication collaborator: token parsing and the user_id write
    into the request context.
"""

from __future__ import annotations

import base64
import json

from backend.api.auth import create_session_token, parse_session_token

RID = "c4d5e6f7-0819-4a2b-b3c4-d5e6f7081920"


def test_token_round_trip() -> None:
    token = create_session_token("user-7")
    assert parse_session_token(token) == "user-7"


def test_expired_token_rejected() -> None:
    assert parse_session_token(create_session_token("user-7", expires_in_ms=-1000)) is None


def test_malformed_tokens_rejected() -> None:
    assert parse_session_token(None) is None
    assert parse_session_token("") is None
    assert parse_session_token("%%%not-base64%%%") is None
    assert parse_session_token(base64.b64encode(b"not json").decode()) is None
    assert parse_session_token(base64.b64encode(b"[1, 2]").decode()) is None
    no_user = base64.b64encode(json.dumps({"exp": 10**15}).encode()).decode()
    assert parse_session_token(no_user) is None


def test_me_returns_user_and_request_id(client) -> None:
    client.cookies.set("session", create_session_token("user-7"))
    r = client.get("/api/auth/me", headers={"X-Request-ID": RID})
    assert r.status_code == 200, r.text
    assert r.json() == {"id": "user-7", "requestId": RID}
    assert r.headers["x-request-id"] == RID


def test_me_without_session_is_401_with_request_id(client) -> None:
    r = client.get("/api/auth/me", headers={"X-Request-ID": RID})
    assert r.status_code == 401
    data = r.json()
    assert data["code"] == "UNAUTHORIZED"
    assert data["message"] == "Authentication required"
    assert data["requestId"] == RID == r.headers["x-request-id"]


def test_me_with_invalid_session_is_401(client) -> None:
    client.cookies.set("session", "garbage")
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    data = r.json()
    assert data["message"] == "Invalid session"
    assert data["requestId"] == r.headers["x-request-id"]


def test_non_finite_expiry_rejected() -> None:
    for raw in ('{"userId": "u", "exp": NaN}', '{"userId": "u", "exp": Infinity}'):
        token = base64.b64encode(raw.encode()).decode()
        assert parse_session_token(token) is None
