"""
backend.api.auth

Purpose:
    Session-cookie authentication dependencies.
    Establishes the caller's identity and records it on the request context
    (the write-once user_id slot).

Notes:
    - The session cookie is base64(JSON {"userId", "exp"}) with exp in epoch ms.
    - User lookup against storage is out of scope; a well-formed, unexpired
      token is accepted as-is.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import base64
import json
import math
import time
from typing import Optional

from fastapi import Cookie

from backend.api.errors import ApiError
from backend.api.logging.request_context import set_user_id

SESSION_COOKIE = "session"
DEFAULT_SESSION_TTL_MS = 7 * 24 * 60 * 60 * 1000


def _now_ms() -> int:
    return int(time.time() * 1000)


def create_session_token(user_id: str, expires_in_ms: int = DEFAULT_SESSION_TTL_MS) -> str:
    payload = {"userId": user_id, "exp": _now_ms() + expires_in_ms}
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def parse_session_token(token: str | None) -> str | None:
    """
    Return the user id from a session token, or None when malformed or expired.
    """
    if not token:
        return None

    try:
        payload = json.loads(base64.b64decode(token, validate=True).decode("utf-8"))
    except ValueError:
        return None

    if not isinstance(payload, dict):
        return None

    user_id = payload.get("userId")
    exp = payload.get("exp")
    if not isinstance(user_id, str) or not user_id:
        return None
    if not isinstance(exp, (int, float)) or isinstance(exp, bool) or not math.isfinite(exp):
        return None
    if exp < _now_ms():
        return None

    return user_id


async def require_user(
    session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
) -> str:
    if not session:
        raise ApiError.unauthorized("Authentication required")

    user_id = parse_session_token(session)
    if user_id is None:
        raise ApiError.unauthorized("Invalid session")

    set_user_id(user_id)
    return user_id


async def optional_user(
    session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
) -> str | None:
    user_id = parse_session_token(session)
    if user_id is not None:
        set_user_id(user_id)
    return user_id
