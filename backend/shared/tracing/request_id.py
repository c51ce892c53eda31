"""
backend.shared.tracing.request_id

Purpose:
    Correlation-id helpers shared by the API middleware and outbound clients.
    Validates caller-supplied ids and generates fresh UUIDv4 values.

Notes:
    - Validation is a pure predicate; rejection is never an error.
    - uuid.uuid4() reads os.urandom, so generation needs no locking.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import re
import uuid
from typing import Any

REQUEST_ID_HEADER = "X-Request-ID"

_UUID_V4_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_request_id(value: Any) -> bool:
    """
    Return True when value is a textual UUIDv4 (any letter case).
    """
    if not isinstance(value, str) or not value:
        return False
    return _UUID_V4_RE.fullmatch(value) is not None


def generate_request_id() -> str:
    return str(uuid.uuid4())


def resolve_request_id(candidate: str | None) -> str:
    """
    Reuse candidate verbatim when it is a valid UUIDv4, otherwise generate one.
    """
    if is_valid_request_id(candidate):
        return candidate  # type: ignore[return-value]
    return generate_request_id()
