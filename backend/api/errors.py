"""
backend.api.errors

Purpose:
    Internal exception types for API error handling.
    Routes and dependencies raise ApiError; global handler converts to ErrorResponse
    (which always carries the request's requestId).

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from backend.api.contracts.error_contract import ApiErrorCode


@dataclass(frozen=True)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    @classmethod
    def unauthorized(cls, message: str) -> "ApiError":
        return cls(status_code=401, error_code=ApiErrorCode.UNAUTHORIZED, message=message)

    def __str__(self) -> str:
        return f"{self.status_code} {self.error_code.value}: {self.message}"
