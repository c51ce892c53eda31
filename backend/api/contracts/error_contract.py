"""
backend.api.contracts.error_contract

Purpose:
    Stable error contract for the API (codes + response model).
    Used by global exception handlers to ensure consistent client responses.

Notes:
    - Serialized with camelCase keys: {"requestId", "code", "message", "errors"}.
    - requestId always equals the X-Request-ID response header.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiErrorCode(str, Enum):
    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Auth
    UNAUTHORIZED = "UNAUTHORIZED"


class FieldError(BaseModel):
    path: str = Field(..., description="Dotted path of the offending field")
    message: str = Field(..., description="Human-readable validation message")


class ErrorResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_id: str = Field(..., description="Request correlation id for debugging")
    code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    errors: list[FieldError] | None = Field(default=None, description="Validation failures")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
