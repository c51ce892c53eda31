"""
backend.shared.schemas.log

Purpose:
    Frontend error-log payload accepted by POST /api/logs/error.
    Carries requestId/userId so browser errors can be joined with backend logs.

Notes:
    - Wire format is camelCase (aliases); Python code uses snake_case.
    - Unknown keys are ignored so older clients keep working.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from backend.shared.tracing.request_id import is_valid_request_id

# Same shape the browser sends via Date.toISOString(): UTC, "Z" suffix.
_ISO_UTC_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z")


class ErrorLog(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = Field(..., min_length=1, description="Error message")
    stack: Optional[str] = Field(default=None, description="Stack trace, if any")
    url: AnyUrl = Field(..., description="Page URL where the error happened")
    user_agent: Optional[str] = Field(default=None)
    timestamp: datetime = Field(..., description="ISO 8601 timestamp")
    request_id: Optional[str] = Field(default=None, description="Correlation id (UUIDv4)")
    user_id: Optional[str] = Field(default=None, min_length=1)
    extra: Optional[dict[str, Any]] = Field(default=None)

    @field_validator("timestamp", mode="before")
    @classmethod
    def validate_timestamp(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return v
        if not isinstance(v, str) or _ISO_UTC_RE.fullmatch(v) is None:
            raise ValueError("ISO 8601 timestamp required")
        return v

    @field_validator("request_id")
    @classmethod
    def validate_request_id(cls, v: str | None) -> str | None:
        if v is not None and not is_valid_request_id(v):
            raise ValueError("Valid UUID v4 required")
        return v
