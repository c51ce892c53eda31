"""
backend.api.routes.api.logs

Purpose:
    Ingests frontend error reports (POST /api/logs/error) and writes them to the
    backend log with the browser's requestId/userId, so client-side failures
    can be joined with server logs.

Notes:
    - The body's userId wins; otherwise the session user (if any) is used.
    - Always answers {"received": true}; the report itself is the payload.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends

from backend.api.auth import optional_user
from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.shared.schemas.log import ErrorLog

logger = logging.getLogger(__name__)

_paths = ApiPaths()

router = APIRouter(prefix=_paths.logs_prefix, tags=[ApiTags().logs])


@router.post(_paths.logs_error)
async def log_frontend_error(
    error: ErrorLog,
    session_user_id: str | None = Depends(optional_user),
) -> dict:
    user_id = error.user_id or session_user_id

    log_prefix = f"[{error.request_id}]" if error.request_id else "[NO_REQUEST_ID]"
    user_info = f" [User: {user_id}]" if user_id else " [Unauthenticated]"

    logger.error(
        "%s%s [Frontend Error] %s",
        log_prefix,
        user_info,
        json.dumps(error.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2),
    )

    return {"received": True}
