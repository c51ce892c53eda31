"""
backend.api.routes.api.auth

Purpose:
    Session-backed identity endpoint.
    GET /api/auth/me returns the authenticated user id and the request id.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from backend.api.auth import require_user
from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.logging.request_context import get_request_context

_paths = ApiPaths()

router = APIRouter(prefix=_paths.auth_prefix, tags=[ApiTags().auth])


@router.get(_paths.auth_me)
async def me(user_id: str = Depends(require_user)) -> dict:
    ctx = get_request_context()
    return {"id": user_id, "requestId": ctx.request_id}
