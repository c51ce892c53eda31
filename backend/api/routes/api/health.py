"""
backend.api.routes.api.health

Purpose:
    Health endpoint under the /api prefix for browser clients.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from fastapi import APIRouter

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags

router = APIRouter(tags=[ApiTags().health])


@router.get(ApiPaths().health)
def health() -> dict:
    return {"status": "ok"}
