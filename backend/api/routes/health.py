"""
backend.api.routes.health

Purpose:
    Unprefixed health endpoints for container/orchestrator checks.
    GET / reports the deployment environment; GET /health is a bare liveness check.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from fastapi import APIRouter

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.settings import get_settings

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get("/")
def root() -> dict:
    return {"status": "ok", "environment": get_settings().environment}


@router.get(_paths.health)
def health() -> dict:
    return {"ok": True}
