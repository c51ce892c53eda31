"""
backend.api.main

Purpose:
    FastAPI application entrypoint for the Lifestyle App backend API.

Notes:
    - RequestIdMiddleware is added last so it wraps every other middleware
      and handler; the request context exists before any route logic runs.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.settings import get_settings
from backend.api.routes.health import router as health_router
from backend.api.routes.api import api_router

from backend.api.middleware.request_id import RequestIdMiddleware
from backend.api.contracts.request_id_policy import RequestIdPolicy

from backend.api.logging.logging_config import configure_logging
from backend.api.error_handlers import register_error_handlers


def create_app() -> FastAPI:
    settings = get_settings()
    policy = RequestIdPolicy()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[policy.response_header],
    )
    app.add_middleware(RequestIdMiddleware, policy=policy)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router)

    return app

app = create_app()
