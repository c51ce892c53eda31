# backend/api/settings.py
"""
backend.api.settings

Purpose:
    Centralized configuration for the FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Environment:
    ENVIRONMENT   deployment name reported by GET / (default: development)
    LOG_LEVEL     root/uvicorn log level (default: INFO)
    CORS_ORIGINS  comma-separated browser origins allowed with credentials
    HOST, PORT    bind address for the uvicorn server (default: 127.0.0.1:8787)

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from backend.api.contracts.api_paths import ApiPaths

ENV_ENVIRONMENT = "ENVIRONMENT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_CORS_ORIGINS = "CORS_ORIGINS"
ENV_HOST = "HOST"
ENV_PORT = "PORT"

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]


class Settings(BaseModel):
    service_name: str = Field(default="lifestyle-app-api")
    service_version: str = Field(default="0.1.0")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    api_prefix: str = Field(default=ApiPaths().api_prefix)

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8787)


def _split_csv(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    items = [s.strip() for s in raw.split(",")]
    return [s for s in items if s]


def get_settings() -> Settings:
    values: dict = {}

    environment = (os.getenv(ENV_ENVIRONMENT) or "").strip()
    if environment:
        values["environment"] = environment

    log_level = (os.getenv(ENV_LOG_LEVEL) or "").strip()
    if log_level:
        values["log_level"] = log_level

    origins = _split_csv(os.getenv(ENV_CORS_ORIGINS))
    if origins is not None:
        values["cors_origins"] = origins

    host = (os.getenv(ENV_HOST) or "").strip()
    if host:
        values["host"] = host

    port = (os.getenv(ENV_PORT) or "").strip()
    if port:
        values["port"] = int(port)

    return Settings(**values)
