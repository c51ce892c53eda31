"""
backend.api.server

Purpose:
    Process entrypoint: runs backend.api.main:app under uvicorn.

Notes:
    - uvicorn applies build_logging_config() at startup, so uvicorn.access
      lines carry request_id; configure_logging() later sees the named handler
      and leaves it in place.

Usage:
    lifestyle-api            (console script)
    python -m backend.api.server

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import uvicorn

from backend.api.logging.logging_config import build_logging_config
from backend.api.settings import get_settings

APP_IMPORT_PATH = "backend.api.main:app"


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        APP_IMPORT_PATH,
        host=settings.host,
        port=settings.port,
        log_config=build_logging_config(settings.log_level),
    )


if __name__ == "__main__":
    run()
