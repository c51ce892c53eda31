"""
backend.api.logging.logging_config

Purpose:
    Central logging configuration for backend API.
    Every line carries request_id/user_id (including uvicorn.access and uvicorn.error).

Notes:
    - build_logging_config() is the dictConfig handed to uvicorn by
      backend.api.server (uvicorn applies it once, at process start).
    - configure_logging() runs in create_app() and only adds handlers; it never
      closes existing ones (dictConfig would), so embedding processes keep theirs.
    - Both name the handler HANDLER_NAME; configure_logging skips loggers that
      already have it, so repeated app creation does not stack handlers.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging
from typing import Any

from backend.api.logging.request_id_filter import RequestIdFilter

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | request_id=%(request_id)s | user_id=%(user_id)s"
    " | %(name)s | %(message)s"
)

HANDLER_NAME = "request_context_console"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _level_name(level_name: str) -> str:
    name = (level_name or "").strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def build_logging_config(level_name: str = "INFO") -> dict[str, Any]:
    level = _level_name(level_name)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_context": {"()": RequestIdFilter},
        },
        "formatters": {
            "request_context": {"format": LOG_FORMAT},
        },
        "handlers": {
            HANDLER_NAME: {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "request_context",
                "filters": ["request_context"],
            },
        },
        # Uvicorn installs its own handlers; ours replace them so the filter applies.
        "loggers": {
            name: {"level": level, "handlers": [HANDLER_NAME], "propagate": False}
            for name in UVICORN_LOGGERS
        },
        "root": {"level": level, "handlers": [HANDLER_NAME]},
    }


def _make_handler(level: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _has_handler(logger: logging.Logger) -> bool:
    return any(h.get_name() == HANDLER_NAME for h in logger.handlers)


def configure_logging(level_name: str = "INFO") -> None:
    level = _level_name(level_name)
    handler = _make_handler(level)

    # Root/app logs (don’t clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        if not _has_handler(logger):
            logger.handlers.clear()
            logger.addHandler(handler)
