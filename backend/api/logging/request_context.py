"""
backend.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Holds the resolved request_id and the write-once user_id for one request.

Notes:
    - The ContextVar holds a mutable RequestContext object. Sync dependencies run
      in a threadpool with a copied context, so user_id is written on the shared
      object rather than by re-setting the var.
    - request_id cannot be reassigned; user_id can be written once.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import contextvars
import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    request_id: str
    user_id: str | None = field(default=None, init=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "request_id" and "request_id" in self.__dict__:
            raise AttributeError("request_id is immutable once set")
        if name == "user_id" and self.__dict__.get("user_id") is not None:
            raise AttributeError("user_id has already been set for this request")
        super().__setattr__(name, value)


request_context_var: contextvars.ContextVar[RequestContext | None] = contextvars.ContextVar(
    "request_context",
    default=None,
)


def initialize_request_context(request_id: str) -> RequestContext:
    ctx = RequestContext(request_id=request_id)
    request_context_var.set(ctx)
    return ctx


def get_request_context() -> RequestContext:
    """
    Return the current request's context.

    Raises:
        LookupError if called outside a request handled by RequestIdMiddleware.
    """
    ctx = request_context_var.get()
    if ctx is None:
        raise LookupError("Request context is not initialized")
    return ctx


def current_request_id() -> str | None:
    ctx = request_context_var.get()
    return ctx.request_id if ctx is not None else None


def current_user_id() -> str | None:
    ctx = request_context_var.get()
    return ctx.user_id if ctx is not None else None


def set_user_id(user_id: str) -> bool:
    """
    Record the authenticated user for the current request (write-once).

    Returns:
        True when stored (or already stored with the same value),
        False when a different user_id was already recorded.
    """
    ctx = get_request_context()

    if ctx.user_id is None:
        ctx.user_id = user_id
        return True

    if ctx.user_id == user_id:
        return True

    logger.warning("Ignoring second user_id write for request (existing user_id kept)")
    return False
