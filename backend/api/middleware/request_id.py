"""
backend.api.middleware.request_id

Purpose:
    Middleware that ensures each request has a request-id and propagates it to responses.

Notes:
    - Must be the outermost application middleware (added last in create_app).
    - Incoming X-Request-ID is reused only when it is a valid UUIDv4.
    - Unhandled exceptions become the INTERNAL_ERROR envelope here, so the
      header and body still carry the id.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from backend.api.contracts.request_id_policy import RequestIdPolicy
from backend.api.error_handlers import internal_error_response
from backend.api.logging.request_context import initialize_request_context
from backend.shared.tracing.request_id import resolve_request_id

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        policy = self._policy

        request_id = resolve_request_id(request.headers.get(policy.request_id_header))

        # Attach for handlers/logging
        ctx = initialize_request_context(request_id)
        request.state.request_context = ctx
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled exception in API request")
            response = internal_error_response(request_id)

        # Echo back for client correlation; overrides any downstream value.
        response.headers[policy.response_header] = request_id
        return response
