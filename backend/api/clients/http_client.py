"""
backend.api.clients.http_client

Purpose:
    httpx-based JSON client for the Lifestyle App API (service-to-service calls,
    scripts and tests). Every outgoing request carries X-Request-ID.

Design Goals:
    - Header injection is additive: caller headers and cookies are never dropped.
    - Inside a request handler, sub-calls reuse the current request id so the
      downstream service logs under the same correlation id.
    - Error envelopes are surfaced as ApiRequestError with the server's requestId.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Mapping

import httpx

from backend.api.logging.request_context import current_request_id
from backend.shared.schemas.log import ErrorLog
from backend.shared.tracing.request_id import REQUEST_ID_HEADER, generate_request_id

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_ERROR_MESSAGE = "An error occurred"
LOG_ERROR_ENDPOINT = "/api/logs/error"


class ApiRequestError(Exception):
    def __init__(
        self,
        message: str,
        status: int,
        code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.errors = errors
        self.request_id = request_id

    def __str__(self) -> str:
        return f"{self.status} {self.code or '-'}: {self.message}"


def inject_request_id(request: httpx.Request) -> None:
    """
    httpx request hook: add X-Request-ID unless the caller already set one.
    """
    if REQUEST_ID_HEADER in request.headers:
        return
    request.headers[REQUEST_ID_HEADER] = current_request_id() or generate_request_id()


def _error_from_response(response: httpx.Response) -> ApiRequestError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    errors = body.get("errors")
    return ApiRequestError(
        message=body.get("message") or DEFAULT_ERROR_MESSAGE,
        status=response.status_code,
        code=body.get("code"),
        errors=errors if isinstance(errors, list) else None,
        request_id=body.get("requestId") or response.headers.get(REQUEST_ID_HEADER),
    )


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        headers: Mapping[str, str] | None = None,
        cookies: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers=dict(headers or {}),
            cookies=dict(cookies or {}),
            timeout=timeout,
            transport=transport,
            event_hooks={"request": [inject_request_id]},
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        response = self._client.request(method, endpoint, json=json, headers=headers)
        if response.is_error:
            raise _error_from_response(response)
        return response.json()

    def get(self, endpoint: str, **kwargs: Any) -> Any:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, data: Any = None, **kwargs: Any) -> Any:
        return self.request("POST", endpoint, json=data, **kwargs)

    def put(self, endpoint: str, data: Any = None, **kwargs: Any) -> Any:
        return self.request("PUT", endpoint, json=data, **kwargs)

    def patch(self, endpoint: str, data: Any = None, **kwargs: Any) -> Any:
        return self.request("PATCH", endpoint, json=data, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> Any:
        return self.request("DELETE", endpoint, **kwargs)

    def log_error(
        self,
        exc: BaseException,
        *,
        url: str,
        user_agent: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """
        Report an exception to POST /api/logs/error. Never raises.
        """
        try:
            report = ErrorLog(
                message=str(exc) or type(exc).__name__,
                stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
                url=url,
                user_agent=user_agent,
                timestamp=datetime.now(timezone.utc),
                request_id=current_request_id(),
                extra=extra,
            )
            self.post(
                LOG_ERROR_ENDPOINT,
                report.model_dump(mode="json", by_alias=True, exclude_none=True),
            )
        except (httpx.HTTPError, ApiRequestError, ValueError):
            logger.warning("Failed to send error log", exc_info=True)
