"""
backend.api.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures requestId is always included in the body and X-Request-ID in the headers.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.api.contracts.error_contract import ApiErrorCode, ErrorResponse, FieldError
from backend.api.contracts.request_id_policy import RequestIdPolicy
from backend.api.errors import ApiError
from backend.api.logging.request_context import RequestContext, request_context_var
from backend.shared.tracing.request_id import generate_request_id

logger = logging.getLogger(__name__)

_policy = RequestIdPolicy()

# FastAPI prefixes locations with the request part ("body", "query", ...).
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def get_request_id(request: Request) -> str:
    ctx = getattr(getattr(request, "state", None), "request_context", None)
    if isinstance(ctx, RequestContext):
        return ctx.request_id

    ctx2 = request_context_var.get()
    if ctx2 is not None:
        return ctx2.request_id

    # Only reachable when the app runs without RequestIdMiddleware.
    return generate_request_id()


def build_error_response(
    request_id: str,
    *,
    status_code: int,
    code: ApiErrorCode,
    message: str,
    errors: list[FieldError] | None = None,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        request_id=request_id,
        code=code,
        message=message,
        errors=errors,
        details=details,
    )
    response = JSONResponse(status_code=status_code, content=payload.to_content(), headers=headers)
    response.headers[_policy.response_header] = request_id
    return response


def _field_path(loc: Any) -> str:
    if not isinstance(loc, (list, tuple)):
        return str(loc)
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts)


def _clean_validation_errors(errors: Any) -> list[FieldError]:
    """
    Convert Pydantic/FastAPI validation errors into stable {path, message} pairs.

    - Strip "Value error, " prefix
    - Rewrite enum messages into "Invalid <field>. Allowed values: a, b."
    - Rewrite missing required into "Missing required field: <field>."
    - Rewrite extra forbidden into "Unknown field: <field>."
    """
    if not isinstance(errors, list):
        return []

    cleaned: list[FieldError] = []
    for err in errors:
        if not isinstance(err, dict):
            continue

        err_type = err.get("type")
        loc = err.get("loc", [])
        msg = err.get("msg")
        msg = msg if isinstance(msg, str) else "Invalid value"

        # Strip noisy prefix from validator ValueErrors
        if msg.startswith("Value error,"):
            msg = msg[len("Value error,") :].lstrip()

        field_name = None
        if isinstance(loc, (list, tuple)) and len(loc) >= 2:
            field_name = loc[-1]

        if err_type == "enum" and field_name:
            options = re.findall(r"'([^']+)'", msg)
            if options:
                msg = f"Invalid {field_name}. Allowed values: {', '.join(options)}."

        if err_type == "missing" and field_name:
            msg = f"Missing required field: {field_name}."

        if err_type == "extra_forbidden" and field_name:
            msg = f"Unknown field: {field_name}."

        cleaned.append(FieldError(path=_field_path(loc), message=msg))

    return cleaned


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        safe_errors = jsonable_encoder(exc.errors())
        return build_error_response(
            get_request_id(request),
            status_code=400,
            code=ApiErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            errors=_clean_validation_errors(safe_errors),
        )

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        return build_error_response(
            get_request_id(request),
            status_code=exc.status_code,
            code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return build_error_response(
            get_request_id(request),
            status_code=exc.status_code,
            code=ApiErrorCode.HTTP_ERROR,
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)
        return internal_error_response(get_request_id(request))


def internal_error_response(request_id: str) -> JSONResponse:
    return build_error_response(
        request_id,
        status_code=500,
        code=ApiErrorCode.INTERNAL_ERROR,
        message="Internal server error",
    )
