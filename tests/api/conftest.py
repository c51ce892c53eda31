"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import asyncio

import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from backend.api.contracts.error_contract import ApiErrorCode
from backend.api.errors import ApiError
from backend.api.logging.request_context import current_request_id, get_request_context
from backend.api.main import create_app


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


def _add_diagnostic_routes(app: FastAPI) -> None:
    """
    Test-only routes that exercise the tracing contract from inside handlers.
    """

    @app.get("/_test/context")
    async def diag_context() -> dict:
        first = get_request_context().request_id
        await asyncio.sleep(0.01)
        return {"first": first, "second": current_request_id()}

    @app.get("/_test/api-error")
    async def diag_api_error() -> dict:
        raise ApiError(
            status_code=409,
            error_code=ApiErrorCode.HTTP_ERROR,
            message="Conflict for test",
            details={"reason": "diagnostic"},
        )

    @app.get("/_test/crash")
    async def diag_crash() -> dict:
        raise RuntimeError("boom")

    @app.get("/_test/upstream-header")
    async def diag_upstream_header(response: Response) -> dict:
        response.headers["X-Request-ID"] = "set-by-handler"
        return {"ok": True}


@pytest.fixture()
def app() -> FastAPI:
    application = create_app()
    _add_diagnostic_routes(application)
    return application


@pytest.fixture()
def client_factory(app):
    """
    Factory fixture that creates a fresh TestClient over the diagnostic-route app.
    """

    def _make() -> TestClient:
        return TestClient(app, raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
