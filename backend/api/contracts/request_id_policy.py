"""
backend.api.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names + response behavior).

Notes:
    - The backend-resolved id always overwrites any response header set downstream.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass

from backend.shared.tracing.request_id import REQUEST_ID_HEADER


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = REQUEST_ID_HEADER
    response_header: str = REQUEST_ID_HEADER
