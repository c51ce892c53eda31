# backend/api/contracts/api_paths.py
"""
backend.api.contracts.api_paths

Purpose:
    Central definition of API route paths and prefixes.
    Keeps routing stable and prevents string duplication.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    api_prefix: str = "/api"
    health: str = "/health"
    auth_prefix: str = "/auth"
    auth_me: str = "/me"
    logs_prefix: str = "/logs"
    logs_error: str = "/error"
