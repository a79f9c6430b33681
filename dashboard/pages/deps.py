"""
Reusable page dependencies: settings, metrics and the backend HTTP client.
"""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Request

from dashboard.core.config import ApplicationSettings, get_application_settings
from dashboard.core.metrics import DashboardMetrics


def get_settings() -> ApplicationSettings:
    return get_application_settings()


def get_metrics(request: Request) -> DashboardMetrics:
    return request.app.state.metrics


async def get_backend_client() -> AsyncIterator[httpx.AsyncClient]:
    """Yield a client for one page request and close it afterwards.

    Transport defaults (timeouts, TLS, pooling) are left to httpx.
    """
    async with httpx.AsyncClient() as client:
        yield client
