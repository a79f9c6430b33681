"""
Users page: server-side data for the dashboard's user table.
"""

from __future__ import annotations

from typing import Any

import httpx
from fastapi import APIRouter, Depends, Request

from dashboard.core.config import ApplicationSettings
from dashboard.core.metrics import DashboardMetrics
from dashboard.pages.deps import get_backend_client, get_metrics, get_settings
from dashboard.services.user_list import load_user_list


router = APIRouter(tags=["pages"])


@router.get("/users")
async def users_page(
    request: Request,
    client: httpx.AsyncClient = Depends(get_backend_client),
    settings: ApplicationSettings = Depends(get_settings),
    metrics: DashboardMetrics = Depends(get_metrics),
) -> dict[str, list[dict[str, Any]]]:
    """Return the Users page data with camelCase keys.

    Loader failures are left to the framework's default error handling.
    """
    data = await load_user_list(
        request.cookies,
        client,
        backend_url=settings.backend_url,
        token_cookie=settings.token_cookie,
        metrics=metrics,
    )
    return {"users": [user.to_page() for user in data["users"]]}
