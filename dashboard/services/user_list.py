"""
Users page loader.

Fetches the user list from the backend with the caller's session token and
reshapes it into page data: ``{"users": [UserModel, ...]}``.

No status check happens before parsing: a backend rejection with a JSON error
object fails at the shape check, never with partial output.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Protocol

import httpx

from dashboard.core.config import DEFAULT_BACKEND_URL, DEFAULT_TOKEN_COOKIE
from dashboard.core.logging import get_logger
from dashboard.core.metrics import DashboardMetrics
from dashboard.models.user import UserModel


logger = get_logger(__name__)

USERS_PATH = "/api/v1/dashboard/users"

# Rendered into the bearer header when the cookie is absent
MISSING_TOKEN = "undefined"


class CookieReader(Protocol):
    def get(self, name: str) -> Optional[str]: ...


class UserListPayloadError(TypeError):
    """Backend body parsed as JSON but is not an array of user objects."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


def build_authorization(token: Optional[str]) -> str:
    return f"Bearer {token if token is not None else MISSING_TOKEN}"


def map_users(payload: Any, *, status_code: int = 200) -> list[UserModel]:
    """Map a parsed backend body to view models, preserving order."""
    if not isinstance(payload, list):
        raise UserListPayloadError(
            f"expected a JSON array of users, got {type(payload).__name__}",
            status_code=status_code,
        )
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise UserListPayloadError(
                f"user at index {index} is {type(record).__name__}, not an object",
                status_code=status_code,
            )
    return [UserModel.from_upstream(record) for record in payload]


async def load_user_list(
    cookies: CookieReader,
    client: httpx.AsyncClient,
    *,
    backend_url: str = DEFAULT_BACKEND_URL,
    token_cookie: str = DEFAULT_TOKEN_COOKIE,
    metrics: Optional[DashboardMetrics] = None,
) -> dict[str, list[UserModel]]:
    """Load page data for the Users page.

    Parameters
    ----------
    cookies : CookieReader
        Anything with ``get(name)``; the session token is read from it.
    client : httpx.AsyncClient
        Client used for the single backend call. Owned by the caller.
    backend_url : str
        Backend base URL without trailing slash.
    token_cookie : str
        Name of the cookie holding the bearer token.
    metrics : DashboardMetrics, optional
        When given, the load outcome is counted.

    Returns
    -------
    dict
        ``{"users": [...]}`` in backend order.

    Raises
    ------
    httpx.HTTPError
        The backend could not be reached.
    json.JSONDecodeError
        The backend body is not JSON.
    UserListPayloadError
        The backend body is JSON but not an array of objects.
    """
    token = cookies.get(token_cookie)
    url = f"{backend_url}{USERS_PATH}"
    logger.debug(f"Fetching user list from {url} (token present: {token is not None})")

    try:
        response = await client.get(url, headers={"Authorization": build_authorization(token)})
    except httpx.HTTPError:
        _count(metrics, "transport_error")
        raise

    try:
        payload = response.json()
    except json.JSONDecodeError:
        logger.warning(f"Backend returned a non-JSON body (status {response.status_code})")
        _count(metrics, "decode_error")
        raise

    try:
        users = map_users(payload, status_code=response.status_code)
    except UserListPayloadError as exc:
        logger.warning(f"Unexpected user list payload (status {response.status_code}): {exc}")
        _count(metrics, "payload_error")
        raise

    _count(metrics, "success")
    logger.info(f"Loaded {len(users)} users")
    return {"users": users}


def _count(metrics: Optional[DashboardMetrics], outcome: str) -> None:
    if metrics is not None:
        metrics.user_list_loads.labels(outcome=outcome).inc()
