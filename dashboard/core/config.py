"""
Application configuration utilities for the dashboard server.

Centralizes environment-derived settings and sensible defaults. The backend
location defaults to the local API process the dashboard is deployed next to.
"""

from dataclasses import dataclass
import os


DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"
DEFAULT_TOKEN_COOKIE = "token"


@dataclass(frozen=True)
class ApplicationSettings:
    """Immutable application settings derived from environment variables."""

    environment: str
    version: str
    debug: bool
    backend_url: str
    token_cookie: str


def _str_to_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def get_application_settings() -> ApplicationSettings:
    """Load application settings from environment with defaults.

    Returns
    -------
    ApplicationSettings
        Frozen settings object safe to share across the application.
    """
    environment = os.getenv("APP_ENV", "development")
    version = os.getenv("APP_VERSION", "0.1.0")
    debug = _str_to_bool(os.getenv("APP_DEBUG"), default=(environment != "production"))
    backend_url = os.getenv("DASHBOARD_BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")
    token_cookie = os.getenv("DASHBOARD_TOKEN_COOKIE", DEFAULT_TOKEN_COOKIE)

    return ApplicationSettings(
        environment=environment,
        version=version,
        debug=debug,
        backend_url=backend_url,
        token_cookie=token_cookie,
    )
