"""
Logging configuration for the dashboard server.

One root configuration to stdout; modules obtain their own named loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from dashboard.core.config import get_application_settings


def setup_logging(debug: Optional[bool] = None) -> None:
    """Configure logging for the application.

    Parameters
    ----------
    debug : bool, optional
        Override debug mode. If None, reads from application settings.
    """
    settings = get_application_settings()
    log_level = logging.DEBUG if (debug if debug is not None else settings.debug) else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,
    )

    # Outbound request lines are logged by the loader itself
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured",
        extra={
            "environment": settings.environment,
            "debug": settings.debug,
            "version": settings.version,
            "backend_url": settings.backend_url,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Parameters
    ----------
    name : str
        Module name, typically __name__

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    return logging.getLogger(name)
