"""
Main application entrypoint for the dashboard server.

Serves server-side page data for the dashboard and the operational endpoints:
  - /users: Users page data loaded from the backend API
  - /health: shallow liveness probe to confirm the process is running
  - /ready: readiness probe to ensure configuration loads
  - /metrics: Prometheus exposition endpoint for scraping

Layout:
  dashboard/
    core/      settings, logging, metrics
    models/    view models
    services/  page loaders
    pages/     page routes and their dependencies
"""

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from dashboard.core.config import get_application_settings
from dashboard.core.logging import get_logger, setup_logging
from dashboard.core.metrics import DashboardMetrics
from dashboard.pages.users import router as users_router

# Initialize logging on module load
setup_logging()
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Returns
    -------
    FastAPI
        Configured FastAPI app with metadata, ops routes and page routes.
    """
    settings = get_application_settings()

    app = FastAPI(
        title="Dashboard",
        version=settings.version,
        docs_url="/docs",
        openapi_url="/openapi.json",
        description="Server-side page data for the dashboard, loaded from the backend API.",
    )

    metrics = DashboardMetrics()
    app.state.metrics = metrics

    metrics.readiness.set(1)
    metrics.liveness.set(1)

    @app.get("/health", tags=["ops"])  # Shallow liveness
    def health() -> dict[str, str]:
        """Return basic liveness signal."""
        return {"status": "ok"}

    @app.get("/ready", tags=["ops"])
    def ready() -> dict[str, str]:
        """Return readiness signal based on configuration checks."""
        try:
            _ = get_application_settings()
            metrics.readiness.set(1)
            return {"status": "ready"}
        except Exception as e:
            logger.error(f"Readiness check failed: {e}", exc_info=True)
            metrics.readiness.set(0)
            return {"status": "not_ready", "error": str(type(e).__name__)}

    @app.get("/metrics", tags=["ops"])  # Prometheus exposition
    def metrics_endpoint() -> Response:
        """Expose Prometheus metrics for scraping."""
        data = generate_latest(metrics.registry)
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)

    app.include_router(users_router)

    return app


app = create_app()
