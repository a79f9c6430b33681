"""
Prometheus metrics for the dashboard server.

Each app instance owns its registry so test apps never collide on metric names.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge


class DashboardMetrics:
    """Metric handles registered on a single registry."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        self.readiness = Gauge("dashboard_readiness", "Readiness state", registry=self.registry)
        self.liveness = Gauge("dashboard_liveness", "Liveness state", registry=self.registry)

        # outcome: success, transport_error, decode_error, payload_error
        self.user_list_loads = Counter(
            "dashboard_user_list_loads_total",
            "User list loads by outcome",
            ["outcome"],
            registry=self.registry,
        )
