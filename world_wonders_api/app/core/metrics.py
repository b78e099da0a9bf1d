"""
Prometheus metrics for HTTP traffic.

Each application instance owns its own ``CollectorRegistry`` so that
several apps (tests create one per client) never register the same
time series twice.  ``/metrics`` renders the registry in the text
exposition format.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Label used for requests that matched no route
UNMATCHED_ROUTE = "unmatched"


class RequestMetrics:
    """Request counter and latency histogram, labelled by route template."""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self) -> None:
        self.registry = CollectorRegistry()
        self.requests = Counter(
            "wonders_http_requests_total",
            "HTTP requests handled, by method, route and status code.",
            ["method", "route", "status"],
            registry=self.registry,
        )
        self.latency = Histogram(
            "wonders_http_request_duration_seconds",
            "Time spent handling HTTP requests.",
            ["method", "route"],
            registry=self.registry,
        )

    def observe(self, method: str, route: str, status: int, seconds: float) -> None:
        self.requests.labels(method=method, route=route, status=str(status)).inc()
        self.latency.labels(method=method, route=route).observe(seconds)

    def render(self) -> bytes:
        return generate_latest(self.registry)
