"""
Prometheus metrics for the employee API façade.

Tracks inbound HTTP requests and outbound calls to the upstream employee API.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "employee_api_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "employee_api_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)

# Upstream metrics
upstream_requests_total = Counter(
    "employee_api_upstream_requests_total",
    "Total requests to the upstream employee API",
    ["operation", "outcome"],
)

upstream_request_duration_seconds = Histogram(
    "employee_api_upstream_request_duration_seconds",
    "Upstream request duration in seconds",
    ["operation"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)


def track_request_metrics(
    method: str, endpoint: str, status_code: int, duration: float
):
    """Track HTTP request metrics."""
    http_requests_total.labels(
        method=method, endpoint=endpoint, status=status_code
    ).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )


def track_upstream_request(operation: str, outcome: str, duration: float):
    """Track an upstream call; outcome is a short label such as 'ok' or '404'."""
    upstream_requests_total.labels(operation=operation, outcome=outcome).inc()
    upstream_request_duration_seconds.labels(operation=operation).observe(duration)


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
