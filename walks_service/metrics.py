"""
Prometheus metrics for Walks Service.

Tracks HTTP traffic, entity operations and walk validation failures.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "walks_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "walks_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0)
)

# Entity metrics
entity_operations_total = Counter(
    "walks_entity_operations_total",
    "Total entity operations",
    ["entity", "operation", "status"]
)

walk_validation_failures_total = Counter(
    "walks_validation_failures_total",
    "Walk requests rejected by validation, per offending field",
    ["field"]
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """
    Track HTTP request metrics.

    Args:
        method: HTTP method
        endpoint: Request path
        status_code: Response status code
        duration: Request duration in seconds
    """
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_entity_operation(entity: str, operation: str, status: str):
    """Count one list/get/create/update/delete outcome."""
    entity_operations_total.labels(entity=entity, operation=operation, status=status).inc()


def track_validation_failures(fields):
    """Count each field a rejected walk request failed on."""
    for field in fields:
        walk_validation_failures_total.labels(field=field).inc()


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
