"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Event store metrics
event_operations = Counter(
    'event_operations_total',
    'Event store operations',
    ['operation']  # create, update, delete, cancel
)

# Theater application metrics
theater_application_decisions = Counter(
    'theater_application_decisions_total',
    'Theater application submissions and admin decisions',
    ['decision']  # submitted, approved, rejected
)

# Upstream (owner service) metrics
upstream_requests = Counter(
    'upstream_requests_total',
    'Calls made to peer services',
    ['service', 'result']  # result: success, error
)

upstream_latency = Histogram(
    'upstream_request_latency_seconds',
    'Latency of calls made to peer services',
    ['service'],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 15.0]
)

# Pinning gateway metrics
pinning_operations = Counter(
    'pinning_operations_total',
    'Pinning gateway operations',
    ['operation', 'result']  # pin/fetch, success/error
)

# Seat layout metrics
seat_layouts_generated = Counter(
    'seat_layouts_generated_total',
    'Default seat layouts synthesised for theaters without a stored layout'
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_event_operation(operation: str):
    """Record event store operation. Operation: create, update, delete, cancel"""
    event_operations.labels(operation=operation).inc()


def record_application_decision(decision: str):
    theater_application_decisions.labels(decision=decision).inc()


def record_upstream_request(service: str, success: bool, duration: float):
    result = "success" if success else "error"
    upstream_requests.labels(service=service, result=result).inc()
    upstream_latency.labels(service=service).observe(duration)


def record_pinning_operation(operation: str, success: bool):
    result = "success" if success else "error"
    pinning_operations.labels(operation=operation, result=result).inc()
