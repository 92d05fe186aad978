"""Метрики Prometheus (локальный registry)."""

from prometheus_client import CollectorRegistry, Counter, Histogram

registry = CollectorRegistry()

webhook_verifications_total = Counter(
    "webhook_verifications_total",
    "Webhook signature checks",
    ["result", "reason"],
    registry=registry,
)

sumsub_requests_total = Counter(
    "sumsub_requests_total",
    "Total signed requests to Sumsub",
    ["endpoint", "status"],
    registry=registry,
)

sumsub_request_latency_seconds = Histogram(
    "sumsub_request_latency_seconds",
    "Sumsub request latency in seconds",
    ["endpoint"],
    registry=registry,
)
