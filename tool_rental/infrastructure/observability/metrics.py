"""Prometheus metrics for checkout volume, billed days and request latency"""

from prometheus_client import Counter, Histogram

from tool_rental.domain.models import RentalAgreement

# Checkout metrics
checkout_counter = Counter(
    "tool_rental_checkout_total",
    "Total checkout attempts",
    ["outcome"],  # success | unknown_tool | invalid_request | error
)

checkout_by_tool_counter = Counter(
    "tool_rental_checkout_by_tool",
    "Successful checkouts per tool code",
    ["tool_code"],
)

chargeable_days_histogram = Histogram(
    "tool_rental_chargeable_days",
    "Chargeable days per agreement",
    buckets=[0, 1, 2, 3, 5, 7, 14, 30, 60],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_checkout(agreement: RentalAgreement) -> None:
    """Record metrics for a successfully priced agreement"""
    checkout_counter.labels(outcome="success").inc()
    checkout_by_tool_counter.labels(tool_code=agreement.tool.tool_code).inc()
    chargeable_days_histogram.observe(agreement.chargeable_days)


def record_checkout_failure(outcome: str) -> None:
    checkout_counter.labels(outcome=outcome).inc()
