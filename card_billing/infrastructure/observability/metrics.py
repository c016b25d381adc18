"""Prometheus metrics for monitoring plan generation, invoices and payment urgency"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from card_billing.domain.models import StatusBucket

# Plan metrics
plan_counter = Counter(
    "card_billing_plans_total",
    "Total installment plans built",
)

installment_counter = Counter(
    "card_billing_installments_total",
    "Installments generated across all plans",
)

plan_length_histogram = Histogram(
    "card_billing_plan_length",
    "Number of installments per plan",
    buckets=[1, 2, 3, 6, 10, 12, 18, 24, 48],
)

# Invoice metrics
invoice_counter = Counter(
    "card_billing_invoice_computations_total",
    "Invoice totals computed",
    ["kind"],  # total | by_card
)

# Status metrics
status_bucket_counter = Counter(
    "card_billing_status_bucket_total",
    "Payment status classifications by bucket",
    ["bucket"],  # paid | overdue | due-soon | normal
)

rejected_request_counter = Counter(
    "card_billing_rejected_requests_total",
    "Requests rejected by domain validation",
    ["reason"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_plan(num_installments: int) -> None:
    """Record plan metrics for monitoring installment distribution"""
    plan_counter.inc()
    installment_counter.inc(num_installments)
    plan_length_histogram.observe(num_installments)


def record_classifications(buckets: Iterable[StatusBucket]) -> None:
    """Count each classified bucket"""
    for bucket in buckets:
        status_bucket_counter.labels(bucket=bucket.value).inc()


def record_rejection(error: Exception) -> None:
    rejected_request_counter.labels(reason=type(error).__name__).inc()
