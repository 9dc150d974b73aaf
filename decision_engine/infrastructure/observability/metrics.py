"""Prometheus metrics for monitoring approval rates and approved amounts"""

from prometheus_client import Counter, Histogram

from decision_engine.domain.models import DecisionResult

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected
)

rejection_counter = Counter(
    "loan_decision_rejections_total",
    "Rejected loan decisions by error kind",
    ["kind"],
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # <=2000, 2000-5000, 5000-9999, 10000
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(result: DecisionResult) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    if not result.is_approved:
        decision_counter.labels(outcome="rejected").inc()
        rejection_counter.labels(kind=result.error_kind or "unknown").inc()
        return

    decision_counter.labels(outcome="approved").inc()

    amount = result.approved_amount
    if amount <= 2000:
        bucket = "<=2000"
    elif amount <= 5000:
        bucket = "2000-5000"
    elif amount < 10000:
        bucket = "5000-9999"
    else:
        bucket = "10000"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()
