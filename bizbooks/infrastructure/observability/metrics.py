"""Prometheus metrics for monitoring ledger activity, reports and uploads"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

# Ledger write metrics
transaction_counter = Counter(
    "bizbooks_transactions_total",
    "Ledger writes by action and type",
    ["action", "type"],  # created | updated | deleted
)

transaction_amount_histogram = Histogram(
    "bizbooks_transaction_amount",
    "Amounts of recorded transactions",
    ["type"],
    buckets=[10, 50, 100, 500, 1000, 5000, 10000],
)

# Upload metrics
photo_rejections_counter = Counter(
    "bizbooks_photo_rejections_total",
    "Receipt uploads rejected by validation",
    ["reason"],  # invalid_type | too_large
)

# Read-side metrics
report_duration_histogram = Histogram(
    "bizbooks_report_duration_seconds",
    "Time spent building dashboard and report aggregates",
    ["report"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

csv_export_counter = Counter(
    "bizbooks_csv_exports_total",
    "CSV exports served",
    ["source"],  # transactions | report
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_transaction(action: str, txn_type: str, amount: Decimal | None = None) -> None:
    """Record a ledger write; amounts are only observed on creation"""
    transaction_counter.labels(action=action, type=txn_type).inc()
    if amount is not None:
        transaction_amount_histogram.labels(type=txn_type).observe(float(amount))
