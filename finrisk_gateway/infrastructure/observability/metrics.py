"""Prometheus metrics for monitoring health outcomes and ledger activity"""

from typing import List

from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "finrisk_health_report_total",
    "Total financial health reports generated",
    ["status"],  # SAFE | WARNING | CRITICAL
)

risk_factor_counter = Counter(
    "finrisk_risk_factor_total",
    "Risk factors triggered by rule code",
    ["code"],
)

# Ledger metrics
transaction_counter = Counter(
    "finrisk_transactions_recorded_total",
    "Transactions appended to the store",
    ["type"],  # INCOME | EXPENSE
)

store_reset_counter = Counter(
    "finrisk_store_resets_total",
    "Store resets (clear and reseed)",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(status: str, risk_codes: List[str]) -> None:
    """Record report outcome and each triggered rule"""
    report_counter.labels(status=status).inc()
    for code in risk_codes:
        risk_factor_counter.labels(code=code).inc()
