"""Prometheus metrics for monitoring receipts issued and late fines charged"""

from decimal import Decimal

from prometheus_client import Counter, Histogram

# Receipt metrics
receipt_counter = Counter(
    "fee_receipts_total",
    "Total fee receipts computed",
    ["status"],  # paid | pending | overdue
)

# Fine metrics
fine_band_counter = Counter(
    "fee_fines_total",
    "Fine computations by schedule band",
    ["band"],  # on_time | tier_1 | tier_2 | tier_3 | capped
)

fine_amount_histogram = Histogram(
    "fee_fine_amount",
    "Late fine charged per computation",
    buckets=[0, 420, 1000, 2220, 3000, 3760],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_fine(band: str, fine_amount: Decimal) -> None:
    """Record which tier a lateness landed in and the fine charged"""
    fine_band_counter.labels(band=band).inc()
    fine_amount_histogram.observe(float(fine_amount))


def record_receipt(status: str, band: str, fine_amount: Decimal) -> None:
    """Record receipt issuance along with its fine"""
    receipt_counter.labels(status=status).inc()
    record_fine(band, fine_amount)
