"""Prometheus metrics for the S3 endpoint codec."""

from __future__ import annotations

from prometheus_client import Counter

from . import config

# Codec operation metrics
codec_operations_total = Counter(
    "s3_endpoint_codec_operations_total",
    "Total number of endpoint URL encode/decode operations",
    ["operation", "result"],
)

codec_errors_total = Counter(
    "s3_endpoint_codec_errors_total",
    "Total number of failed encode/decode operations by error kind",
    ["kind"],
)


def record_operation(operation: str, result: str, kind: str | None = None) -> None:
    """Count one codec operation, and its error kind when it failed."""
    if not config.METRICS_ENABLED:
        return
    codec_operations_total.labels(operation=operation, result=result).inc()
    if kind is not None:
        codec_errors_total.labels(kind=kind).inc()
