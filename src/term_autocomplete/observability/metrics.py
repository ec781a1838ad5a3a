"""Prometheus metrics for autocomplete queries."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


QUERY_LATENCY = Histogram(
    "autocomplete_query_latency_seconds",
    "Autocomplete query latency in seconds",
    buckets=(0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05),
)

QUERY_COUNT = Counter(
    "autocomplete_queries_total",
    "Total autocomplete queries",
    ["outcome"],
)

DICTIONARY_TERMS = Gauge(
    "autocomplete_dictionary_terms",
    "Terms in the loaded dictionary",
)


@contextmanager
def track_latency(histogram: Histogram) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for metrics endpoint."""
    return CONTENT_TYPE_LATEST
