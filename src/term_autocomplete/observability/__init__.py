"""Observability module for structured logging and Prometheus metrics."""

from term_autocomplete.observability.logging import JsonFormatter, configure_logging
from term_autocomplete.observability.metrics import (
    DICTIONARY_TERMS,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)


__all__ = [
    "DICTIONARY_TERMS",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "configure_logging",
    "get_metrics",
    "get_metrics_content_type",
    "track_latency",
]
