"""Prometheus metrics instrumentation."""

from __future__ import annotations

from fastapi import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

IMPORT_COUNT = Counter(
    "shmk_imports_total",
    "File imports by outcome",
    labelnames=("status",),
    registry=REGISTRY,
)

IMPORT_DURATION = Histogram(
    "shmk_import_duration_seconds",
    "Import pipeline duration",
    registry=REGISTRY,
)

ANNOTATION_EDITS = Counter(
    "shmk_annotation_edits_total",
    "Row annotation merges by edited field",
    labelnames=("field",),
    registry=REGISTRY,
)

STORE_FAILURES = Counter(
    "shmk_store_failures_total",
    "Store operations that failed to commit",
    labelnames=("namespace", "operation"),
    registry=REGISTRY,
)

DATASET_ROWS = Gauge(
    "shmk_dataset_rows",
    "Number of rows in the current dataset",
    registry=REGISTRY,
)


def metrics_response() -> Response:
    """Return Prometheus metrics as an HTTP response."""
    payload = generate_latest(REGISTRY)
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


__all__ = [
    "REGISTRY",
    "IMPORT_COUNT",
    "IMPORT_DURATION",
    "ANNOTATION_EDITS",
    "STORE_FAILURES",
    "DATASET_ROWS",
    "metrics_response",
]
