"""Prometheus collectors for catalog comparisons.

All collectors live in the default registry so that an embedding process can
expose them with ``prometheus_client.start_http_server`` or a textfile
exporter.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

catalog_deltas_total = Counter(
    "catdelta_catalog_deltas_total",
    "Catalog deltas built, by verdict.",
    ["result"],
)

catalog_delta_duration_seconds = Histogram(
    "catdelta_catalog_delta_duration_seconds",
    "Time spent building one catalog delta.",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)

duplicate_resources_total = Counter(
    "catdelta_duplicate_resources_total",
    "Resource declarations overwritten by a later declaration with the same key.",
)

catalogs_rejected_total = Counter(
    "catdelta_catalogs_rejected_total",
    "Catalog documents rejected at the document boundary.",
    ["catalog"],
)
