"""Catalog delta construction.

:func:`build_catalog_delta` is the comparison entry point.  It validates both
documents, indexes their resources and edges, classifies every element as
added, missing, equal or conflicting, aggregates the counts and verdict
flags, and finally numbers the resulting tree.

Counts are captured before the attributes of added and missing resources
are cleared, so ``added_attribute_count`` and ``missing_attribute_count``
always include them, verbose or not.
"""

from __future__ import annotations

import time
from enum import StrEnum
from typing import Any

from catdelta.catalog.index import build_edges, build_resource_index
from catdelta.catalog.loader import parse_catalog
from catdelta.delta.compliance import values_equal
from catdelta.delta.edges import diff_edges
from catdelta.delta.ids import assign_ids
from catdelta.delta.resources import diff_resources
from catdelta.models.config import DeltaOptions
from catdelta.models.delta import CatalogDelta, Resource
from catdelta.observability.logging import get_logger
from catdelta.observability.metrics import catalog_delta_duration_seconds, catalog_deltas_total

_log = get_logger("delta.catalog")


class DeltaVerdict(StrEnum):
    """Overall outcome of a comparison."""

    EQUAL = "equal"
    COMPLIANT = "compliant"
    NONCOMPLIANT = "noncompliant"


def verdict(delta: CatalogDelta) -> DeltaVerdict:
    if delta.preview_equal:
        return DeltaVerdict.EQUAL
    if delta.preview_compliant:
        return DeltaVerdict.COMPLIANT
    return DeltaVerdict.NONCOMPLIANT


def _attribute_total(resources: list[Resource]) -> int:
    return sum(len(r.attributes or {}) for r in resources)


def build_catalog_delta(
    baseline: Any,
    preview: Any,
    options: DeltaOptions | None = None,
    *,
    ignore_tags: bool | None = None,
    verbose: bool | None = None,
) -> CatalogDelta:
    """Compare *preview* against *baseline* and return the numbered delta.

    Args:
        baseline:    Trusted catalog, as a mapping or a CatalogDocument.
        preview:     Candidate catalog, same forms as *baseline*.
        options:     Comparison options; defaults to ``DeltaOptions()``.
        ignore_tags: Overrides ``options.ignore_tags`` when given.
        verbose:     Overrides ``options.verbose`` when given.

    Raises:
        CatalogTypeError: either document has the wrong shape.  No partial
            delta is produced.
    """
    options = options or DeltaOptions()
    if ignore_tags is None:
        ignore_tags = options.ignore_tags
    if verbose is None:
        verbose = options.verbose

    t_start = time.monotonic()
    baseline_doc = parse_catalog(baseline, "baseline")
    preview_doc = parse_catalog(preview, "preview")

    baseline_resources = build_resource_index(baseline_doc, "baseline")
    preview_resources = build_resource_index(preview_doc, "preview")
    resources = diff_resources(baseline_resources, preview_resources, ignore_tags)

    baseline_edges = build_edges(baseline_doc)
    preview_edges = build_edges(preview_doc)
    edges = diff_edges(baseline_edges, preview_edges)

    conflicts = resources.conflicting
    preview_compliant = not resources.missing and not conflicts and not edges.missing
    preview_equal = preview_compliant and not resources.added and not edges.added

    delta = CatalogDelta(
        baseline_env=baseline_doc.environment,
        preview_env=preview_doc.environment,
        tags_ignored=ignore_tags,
        version_equal=values_equal(baseline_doc.version, preview_doc.version),
        preview_compliant=preview_compliant,
        preview_equal=preview_equal,
        baseline_resource_count=len(baseline_resources),
        preview_resource_count=len(preview_resources),
        added_resource_count=len(resources.added),
        missing_resource_count=len(resources.missing),
        conflicting_resource_count=len(conflicts),
        equal_resource_count=resources.equal_resource_count,
        baseline_edge_count=len(baseline_edges),
        preview_edge_count=len(preview_edges),
        added_edge_count=len(edges.added),
        missing_edge_count=len(edges.missing),
        added_attribute_count=_attribute_total(resources.added)
        + sum(c.added_attribute_count for c in conflicts),
        missing_attribute_count=_attribute_total(resources.missing)
        + sum(c.missing_attribute_count for c in conflicts),
        conflicting_attribute_count=sum(c.conflicting_attribute_count for c in conflicts),
        equal_attribute_count=resources.equal_attribute_count,
        added_resources=resources.added,
        missing_resources=resources.missing,
        conflicting_resources=conflicts,
        added_edges=edges.added,
        missing_edges=edges.missing,
    )

    if not verbose:
        for resource in delta.added_resources + delta.missing_resources:
            resource.clear_attributes()

    assign_ids(delta)

    duration = time.monotonic() - t_start
    result = verdict(delta)
    catalog_deltas_total.labels(result=result.value).inc()
    catalog_delta_duration_seconds.observe(duration)
    _log.info(
        "catalog_delta_built",
        result=result.value,
        baseline_env=delta.baseline_env,
        preview_env=delta.preview_env,
        added_resources=delta.added_resource_count,
        missing_resources=delta.missing_resource_count,
        conflicting_resources=delta.conflicting_resource_count,
        equal_resources=delta.equal_resource_count,
        added_edges=delta.added_edge_count,
        missing_edges=delta.missing_edge_count,
        duration_ms=round(duration * 1000.0, 3),
    )
    return delta
