"""Catalog comparison engine.

Submodules:
    compliance -- Value equality and the relaxed compliance predicate.
    attributes -- Attribute differ for two resources with the same key.
    edges      -- Edge differ (structural membership).
    resources  -- Resource differ over two keyed indexes.
    ids        -- Pre-order diff id assignment.
    catalog    -- build_catalog_delta(), the comparison entry point.
"""

from catdelta.delta.attributes import AttributeDiff, diff_attributes
from catdelta.delta.catalog import DeltaVerdict, build_catalog_delta, verdict
from catdelta.delta.compliance import is_compliant, values_equal
from catdelta.delta.edges import EdgeDiff, diff_edges
from catdelta.delta.ids import assign_ids, iter_diff_elements
from catdelta.delta.resources import ResourceDiff, create_resource_conflict, diff_resources

__all__ = [
    "AttributeDiff",
    "DeltaVerdict",
    "EdgeDiff",
    "ResourceDiff",
    "assign_ids",
    "build_catalog_delta",
    "create_resource_conflict",
    "diff_attributes",
    "diff_edges",
    "diff_resources",
    "is_compliant",
    "iter_diff_elements",
    "values_equal",
    "verdict",
]
