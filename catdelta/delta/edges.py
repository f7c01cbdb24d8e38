"""Edge comparison.

Edges have no identity beyond ``(source, target)`` and no notion of
conflict: an edge is either in the other catalog or it is not.  Membership
ignores multiplicity, so an edge declared twice in the preview and once in
the baseline is not added.  Edges failing the membership test are reported
once per declaration, in document order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catdelta.models.delta import Edge


@dataclass
class EdgeDiff:
    added: list[Edge] = field(default_factory=list)
    missing: list[Edge] = field(default_factory=list)


def diff_edges(baseline: list[Edge], preview: list[Edge]) -> EdgeDiff:
    baseline_keys = {edge.key for edge in baseline}
    preview_keys = {edge.key for edge in preview}
    return EdgeDiff(
        added=[edge for edge in preview if edge.key not in baseline_keys],
        missing=[edge for edge in baseline if edge.key not in preview_keys],
    )
