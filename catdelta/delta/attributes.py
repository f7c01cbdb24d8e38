"""Attribute-level comparison of one baseline resource against one preview resource."""

from __future__ import annotations

from dataclasses import dataclass, field

from catdelta.delta.compliance import is_compliant, values_equal
from catdelta.models.delta import TAGS_ATTRIBUTE, Attribute, AttributeConflict
from catdelta.observability.logging import get_logger

_log = get_logger("delta.attributes")


@dataclass
class AttributeDiff:
    """Attributes that differ between two resources with the same key."""

    added: list[Attribute] = field(default_factory=list)
    missing: list[Attribute] = field(default_factory=list)
    conflicting: list[AttributeConflict] = field(default_factory=list)
    equal_count: int = 0


def diff_attributes(
    baseline: dict[str, Attribute],
    preview: dict[str, Attribute],
    ignore_tags: bool = False,
) -> AttributeDiff | None:
    """Compare two attribute maps keyed by attribute name.

    Returns None when the maps hold the same names with equal values, i.e.
    the resources are equal.  Otherwise the result lists added attributes
    (preview order), missing attributes and conflicts (baseline order).
    ``equal_count`` is ``len(baseline) - len(conflicting)``.

    With ``ignore_tags`` the ``tags`` attribute is never reported as a
    conflict, though it still counts as present on both sides.
    """
    added = [attr for name, attr in preview.items() if name not in baseline]
    missing = [attr for name, attr in baseline.items() if name not in preview]

    conflicting: list[AttributeConflict] = []
    for name, b_attr in baseline.items():
        p_attr = preview.get(name)
        if p_attr is None or (ignore_tags and name == TAGS_ATTRIBUTE):
            continue
        if values_equal(b_attr.value, p_attr.value):
            continue
        compliant = is_compliant(b_attr.value, p_attr.value)
        _log.debug("attribute_conflict", attribute=name, compliant=compliant)
        conflicting.append(AttributeConflict(name, b_attr.value, p_attr.value, compliant))

    if not (added or missing or conflicting):
        return None
    return AttributeDiff(
        added=added,
        missing=missing,
        conflicting=conflicting,
        equal_count=len(baseline) - len(conflicting),
    )
