"""Resource-level comparison of two keyed resource indexes."""

from __future__ import annotations

from dataclasses import dataclass, field

from catdelta.delta.attributes import diff_attributes
from catdelta.models.delta import Attribute, Resource, ResourceConflict
from catdelta.observability.logging import get_logger

_log = get_logger("delta.resources")


@dataclass
class ResourceDiff:
    """Partition of two resource indexes by key.

    Equal resources are only counted; they do not appear in the diff tree.
    """

    added: list[Resource] = field(default_factory=list)
    missing: list[Resource] = field(default_factory=list)
    conflicting: list[ResourceConflict] = field(default_factory=list)
    equal_resource_count: int = 0
    equal_attribute_count: int = 0


def _attributes(resource: Resource) -> dict[str, Attribute]:
    return resource.attributes or {}


def create_resource_conflict(
    baseline: Resource,
    preview: Resource,
    ignore_tags: bool = False,
) -> ResourceConflict | None:
    """Return the conflict between two resources with the same key, or None if they are equal."""
    diff = diff_attributes(_attributes(baseline), _attributes(preview), ignore_tags)
    if diff is None:
        return None
    return ResourceConflict(
        baseline.location,
        preview.location,
        baseline.type,
        baseline.title,
        diff.equal_count,
        added_attributes=diff.added,
        missing_attributes=diff.missing,
        conflicting_attributes=diff.conflicting,
    )


def diff_resources(
    baseline: dict[str, Resource],
    preview: dict[str, Resource],
    ignore_tags: bool = False,
) -> ResourceDiff:
    """Match *baseline* and *preview* resources by key.

    Added resources keep preview order; missing and conflicting resources
    keep baseline order.
    """
    result = ResourceDiff(
        added=[resource for key, resource in preview.items() if key not in baseline],
        missing=[resource for key, resource in baseline.items() if key not in preview],
    )
    for key, b_resource in baseline.items():
        p_resource = preview.get(key)
        if p_resource is None:
            continue
        conflict = create_resource_conflict(b_resource, p_resource, ignore_tags)
        if conflict is None:
            result.equal_resource_count += 1
            result.equal_attribute_count += len(_attributes(b_resource))
        else:
            _log.debug(
                "resource_conflict",
                resource=key,
                added=conflict.added_attribute_count,
                missing=conflict.missing_attribute_count,
                conflicting=conflict.conflicting_attribute_count,
            )
            result.conflicting.append(conflict)
            result.equal_attribute_count += conflict.equal_attribute_count
    return result
