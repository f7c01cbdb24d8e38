"""Identifier assignment for the diff tree.

Ids are integers handed out in one pre-order walk once the tree is
complete:

1. the delta itself
2. each added resource, followed by its attributes (verbose deltas only)
3. each missing resource, followed by its attributes
4. each conflicting resource, followed by its added, missing and
   conflicting attributes
5. added edges, then missing edges

Report renderers cross-reference findings by id, so this order is part of
the output format.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count

from catdelta.models.delta import CatalogDelta, DiffNode, Resource, ResourceConflict


def _resource_elements(resource: Resource) -> Iterator[DiffNode]:
    yield resource
    if resource.attributes is not None:
        yield from resource.attributes.values()


def _conflict_elements(conflict: ResourceConflict) -> Iterator[DiffNode]:
    yield conflict
    yield from conflict.added_attributes
    yield from conflict.missing_attributes
    yield from conflict.conflicting_attributes


def iter_diff_elements(delta: CatalogDelta) -> Iterator[DiffNode]:
    """Yield every element of *delta* in id order."""
    yield delta
    for resource in delta.added_resources:
        yield from _resource_elements(resource)
    for resource in delta.missing_resources:
        yield from _resource_elements(resource)
    for conflict in delta.conflicting_resources:
        yield from _conflict_elements(conflict)
    yield from delta.added_edges
    yield from delta.missing_edges


def assign_ids(delta: CatalogDelta, start: int = 1) -> int:
    """Number every element of *delta* from *start*; return the next unused id.

    Raises:
        ValueError: the tree already carries ids.
    """
    if delta.diff_id is not None:
        raise ValueError(f"diff ids already assigned (delta has id {delta.diff_id})")
    counter = count(start)
    for element in iter_diff_elements(delta):
        element.diff_id = next(counter)
    return next(counter)
