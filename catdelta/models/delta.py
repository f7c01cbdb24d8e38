"""Diff tree produced by a catalog comparison.

Every node that a report can point at (resources, resource conflicts,
attributes, attribute conflicts, edges and the delta itself) is a
:class:`DiffElement` and receives a ``diff_id`` once the tree is complete.
The ids are handed out by :func:`catdelta.delta.ids.assign_ids`; nothing else
writes them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Name of the attribute carrying the exported flag of a resource.
EXPORTED_ATTRIBUTE = "@@"
TAGS_ATTRIBUTE = "tags"

# Attributes whose values are compared as unordered sets.
SET_ATTRIBUTES = frozenset({"before", "after", "subscribe", "notify", TAGS_ATTRIBUTE})


@dataclass
class DiffElement:
    """Base of every node in the diff tree."""

    diff_id: int | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class Location:
    """A line in a manifest file."""

    file: str | None
    line: int | None


@dataclass
class Attribute(DiffElement):
    """A resource attribute: a parameter, the tags or the exported flag."""

    name: str
    value: Any


@dataclass
class Edge(DiffElement):
    """A dependency edge between two resources, compared structurally."""

    source: str
    target: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.source, self.target)


@dataclass
class AttributeConflict(DiffElement):
    """An attribute present on both sides with different values."""

    name: str
    baseline_value: Any
    preview_value: Any
    compliant: bool  # preview keeps everything the baseline value required


@dataclass
class Resource(DiffElement):
    """A catalog resource.

    ``attributes`` is ``None`` for added and missing resources of a delta
    built without ``verbose``.
    """

    location: Location | None
    type: str
    title: str
    attributes: dict[str, Attribute] | None = None

    @property
    def key(self) -> str:
        """Return the key identifying the resource within one catalog, e.g. ``File{/etc/motd}``."""
        return f"{self.type}{{{self.title}}}"

    def clear_attributes(self) -> None:
        self.attributes = None


@dataclass
class ResourceConflict(DiffElement):
    """A resource present in both catalogs whose attributes differ."""

    baseline_location: Location | None
    preview_location: Location | None
    type: str
    title: str
    equal_attribute_count: int
    added_attributes: list[Attribute] = field(default_factory=list)
    missing_attributes: list[Attribute] = field(default_factory=list)
    conflicting_attributes: list[AttributeConflict] = field(default_factory=list)
    added_attribute_count: int = field(init=False)
    missing_attribute_count: int = field(init=False)
    conflicting_attribute_count: int = field(init=False)

    def __post_init__(self) -> None:
        self.added_attribute_count = len(self.added_attributes)
        self.missing_attribute_count = len(self.missing_attributes)
        self.conflicting_attribute_count = len(self.conflicting_attributes)

    @property
    def key(self) -> str:
        return f"{self.type}{{{self.title}}}"


@dataclass
class CatalogDelta(DiffElement):
    """Root of the diff tree: the delta between a baseline and a preview catalog."""

    baseline_env: str | None = None
    preview_env: str | None = None
    tags_ignored: bool = False
    version_equal: bool = True
    preview_compliant: bool = True
    preview_equal: bool = True

    baseline_resource_count: int = 0
    preview_resource_count: int = 0
    added_resource_count: int = 0
    missing_resource_count: int = 0
    conflicting_resource_count: int = 0
    equal_resource_count: int = 0

    baseline_edge_count: int = 0
    preview_edge_count: int = 0
    added_edge_count: int = 0
    missing_edge_count: int = 0

    added_attribute_count: int = 0
    missing_attribute_count: int = 0
    conflicting_attribute_count: int = 0
    equal_attribute_count: int = 0

    added_resources: list[Resource] = field(default_factory=list)
    missing_resources: list[Resource] = field(default_factory=list)
    conflicting_resources: list[ResourceConflict] = field(default_factory=list)
    added_edges: list[Edge] = field(default_factory=list)
    missing_edges: list[Edge] = field(default_factory=list)


DiffNode = CatalogDelta | Resource | ResourceConflict | Attribute | AttributeConflict | Edge
