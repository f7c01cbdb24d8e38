"""Keyed views of a validated catalog.

Resources are indexed by :attr:`Resource.key` and carry a uniform attribute
map: ``tags`` (a set), the exported marker ``@@`` and one attribute per
declared parameter.  Relationship parameters (``before``, ``after``,
``subscribe``, ``notify``) become sets so that their order does not matter.
"""

from __future__ import annotations

from typing import Any

from catdelta.models.catalog import CatalogDocument, ResourceDocument
from catdelta.models.delta import (
    EXPORTED_ATTRIBUTE,
    SET_ATTRIBUTES,
    TAGS_ATTRIBUTE,
    Attribute,
    Edge,
    Location,
    Resource,
)
from catdelta.observability.logging import get_logger
from catdelta.observability.metrics import duplicate_resources_total

_log = get_logger("catalog.index")


def create_attribute(name: str, value: Any) -> Attribute:
    if name in SET_ATTRIBUTES:
        value = frozenset((value,)) if isinstance(value, str) else frozenset(value)
    return Attribute(name, value)


def create_attributes(doc: ResourceDocument) -> dict[str, Attribute]:
    attrs = {
        TAGS_ATTRIBUTE: create_attribute(TAGS_ATTRIBUTE, doc.tags),
        EXPORTED_ATTRIBUTE: create_attribute(EXPORTED_ATTRIBUTE, doc.exported),
    }
    for name, value in doc.parameters.items():
        attrs[name] = create_attribute(name, value)
    return attrs


def create_location(doc: ResourceDocument) -> Location | None:
    if doc.file is None and doc.line is None:
        return None
    return Location(doc.file, doc.line)


def create_resource(doc: ResourceDocument) -> Resource:
    return Resource(create_location(doc), doc.type, doc.title, create_attributes(doc))


def build_resource_index(document: CatalogDocument, catalog: str = "catalog") -> dict[str, Resource]:
    """Index the resources of *document* by key, in declaration order.

    When two declarations share a key the later one replaces the earlier one
    (last write wins); the key keeps the position of its first declaration.
    """
    index: dict[str, Resource] = {}
    for doc in document.resources:
        resource = create_resource(doc)
        if resource.key in index:
            duplicate_resources_total.inc()
            _log.warning("duplicate_resource_key", catalog=catalog, key=resource.key)
        index[resource.key] = resource
    return index


def build_edges(document: CatalogDocument) -> list[Edge]:
    return [Edge(doc.source, doc.target) for doc in document.edges]
