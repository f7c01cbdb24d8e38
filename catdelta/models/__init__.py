"""Core data structures for catdelta."""

from catdelta.models.catalog import CatalogDocument, EdgeDocument, ResourceDocument
from catdelta.models.config import CatDeltaConfig, DeltaOptions, LogConfig
from catdelta.models.delta import (
    EXPORTED_ATTRIBUTE,
    SET_ATTRIBUTES,
    TAGS_ATTRIBUTE,
    Attribute,
    AttributeConflict,
    CatalogDelta,
    DiffElement,
    DiffNode,
    Edge,
    Location,
    Resource,
    ResourceConflict,
)

__all__ = [
    "EXPORTED_ATTRIBUTE",
    "SET_ATTRIBUTES",
    "TAGS_ATTRIBUTE",
    "Attribute",
    "AttributeConflict",
    "CatDeltaConfig",
    "CatalogDelta",
    "CatalogDocument",
    "DeltaOptions",
    "DiffElement",
    "DiffNode",
    "Edge",
    "EdgeDocument",
    "Location",
    "LogConfig",
    "Resource",
    "ResourceConflict",
    "ResourceDocument",
]
