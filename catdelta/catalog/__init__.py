"""Catalog ingestion: document validation and keyed resource views."""

from catdelta.catalog.index import build_edges, build_resource_index
from catdelta.catalog.loader import (
    CatalogError,
    CatalogReadError,
    CatalogTypeError,
    load_catalog_file,
    parse_catalog,
)

__all__ = [
    "CatalogError",
    "CatalogReadError",
    "CatalogTypeError",
    "build_edges",
    "build_resource_index",
    "load_catalog_file",
    "parse_catalog",
]
