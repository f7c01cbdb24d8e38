"""Catalog document boundary.

Turns raw catalog mappings (or JSON files) into validated
:class:`~catdelta.models.catalog.CatalogDocument` instances.  A document that
does not have the expected shape aborts the comparison with a
:class:`CatalogTypeError`; nothing downstream re-checks types.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from catdelta.models.catalog import CatalogDocument
from catdelta.observability.logging import get_logger
from catdelta.observability.metrics import catalogs_rejected_total

_log = get_logger("catalog.loader")

_ENVELOPE_TYPE = "Catalog"


class CatalogError(Exception):
    """Base class for catalog documents that cannot be used."""


class CatalogTypeError(CatalogError, TypeError):
    """A catalog field is absent when required or has the wrong kind.

    ``errors`` holds ``(location, message)`` pairs where the location is a
    dotted path into the document, e.g. ``resources.3.line``.
    """

    def __init__(self, catalog: str, errors: list[tuple[str, str]]) -> None:
        self.catalog = catalog
        self.errors = errors
        detail = "; ".join(f"{loc or '<root>'}: {msg}" for loc, msg in errors[:5])
        if len(errors) > 5:
            detail += f" (and {len(errors) - 5} more)"
        super().__init__(f"Invalid {catalog} catalog: {detail}")


class CatalogReadError(CatalogError):
    """A catalog file cannot be read or does not contain JSON."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Cannot read catalog '{path}': {cause}")
        self.path = path
        self.cause = cause


def _unwrap(document: Mapping[str, Any], catalog: str) -> Mapping[str, Any]:
    """Strip the ``{"document_type": "Catalog", "data": {...}}`` wire envelope.

    An envelope whose ``data`` is not a mapping is rejected rather than read
    as an empty catalog.
    """
    if document.get("document_type") != _ENVELOPE_TYPE:
        return document
    data = document.get("data")
    if not isinstance(data, Mapping):
        raise _reject(catalog, [("data", f"expected a mapping, got {type(data).__name__}")])
    return data


def _reject(catalog: str, errors: list[tuple[str, str]]) -> CatalogTypeError:
    catalogs_rejected_total.labels(catalog=catalog).inc()
    _log.warning(
        "catalog_rejected",
        catalog=catalog,
        error_count=len(errors),
        first_error=f"{errors[0][0]}: {errors[0][1]}" if errors else "",
    )
    return CatalogTypeError(catalog, errors)


def parse_catalog(document: Any, catalog: str = "catalog") -> CatalogDocument:
    """Validate *document* and return it as a :class:`CatalogDocument`.

    ``None`` is an empty catalog.  *catalog* labels the document in errors,
    logs and metrics (``"baseline"``, ``"preview"``).

    Raises:
        CatalogTypeError: the document is not a mapping, or a field has the
            wrong kind.
    """
    if isinstance(document, CatalogDocument):
        return document
    if document is None:
        return CatalogDocument()
    if not isinstance(document, Mapping):
        raise _reject(catalog, [("", f"expected a mapping, got {type(document).__name__}")])

    try:
        return CatalogDocument.model_validate(dict(_unwrap(document, catalog)))
    except ValidationError as exc:
        errors = [(".".join(str(part) for part in err["loc"]), err["msg"]) for err in exc.errors()]
        raise _reject(catalog, errors) from exc


def load_catalog_file(path: str | Path, catalog: str = "catalog") -> CatalogDocument:
    """Read a JSON catalog file and validate it.

    Raises:
        CatalogReadError: the file is unreadable or not JSON.
        CatalogTypeError: the JSON does not have the shape of a catalog.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CatalogReadError(path, exc) from exc
    _log.debug("catalog_read", catalog=catalog, path=str(path))
    return parse_catalog(raw, catalog)
