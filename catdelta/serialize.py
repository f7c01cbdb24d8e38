"""Conversion of the diff tree into plain maps and lists.

The walk knows a small closed set of container kinds (mappings, lists and
tuples, sets) plus dataclass nodes.  Dataclass nodes become maps of their
fields with ``None`` fields omitted; ``diff_id`` is emitted as ``id``.
Resource attribute maps become lists of attribute maps, in declaration
order, so that every attribute is addressable by its id.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any

from catdelta.models.delta import Resource

_RENAMED_FIELDS = {"diff_id": "id"}


def _node_to_hash(node: Any) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in dataclasses.fields(node):
        raw = getattr(node, f.name)
        if isinstance(node, Resource) and f.name == "attributes" and raw is not None:
            value: Any = [to_hash(attr) for attr in raw.values()]
        else:
            value = to_hash(raw)
        if value is not None:
            result[_RENAMED_FIELDS.get(f.name, f.name)] = value
    return result


def to_hash(value: Any) -> Any:
    """Return *value* as nested dicts, lists and scalars."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _node_to_hash(value)
    if isinstance(value, Mapping):
        return {str(k): to_hash(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_hash(v) for v in value]
    if isinstance(value, Set):
        return sorted((to_hash(v) for v in value), key=lambda v: (type(v).__name__, str(v)))
    if isinstance(value, Enum):
        return value.value
    return value


def to_json(value: Any, indent: int | None = 2) -> str:
    """Serialize *value* (usually a CatalogDelta) as a JSON document."""
    return json.dumps(to_hash(value), indent=indent, ensure_ascii=False)
