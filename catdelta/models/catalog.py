"""Typed catalog documents.

Raw catalogs are validated once, at the document boundary, into these
models.  Absent or ``null`` optional fields take their defaults; a field of
the wrong kind is a validation error.  Scalars are never coerced, so a
``line`` of ``"12"`` or ``true`` is rejected rather than converted.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from catdelta.models.delta import SET_ATTRIBUTES


class _Document(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null means "absent": defaults apply, required fields stay required
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class EdgeDocument(_Document):
    """A dependency edge between two resource references."""

    source: StrictStr
    target: StrictStr


class ResourceDocument(_Document):
    """A resource declaration as found in a catalog."""

    type: StrictStr
    title: StrictStr
    file: StrictStr | None = None
    line: StrictInt | None = None
    tags: list[StrictStr] = Field(default_factory=list)
    exported: StrictBool = False
    parameters: dict[StrictStr, Any] = Field(default_factory=dict)

    @field_validator("parameters")
    @classmethod
    def _check_relationships(cls, parameters: dict[str, Any]) -> dict[str, Any]:
        for name in SET_ATTRIBUTES.intersection(parameters):
            value = parameters[name]
            if isinstance(value, str):
                continue
            if not isinstance(value, list) or not all(isinstance(ref, str) for ref in value):
                raise ValueError(f"parameter '{name}' must be a string or a list of strings")
        return parameters


class CatalogDocument(_Document):
    """A complete catalog: resources in declaration order plus edges."""

    environment: StrictStr | None = None
    version: Any = None
    resources: list[ResourceDocument] = Field(default_factory=list)
    edges: list[EdgeDocument] = Field(default_factory=list)
