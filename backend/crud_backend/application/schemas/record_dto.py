"""Pydantic DTOs (Data Transfer Objects) generated from entity schemas.

For every entity three models are built:

* ``<Entity>Create`` — required fields must be present and non-zero,
  max-length and format rules apply, omitted optional fields take their
  zero value.
* ``<Entity>Update`` — every writable field is optional and defaults to its
  zero value. A full-row update therefore cannot tell "omitted" from
  "cleared"; the explicit-presence variant reads ``model_fields_set``.
* ``<Entity>Response`` — every readable column.

Timestamps are normalized to UTC on the way in and out, since SQLite keeps
no offset. An explicit ``null`` for a string, boolean or unsigned field
reads as that field's zero value.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, create_model

from crud_backend.domain.entities import EntitySchema, FieldKind, FieldSpec

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
_OPTIONAL_EMAIL_PATTERN = r"^$|^[^@\s]+@[^@\s]+\.[^@\s]+$"
_UINT32_MAX = 2**32 - 1


def _as_utc(value: datetime) -> datetime:
    """Naive values are taken as UTC; aware values are converted to it."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _null_as(zero: Any) -> BeforeValidator:
    """Read an explicit JSON null as the field's zero value."""
    return BeforeValidator(lambda value: zero if value is None else value)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]
NullableStr = Annotated[str, _null_as("")]
NullableInt = Annotated[int, _null_as(0)]
NullableBool = Annotated[bool, _null_as(False)]


@dataclass(frozen=True)
class EntityDTOs:
    """The request/response models generated for one entity."""

    create: type[BaseModel]
    update: type[BaseModel]
    response: type[BaseModel]


def _string_constraints(spec: FieldSpec, *, allow_empty: bool) -> dict[str, Any]:
    constraints: dict[str, Any] = {}
    if spec.max_length is not None:
        constraints["max_length"] = spec.max_length
    if not allow_empty:
        constraints["min_length"] = 1
    if spec.email:
        constraints["pattern"] = _OPTIONAL_EMAIL_PATTERN if allow_empty else _EMAIL_PATTERN
    return constraints


def _create_field(spec: FieldSpec) -> tuple[Any, Any]:
    """Field definition for create payloads."""
    if spec.kind is FieldKind.STRING:
        constraints = _string_constraints(spec, allow_empty=not spec.required)
        if spec.required:
            return str, Field(..., **constraints)
        return NullableStr, Field("", **constraints)
    if spec.kind is FieldKind.UNSIGNED:
        if spec.required:
            return int, Field(..., gt=0, le=_UINT32_MAX)
        return NullableInt, Field(0, ge=0, le=_UINT32_MAX)
    if spec.kind is FieldKind.BOOLEAN:
        if spec.required:
            return bool, Field(...)
        return NullableBool, Field(False)
    if spec.required:
        return UTCDateTime, Field(...)
    return UTCDateTime | None, Field(None)


def _update_field(spec: FieldSpec) -> tuple[Any, Any]:
    """Field definition for update payloads — everything optional, zero-valued."""
    if spec.kind is FieldKind.STRING:
        return NullableStr, Field("", **_string_constraints(spec, allow_empty=True))
    if spec.kind is FieldKind.UNSIGNED:
        return NullableInt, Field(0, ge=0, le=_UINT32_MAX)
    if spec.kind is FieldKind.BOOLEAN:
        return NullableBool, Field(False)
    return UTCDateTime | None, Field(None)


def _response_field(spec: FieldSpec) -> tuple[Any, Any]:
    if spec.kind is FieldKind.STRING:
        return str, ...
    if spec.kind is FieldKind.UNSIGNED:
        return int, ...
    if spec.kind is FieldKind.BOOLEAN:
        return bool, ...
    return UTCDateTime | None, None


@lru_cache
def build_entity_dtos(schema: EntitySchema) -> EntityDTOs:
    """Generate (and cache) the DTO classes for ``schema``."""
    prefix = schema.class_prefix
    create = create_model(
        f"{prefix}Create",
        __doc__=f"Schema for creating a new {schema.table} record.",
        **{spec.name: _create_field(spec) for spec in schema.writable_fields},
    )
    update = create_model(
        f"{prefix}Update",
        __doc__=f"Schema for updating a {schema.table} record — omitted fields are zero-valued.",
        **{spec.name: _update_field(spec) for spec in schema.updatable_fields},
    )
    response = create_model(
        f"{prefix}Response",
        __doc__=f"Schema returned to the client for a {schema.table} record.",
        **{spec.name: _response_field(spec) for spec in schema.readable_fields},
    )
    return EntityDTOs(create=create, update=update, response=response)
