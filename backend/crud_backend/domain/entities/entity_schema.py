"""Entity schema — explicit field descriptors that drive every CRUD layer.

One ``EntitySchema`` per table replaces hand-written per-table repositories,
DTOs and routes: the repository, the request/response models and the route
registrar are all generated from it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class FieldKind(str, Enum):
    """Storage kinds supported by generated entities."""

    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    UNSIGNED = "unsigned"

    @property
    def zero_value(self) -> Any:
        """Value written when a field is omitted from a create/update payload."""
        if self is FieldKind.STRING:
            return ""
        if self is FieldKind.BOOLEAN:
            return False
        if self is FieldKind.UNSIGNED:
            return 0
        return None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FieldSpec:
    """Describes one column of a generated entity.

    ``store_default`` mirrors a column default: on create, a field whose
    supplied value is the zero value receives the default instead. It may be
    a plain value or a zero-argument callable. Updates never apply it.
    """

    name: str
    kind: FieldKind
    required: bool = False
    max_length: int | None = None
    email: bool = False
    write_only: bool = False
    server_assigned: bool = False
    store_default: Any | Callable[[], Any] = None

    @property
    def zero_value(self) -> Any:
        return self.kind.zero_value

    def default_for_create(self) -> Any:
        if callable(self.store_default):
            return self.store_default()
        return self.store_default


@dataclass(frozen=True)
class EntitySchema:
    """Table-level description of a generated entity."""

    table: str
    fields: tuple[FieldSpec, ...]
    key_fields: tuple[str, ...] = ("id",)
    soft_delete_field: str | None = None

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate field names in schema '{self.table}'")
        for key in self.key_fields:
            if key not in names:
                raise ValueError(f"Key field '{key}' missing from schema '{self.table}'")
        if self.soft_delete_field is not None and self.soft_delete_field not in names:
            raise ValueError(
                f"Soft-delete field '{self.soft_delete_field}' missing from schema '{self.table}'"
            )

    @property
    def class_prefix(self) -> str:
        """CamelCase prefix used for generated model names (``role_permissions`` → ``RolePermissions``)."""
        return "".join(part.capitalize() for part in self.table.split("_"))

    @property
    def title(self) -> str:
        return self.table.replace("_", " ").title()

    @property
    def has_surrogate_key(self) -> bool:
        return self.key_fields == ("id",) and self.field("id").server_assigned

    @property
    def writable_fields(self) -> tuple[FieldSpec, ...]:
        """Fields a client may set through create/update payloads."""
        return tuple(f for f in self.fields if not f.server_assigned)

    @property
    def updatable_fields(self) -> tuple[FieldSpec, ...]:
        """Writable fields that may change after create (key fields are immutable)."""
        return tuple(f for f in self.writable_fields if f.name not in self.key_fields)

    @property
    def readable_fields(self) -> tuple[FieldSpec, ...]:
        """Fields returned to clients."""
        return tuple(f for f in self.fields if not f.write_only)

    @property
    def audit_fields(self) -> tuple[str, ...]:
        return tuple(
            f.name
            for f in self.fields
            if f.server_assigned and f.kind is FieldKind.TIMESTAMP
        )

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.table} has no field '{name}'")

    def has_field(self, name: str) -> bool:
        return any(f.name == name for f in self.fields)
