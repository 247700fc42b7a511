"""Domain entity — a row of any generated table, described by its schema."""

from dataclasses import dataclass, field
from typing import Any

from .entity_schema import EntitySchema, utc_now


@dataclass
class Record:
    """A single stored row.

    ``values`` holds every column named by the schema, including key and
    audit fields once the record has been persisted.
    """

    schema: EntitySchema
    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def new(cls, schema: EntitySchema, values: dict[str, Any]) -> "Record":
        """Build an unsaved record from client-supplied values.

        Omitted fields take their zero value; zero-valued fields with a
        store default take the default. Audit timestamps are assigned here.
        """
        data: dict[str, Any] = {}
        for spec in schema.writable_fields:
            value = values.get(spec.name, spec.zero_value)
            if spec.store_default is not None and value == spec.zero_value:
                value = spec.default_for_create()
            data[spec.name] = value
        now = utc_now()
        for name in schema.audit_fields:
            data[name] = now
        return cls(schema=schema, values=data)

    @property
    def key(self) -> tuple[Any, ...]:
        return tuple(self.values.get(name) for name in self.schema.key_fields)

    def update(self, changes: dict[str, Any]) -> None:
        """Write the given updatable fields and refresh ``updated_at``."""
        for spec in self.schema.updatable_fields:
            if spec.name in changes:
                self.values[spec.name] = changes[spec.name]
        if "updated_at" in self.schema.audit_fields:
            self.values["updated_at"] = utc_now()

    def public_values(self) -> dict[str, Any]:
        """Values safe to return to clients (write-only fields removed)."""
        return {
            spec.name: self.values.get(spec.name)
            for spec in self.schema.readable_fields
        }
