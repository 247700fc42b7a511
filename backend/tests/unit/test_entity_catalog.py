"""Consistency checks between the entity schemas and the ORM models."""

import pytest
from sqlalchemy import inspect

from crud_backend.domain.entities import ENTITY_SCHEMAS, SCHEMAS_BY_TABLE, EntitySchema, FieldKind, FieldSpec
from crud_backend.infrastructure.database.models import MODELS_BY_TABLE


def test_every_schema_has_a_model():
    assert set(SCHEMAS_BY_TABLE) == set(MODELS_BY_TABLE)
    assert len(ENTITY_SCHEMAS) == 13


@pytest.mark.parametrize("schema", ENTITY_SCHEMAS, ids=lambda s: s.table)
def test_schema_fields_match_model_columns(schema):
    table = MODELS_BY_TABLE[schema.table].__table__
    assert {f.name for f in schema.fields} == set(table.columns.keys())


@pytest.mark.parametrize("schema", ENTITY_SCHEMAS, ids=lambda s: s.table)
def test_key_fields_match_primary_key(schema):
    mapper = inspect(MODELS_BY_TABLE[schema.table])
    assert tuple(c.name for c in mapper.primary_key) == schema.key_fields


def test_composite_key_entities():
    assert SCHEMAS_BY_TABLE["role_permissions"].key_fields == ("role_id", "permission_id")
    assert SCHEMAS_BY_TABLE["user_roles"].key_fields == ("user_id", "role_id")
    assert not SCHEMAS_BY_TABLE["user_roles"].has_surrogate_key
    assert SCHEMAS_BY_TABLE["users"].has_surrogate_key


def test_soft_delete_columns():
    flagged = {s.table for s in ENTITY_SCHEMAS if s.soft_delete_field}
    assert flagged == {"users", "refresh_tokens", "files"}


def test_users_metadata_column_uses_reserved_name():
    assert "metadata" in MODELS_BY_TABLE["users"].__table__.columns


def test_schema_rejects_unknown_key_field():
    with pytest.raises(ValueError):
        EntitySchema(table="broken", fields=(FieldSpec("name", FieldKind.STRING),))


def test_schema_rejects_duplicate_fields():
    with pytest.raises(ValueError):
        EntitySchema(
            table="broken",
            fields=(
                FieldSpec("id", FieldKind.UNSIGNED, server_assigned=True),
                FieldSpec("id", FieldKind.UNSIGNED),
            ),
        )


def test_field_partitions():
    users = SCHEMAS_BY_TABLE["users"]
    assert "password" in {f.name for f in users.writable_fields}
    assert "password" not in {f.name for f in users.readable_fields}
    assert users.audit_fields == ("created_at", "updated_at")
    assert "role_id" not in {f.name for f in SCHEMAS_BY_TABLE["user_roles"].updatable_fields}
    assert users.class_prefix == "Users"
    assert SCHEMAS_BY_TABLE["user_2fa"].class_prefix == "User2fa"
