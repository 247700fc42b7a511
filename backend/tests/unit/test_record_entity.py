"""Unit tests for the Record domain entity."""

from datetime import datetime

from crud_backend.domain.entities import Record, SCHEMAS_BY_TABLE

API_KEYS = SCHEMAS_BY_TABLE["api_keys"]
USER_ROLES = SCHEMAS_BY_TABLE["user_roles"]
USERS = SCHEMAS_BY_TABLE["users"]


def test_new_fills_zero_values_and_store_defaults():
    record = Record.new(API_KEYS, {"name": "ci", "key_hash": "h", "prefix": "sk_"})
    assert record.values["scopes"] == ""
    assert record.values["user_id"] == 0
    assert record.values["rate_limit"] == 1000
    assert record.values["is_active"] is True
    assert record.values["last_used_at"] is None
    assert isinstance(record.values["created_at"], datetime)
    assert record.values["created_at"] == record.values["updated_at"]


def test_new_replaces_explicit_zero_with_store_default():
    record = Record.new(API_KEYS, {"name": "ci", "key_hash": "h", "prefix": "sk_", "is_active": False})
    assert record.values["is_active"] is True


def test_new_keeps_non_zero_values():
    record = Record.new(API_KEYS, {"name": "ci", "key_hash": "h", "prefix": "sk_", "rate_limit": 5})
    assert record.values["rate_limit"] == 5


def test_new_assigns_callable_default():
    record = Record.new(USER_ROLES, {"user_id": 1, "role_id": 2})
    assert isinstance(record.values["assigned_at"], datetime)
    assert record.key == (1, 2)


def test_new_ignores_unknown_and_server_assigned_values():
    record = Record.new(USERS, {"email": "a@b.io", "id": 99, "bogus": 1})
    assert "id" not in record.values
    assert "bogus" not in record.values


def test_update_skips_key_fields():
    record = Record.new(USER_ROLES, {"user_id": 1, "role_id": 2})
    record.update({"user_id": 5, "assigned_by": 3})
    assert record.key == (1, 2)
    assert record.values["assigned_by"] == 3


def test_public_values_hide_write_only_fields():
    record = Record.new(USERS, {"email": "a@b.io", "password": "pw", "name": "A"})
    record.values["id"] = 1
    public = record.public_values()
    assert "password" not in public
    assert public["email"] == "a@b.io"
    assert public["id"] == 1
