"""Schemas of every table exposed through the generated CRUD API."""

from .entity_schema import EntitySchema, FieldKind, FieldSpec, utc_now

S = FieldKind.STRING
B = FieldKind.BOOLEAN
T = FieldKind.TIMESTAMP
U = FieldKind.UNSIGNED


def _id() -> FieldSpec:
    return FieldSpec("id", U, server_assigned=True)


def _created_at() -> FieldSpec:
    return FieldSpec("created_at", T, server_assigned=True)


def _updated_at() -> FieldSpec:
    return FieldSpec("updated_at", T, server_assigned=True)


USERS = EntitySchema(
    table="users",
    fields=(
        _id(),
        FieldSpec("email", S, required=True, max_length=255, email=True),
        FieldSpec("password", S, required=True, max_length=255, write_only=True),
        FieldSpec("name", S, required=True, max_length=255),
        FieldSpec("is_active", B, store_default=True),
        FieldSpec("is_admin", B),
        _created_at(),
        _updated_at(),
        FieldSpec("deleted_at", T),
        FieldSpec("email_verified", B),
        FieldSpec("email_verified_at", T),
        FieldSpec("last_login_at", T),
        FieldSpec("failed_login_attempts", U),
        FieldSpec("locked_until", T),
        FieldSpec("metadata", S),
        FieldSpec("nickname", S, max_length=100),
        FieldSpec("bio", S),
    ),
    soft_delete_field="deleted_at",
)

ROLES = EntitySchema(
    table="roles",
    fields=(
        _id(),
        FieldSpec("name", S, required=True, max_length=50),
        FieldSpec("description", S),
        _created_at(),
        _updated_at(),
    ),
)

PERMISSIONS = EntitySchema(
    table="permissions",
    fields=(
        _id(),
        FieldSpec("name", S, required=True, max_length=100),
        FieldSpec("description", S),
        FieldSpec("resource", S, required=True, max_length=100),
        FieldSpec("action", S, required=True, max_length=50),
        _created_at(),
        _updated_at(),
    ),
)

ROLE_PERMISSIONS = EntitySchema(
    table="role_permissions",
    fields=(
        FieldSpec("role_id", U, required=True),
        FieldSpec("permission_id", U, required=True),
        _created_at(),
    ),
    key_fields=("role_id", "permission_id"),
)

USER_ROLES = EntitySchema(
    table="user_roles",
    fields=(
        FieldSpec("user_id", U, required=True),
        FieldSpec("role_id", U, required=True),
        FieldSpec("assigned_at", T, store_default=utc_now),
        FieldSpec("assigned_by", U),
    ),
    key_fields=("user_id", "role_id"),
)

SESSIONS = EntitySchema(
    table="sessions",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("token", S, required=True, max_length=500),
        FieldSpec("refresh_token", S, max_length=500),
        FieldSpec("device_info", S),
        FieldSpec("ip_address", S, max_length=45),
        FieldSpec("user_agent", S),
        FieldSpec("is_active", B, store_default=True),
        FieldSpec("expires_at", T, required=True),
        _created_at(),
        FieldSpec("last_used_at", T, store_default=utc_now),
    ),
)

REFRESH_TOKENS = EntitySchema(
    table="refresh_tokens",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("token", S, required=True),
        FieldSpec("expires_at", T, required=True),
        FieldSpec("is_revoked", B),
        _created_at(),
        _updated_at(),
        FieldSpec("deleted_at", T),
    ),
    soft_delete_field="deleted_at",
)

PASSWORD_RESET_TOKENS = EntitySchema(
    table="password_reset_tokens",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("token", S, required=True, max_length=255),
        FieldSpec("expires_at", T, required=True),
        FieldSpec("used", B),
        FieldSpec("used_at", T),
        _created_at(),
    ),
)

EMAIL_VERIFICATION_TOKENS = EntitySchema(
    table="email_verification_tokens",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("email", S, required=True, max_length=255),
        FieldSpec("token", S, required=True, max_length=255),
        FieldSpec("expires_at", T, required=True),
        FieldSpec("used", B),
        FieldSpec("used_at", T),
        _created_at(),
    ),
)

OAUTH_PROVIDERS = EntitySchema(
    table="oauth_providers",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("provider", S, required=True, max_length=50),
        FieldSpec("provider_user_id", S, required=True, max_length=255),
        FieldSpec("access_token", S),
        FieldSpec("refresh_token", S),
        FieldSpec("token_expires_at", T),
        FieldSpec("profile_data", S),
        _created_at(),
        _updated_at(),
    ),
)

API_KEYS = EntitySchema(
    table="api_keys",
    fields=(
        _id(),
        FieldSpec("user_id", U),
        FieldSpec("name", S, required=True, max_length=100),
        FieldSpec("key_hash", S, required=True, max_length=255),
        FieldSpec("prefix", S, required=True, max_length=20),
        FieldSpec("scopes", S),
        FieldSpec("rate_limit", U, store_default=1000),
        FieldSpec("is_active", B, store_default=True),
        FieldSpec("last_used_at", T),
        FieldSpec("expires_at", T),
        _created_at(),
        _updated_at(),
    ),
)

USER_2FA = EntitySchema(
    table="user_2fa",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("secret", S, required=True, max_length=255),
        FieldSpec("backup_codes", S),
        FieldSpec("is_enabled", B),
        FieldSpec("enabled_at", T),
        FieldSpec("last_used_at", T),
        _created_at(),
        _updated_at(),
    ),
)

FILES = EntitySchema(
    table="files",
    fields=(
        _id(),
        FieldSpec("user_id", U, required=True),
        FieldSpec("file_name", S, required=True, max_length=255),
        FieldSpec("file_size", U, required=True),
        FieldSpec("file_type", S, required=True, max_length=100),
        FieldSpec("r2_key", S, required=True, max_length=500),
        FieldSpec("r2_url", S, required=True),
        FieldSpec("is_public", B),
        _created_at(),
        _updated_at(),
        FieldSpec("deleted_at", T),
    ),
    soft_delete_field="deleted_at",
)

ENTITY_SCHEMAS: tuple[EntitySchema, ...] = (
    USERS,
    ROLES,
    PERMISSIONS,
    ROLE_PERMISSIONS,
    USER_ROLES,
    SESSIONS,
    REFRESH_TOKENS,
    PASSWORD_RESET_TOKENS,
    EMAIL_VERIFICATION_TOKENS,
    OAUTH_PROVIDERS,
    API_KEYS,
    USER_2FA,
    FILES,
)

SCHEMAS_BY_TABLE: dict[str, EntitySchema] = {s.table: s for s in ENTITY_SCHEMAS}
