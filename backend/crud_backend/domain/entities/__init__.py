from .entity_schema import EntitySchema, FieldKind, FieldSpec, utc_now
from .record import Record
from .pagination import PageInfo, PageRequest
from .token_claims import TokenClaims
from .catalog import ENTITY_SCHEMAS, SCHEMAS_BY_TABLE

__all__ = [
    "EntitySchema",
    "FieldKind",
    "FieldSpec",
    "utc_now",
    "Record",
    "PageInfo",
    "PageRequest",
    "TokenClaims",
    "ENTITY_SCHEMAS",
    "SCHEMAS_BY_TABLE",
]
