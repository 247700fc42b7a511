"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, Callable
from functools import lru_cache

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backend.config import get_settings
from crud_backend.application.services import RecordService
from crud_backend.domain.entities import EntitySchema, TokenClaims
from crud_backend.domain.exceptions import AuthenticationError
from crud_backend.infrastructure.database.base import Base
from crud_backend.infrastructure.database.session import get_db_session
from crud_backend.infrastructure.database.repositories import SQLAlchemyRecordRepository
from crud_backend.infrastructure.security import JWTTokenService

ServiceProvider = Callable[..., AsyncGenerator[RecordService, None]]

# Raw header; scheme parsing happens below so each failure gets its own message
_authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


@lru_cache
def get_token_service() -> JWTTokenService:
    """Cached token service built from settings."""
    settings = get_settings()
    return JWTTokenService(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_minutes=settings.jwt_refresh_token_expire_minutes,
    )


async def require_bearer_token(
    request: Request,
    authorization: str | None = Depends(_authorization_header),
    token_service: JWTTokenService = Depends(get_token_service),
) -> TokenClaims:
    """Gate for protected routes — accepts exactly ``Bearer <token>``.

    The validated claims are also stored on ``request.state.claims``.
    """
    if not authorization:
        raise AuthenticationError("Authorization header required")
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise AuthenticationError("Invalid authorization header format")
    claims = token_service.validate_token(parts[1])
    request.state.claims = claims
    return claims


def record_service_provider(schema: EntitySchema, model: type[Base]) -> ServiceProvider:
    """Build a dependency that provides a RecordService for one table."""

    async def get_record_service(
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[RecordService, None]:
        repository = SQLAlchemyRecordRepository(session, schema, model)
        yield RecordService(repository)

    get_record_service.__name__ = f"get_{schema.table}_service"
    return get_record_service
