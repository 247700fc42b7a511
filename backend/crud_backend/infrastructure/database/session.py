"""SQLAlchemy async engine and per-request session configuration."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from crud_backend.config import get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _engine_options(async_url: str) -> dict[str, Any]:
    """Driver-specific engine options."""
    if async_url.startswith("sqlite+aiosqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # An in-memory database lives only as long as its single connection
        if ":memory:" in async_url or async_url.rstrip("/").endswith("aiosqlite:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True}


settings = get_settings()
_async_url = _get_async_url(settings.database_url)

engine = create_async_engine(
    _async_url,
    echo=settings.database_echo,
    **_engine_options(_async_url),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request.

    Commits when the request succeeds and rolls back on any error.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
