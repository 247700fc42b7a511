"""Shared fixtures — the app runs against an in-memory SQLite database."""

import os

# Must be set before crud_backend.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes!"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from crud_backend.infrastructure.database import Base, get_db_session
from crud_backend.infrastructure.dependencies import get_token_service
from crud_backend.main import app


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = get_token_service().create_access_token(1, "admin@example.com", is_admin=True)
    return {"Authorization": f"Bearer {token}"}
