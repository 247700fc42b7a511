"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crud_backend.config import get_settings
from crud_backend.infrastructure.database import Base, engine
from crud_backend.infrastructure.logging.log_config import setup_logging
from crud_backend.presentation.api.access_log import AccessLogMiddleware
from crud_backend.presentation.api.error_handlers import register_error_handlers
from crud_backend.presentation.api.router import router as api_router
from crud_backend.presentation.api.security_headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, dispose the pool."""
    settings = get_settings()
    setup_logging()

    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured (%d tables)", len(Base.metadata.tables))

    yield

    # Shutdown
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "crud_backend.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.is_development,
    )
