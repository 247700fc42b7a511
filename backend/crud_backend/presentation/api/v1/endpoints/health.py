"""Health check endpoint — unauthenticated, never touches the database."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from crud_backend.config import get_settings
from crud_backend.domain.entities import ENTITY_SCHEMAS
from crud_backend.presentation.api.responses import success_response

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> JSONResponse:
    """Returns the application status and the tables it serves."""
    settings = get_settings()
    return success_response(
        "healthy",
        {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.app_env,
            "entities": [schema.table for schema in ENTITY_SCHEMAS],
        },
    )
