"""V1 API router — health check plus one generated router per table."""

from fastapi import APIRouter

from crud_backend.domain.entities import ENTITY_SCHEMAS
from crud_backend.infrastructure.database.models import MODELS_BY_TABLE
from crud_backend.infrastructure.dependencies import record_service_provider
from crud_backend.presentation.api.v1.endpoints.health import router as health_router
from crud_backend.presentation.api.v1.endpoints.records import build_entity_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)

for _schema in ENTITY_SCHEMAS:
    router.include_router(
        build_entity_router(
            _schema,
            record_service_provider(_schema, MODELS_BY_TABLE[_schema.table]),
        )
    )
