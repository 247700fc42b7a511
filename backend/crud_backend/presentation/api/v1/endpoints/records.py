"""Generated CRUD endpoints — one router per entity schema."""

import re
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from crud_backend.application.schemas import (
    PaginatedData,
    PaginationInfoResponse,
    build_entity_dtos,
)
from crud_backend.application.services import RecordService
from crud_backend.domain.entities import EntitySchema, PageRequest, Record
from crud_backend.domain.exceptions import InvalidInputError
from crud_backend.infrastructure.dependencies import ServiceProvider, require_bearer_token
from crud_backend.presentation.api.responses import success_response

_DIGITS_RE = re.compile(r"[0-9]+")
_UINT32_MAX = 2**32 - 1
_UINT32_DIGITS = len(str(_UINT32_MAX))


def _parse_key_part(raw: str) -> int:
    """Parse one key segment as an unsigned 32-bit decimal integer."""
    if not _DIGITS_RE.fullmatch(raw):
        raise InvalidInputError("Invalid ID")
    digits = raw.lstrip("0") or "0"
    if len(digits) > _UINT32_DIGITS:
        raise InvalidInputError("Invalid ID")
    value = int(digits)
    if value > _UINT32_MAX:
        raise InvalidInputError("Invalid ID")
    return value


async def _read_payload(request: Request, model: type[BaseModel]) -> BaseModel:
    """Decode and validate the JSON body.

    Bodies are read inside the handler rather than declared as parameters so
    that the bearer-token gate runs before any body parsing.
    """
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        errors = [
            {**err, "loc": ("body", *err["loc"])}
            for err in exc.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=body) from exc


def _json_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI request-body entry for a body read by ``_read_payload``."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def build_entity_router(schema: EntitySchema, get_service: ServiceProvider) -> APIRouter:
    """Build the create/list/get/replace/patch/delete routes for ``schema``.

    Single-key entities are addressed as ``/<table>/{id}``; composite-key
    entities as ``/<table>/{first}/{second}``.
    """
    dtos = build_entity_dtos(schema)
    table = schema.table
    key_path = "/" + "/".join(f"{{{name}}}" for name in schema.key_fields)

    router = APIRouter(
        prefix=f"/{table}",
        tags=[schema.title],
        dependencies=[Depends(require_bearer_token)],
    )

    def parse_key(request: Request) -> tuple[int, ...]:
        return tuple(
            _parse_key_part(request.path_params[name]) for name in schema.key_fields
        )

    def render(record: Record) -> dict[str, Any]:
        return dtos.response.model_validate(record.public_values()).model_dump(mode="json")

    @router.post("", status_code=status.HTTP_201_CREATED, openapi_extra=_json_body(dtos.create))
    async def create_record(
        request: Request,
        service: RecordService = Depends(get_service),
    ) -> JSONResponse:
        data = await _read_payload(request, dtos.create)
        record = await service.create_record(data)
        return success_response(
            f"{table} created successfully",
            render(record),
            status_code=status.HTTP_201_CREATED,
        )

    @router.get("")
    async def list_records(
        page: str | None = Query(None, description="Page number, 1-based"),
        limit: str | None = Query(None, description="Page size, 1 to 100"),
        service: RecordService = Depends(get_service),
    ) -> JSONResponse:
        records, info = await service.list_records(PageRequest.from_query(page, limit))
        payload = PaginatedData(
            data=[render(r) for r in records],
            pagination=PaginationInfoResponse.from_page_info(info),
        )
        return success_response(f"{table} retrieved successfully", payload.model_dump())

    @router.get(key_path)
    async def get_record(
        request: Request,
        service: RecordService = Depends(get_service),
    ) -> JSONResponse:
        record = await service.get_record(parse_key(request))
        return success_response(f"{table} retrieved successfully", render(record))

    @router.put(key_path, openapi_extra=_json_body(dtos.update))
    async def replace_record(
        request: Request,
        service: RecordService = Depends(get_service),
    ) -> JSONResponse:
        """Full-row update: omitted fields are written back as their zero value."""
        key = parse_key(request)
        data = await _read_payload(request, dtos.update)
        record = await service.replace_record(key, data)
        return success_response(f"{table} updated successfully", render(record))

    @router.patch(key_path, openapi_extra=_json_body(dtos.update))
    async def patch_record(
        request: Request,
        service: RecordService = Depends(get_service),
    ) -> JSONResponse:
        """Partial update: only fields present in the body are written."""
        key = parse_key(request)
        data = await _read_payload(request, dtos.update)
        record = await service.patch_record(key, data)
        return success_response(f"{table} updated successfully", render(record))

    @router.delete(key_path)
    async def delete_record(
        request: Request,
        service: RecordService = Depends(get_service),
    ) -> JSONResponse:
        await service.delete_record(parse_key(request))
        return success_response(f"{table} deleted successfully")

    return router
