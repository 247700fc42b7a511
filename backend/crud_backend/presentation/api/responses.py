"""Helpers that render the uniform response envelope."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from crud_backend.application.schemas import APIResponse


def success_response(
    message: str,
    data: Any = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    envelope = APIResponse(success=True, message=message)
    if data is not None:
        envelope.data = data
    return JSONResponse(status_code=status_code, content=envelope.to_content())


def error_response(
    status_code: int,
    error: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    envelope = APIResponse(success=False, error=error)
    if details:
        envelope.details = details
    return JSONResponse(status_code=status_code, content=envelope.to_content())
