"""Error Handlers — global exception handlers for the CRUD API.

Invariants:
    - CrudError → envelope with the error's client message and HTTP status
    - HTTPException (unknown route, wrong method) → envelope with its status
    - RequestValidationError → 400 "Invalid request body" with field details
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from crud_backend.domain.exceptions import CrudError, StoreError
from crud_backend.presentation.api.responses import error_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_crud_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_crud_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CrudError)
    async def crud_error_handler(request: Request, exc: CrudError):
        if isinstance(exc, StoreError):
            logger.error(
                "%s on %s %s: %r",
                exc.message,
                request.method,
                request.url.path,
                exc.__cause__,
            )
        else:
            logger.info("%s on %s %s", exc.message, request.method, request.url.path)
        return error_response(exc.http_status, exc.client_message)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request body",
            details=_build_validation_details(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred",
        )


def _build_validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
