"""Request access-log middleware."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from crud_backend.infrastructure.logging.colored_logger import AccessLogger


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Writes one line per request: method, path, status and elapsed time."""

    def __init__(self, app, access_logger: AccessLogger | None = None):
        super().__init__(app)
        self._log = access_logger or AccessLogger()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            self._log.request_failed(
                request.method, request.url.path, exc, _elapsed_ms(start)
            )
            raise
        self._log.request_complete(
            request.method, request.url.path, response.status_code, _elapsed_ms(start)
        )
        return response


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
