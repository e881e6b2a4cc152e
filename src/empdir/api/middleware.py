"""Request logging and timing middleware."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and its response, tagged with a short request id."""

    def __init__(self, app, slow_request_ms: int = 500) -> None:
        super().__init__(app)
        self._slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request.state.request_id = rid
        method, path = request.method, request.url.path
        query = f"?{request.url.query}" if request.url.query else ""
        logger.info("[%s] -> %s %s%s", rid, method, path, query)

        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception("[%s] %s %s unhandled exception", rid, method, path)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info("[%s] <- %d %s %s (%.0f ms)", rid, response.status_code, method, path, elapsed_ms)
        if elapsed_ms > self._slow_request_ms:
            logger.warning("[%s] Slow request: %s %s took %.0f ms", rid, method, path, elapsed_ms)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
