from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from outfit_api.core.context import request_id_ctx, route_ctx

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request id and route for log lines and echoes the id back."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        # Errors escaping the app are rendered outside this middleware.
        request.state.request_id = rid
        tokens = (request_id_ctx.set(rid), route_ctx.set(f"{request.method} {request.url.path}"))
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            logger.info(
                "request_done status=%d duration_ms=%.1f",
                response.status_code,
                (time.perf_counter() - started) * 1000.0,
            )
            return response
        finally:
            route_ctx.reset(tokens[1])
            request_id_ctx.reset(tokens[0])
