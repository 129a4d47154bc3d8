"""
HTTP middleware — request logging and correlation IDs.

Each request gets a request_id (from X-Request-ID or generated) bound into
structlog context vars, so every log line emitted while handling it carries
the id. The id is echoed back in the X-Request-ID response header.
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from odyssey_gateway.logging import bind_request, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:16]
    bind_request(request_id, method=request.method, path=request.url.path)
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("http_request_unhandled", duration_ms=round((time.perf_counter() - start) * 1000, 2))
        raise
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "http_request",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response
