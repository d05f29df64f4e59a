"""
RecipeBox Backend: Request Logging Middleware
=============================================

What:  One access log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP at a level chosen from the status class.
       Requests that carry a body (recipe uploads) also log its size.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Example lines:
    2024-06-10T12:00:00 [INFO] recipebox.access: POST /api/recipes 200 12.4ms [a1b2c3d4] from 127.0.0.1 (48213 bytes in)
    2024-06-10T12:00:01 [WARNING] recipebox.access: DELETE /api/recipes/9 404 1.9ms [e5f6a7b8] from 127.0.0.1

Request bodies (form fields, uploaded bytes) are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from recipebox.middleware.request_id import request_id_var

logger = logging.getLogger("recipebox.access")

SKIPPED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one plain-text line per request; GET /health is skipped."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        line = "%s %s %d %.1fms [%s] from %s"
        args = [
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id_var.get(""),
            client_ip,
        ]
        body_size = request.headers.get("content-length")
        if body_size and body_size != "0":
            line += " (%s bytes in)"
            args.append(body_size)

        logger.log(level_for_status(response.status_code), line, *args)
        return response
