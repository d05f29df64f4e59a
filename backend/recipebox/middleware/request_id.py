"""
RecipeBox Backend: Request ID Middleware
========================================

What:  Assigns each request an ID and echoes it in the X-Request-ID header.
How:   Reuses the client's X-Request-ID when it is a short token of letters,
       digits, '-' or '_'; anything else is replaced by a fresh 8-hex ID so
       log lines and response headers never carry arbitrary client text.
       The ID lives in a ContextVar for loggers and in request.state.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def accepted_request_id(supplied: Optional[str]) -> str:
    """The client's ID if it is safe to log and echo, otherwise a new one."""
    if supplied and _ACCEPTED_ID.fullmatch(supplied):
        return supplied
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request and response with a correlation ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = accepted_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
