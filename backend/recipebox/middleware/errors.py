"""
RecipeBox Backend: Unexpected Error Middleware
==============================================

What:  Turns any exception no handler claimed into a 500 `{"error": ...}`.
How:   Sits directly above the routes and below CORS, so the 500 response
       passes back through CORSMiddleware and carries the allow-origin
       headers a browser needs to read the body.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from recipebox.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                "[%s] Unexpected error: %s", request_id_var.get(""), str(e), exc_info=True
            )
            return JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR_MESSAGE})
