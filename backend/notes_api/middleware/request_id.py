"""
Notes API — Request ID Middleware
==================================

What:  Assigns a short correlation id to each request and echoes it back.
How:   Reuses a client-sent X-Request-ID header or generates one, stores it
       in a ContextVar for loggers and in request.state for handlers, and
       sets it on the response.
When:  Outermost middleware; runs before request logging.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the id of the request being handled
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that tags every request with an id.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store it in `request_id_var` and `request.state.request_id`
        4. Return it in the X-Request-ID response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
