"""
Notes API — Request Logging Middleware
=======================================

What:  Logs every request before it is handled and its outcome afterwards.
How:   Reads (and caches) the request body, logs method/path/body, hands the
       request on, then logs status and duration.
When:  After RequestIDMiddleware (uses the request id for correlation),
       before the static-asset fallback and the routes.

Log Format:
    Method: POST
    Path:   /api/notes
    Body:   {'content': 'test', 'important': True}
    ---
    POST /api/notes 200 1.3ms [a1b2c3d4]

The middleware is an observer only: the body it reads is replayed to the
downstream handler unchanged.
"""

import json
import logging
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notes_api.middleware.request_id import request_id_var

logger = logging.getLogger("notes_api.access")


async def parsed_body(request: Request) -> Any:
    """
    Returns the request body the way a JSON body parser would see it.

    Empty or non-JSON bodies log as {}; a JSON body that fails to parse logs
    as its raw text so the malformed payload is still visible.
    """
    raw = await request.body()
    if not raw or "json" not in request.headers.get("content-type", ""):
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path and body of each request, then status and duration.

    Log level of the access line follows the status class:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        logger.info("Method: %s", method)
        logger.info("Path:   %s", path)
        logger.info("Body:   %s", await parsed_body(request))
        logger.info("---")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s]",
            method,
            path,
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
