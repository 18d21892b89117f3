"""
Notes API — Static Asset Fallback Middleware
=============================================

What:  Serves prebuilt front-end files before requests reach the API routes.
How:   For GET/HEAD requests, maps the URL path onto the configured assets
       directory; an existing file is returned with FileResponse, a
       directory is answered with its index.html. Anything else falls
       through to the routes untouched.
When:  Innermost middleware, directly in front of route dispatch.

Path Safety:
    The resolved target must stay inside the assets directory, so
    `/../../etc/passwd`-style paths always fall through to the routes.
"""

import logging
from pathlib import Path
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import FileResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class StaticFilesMiddleware(BaseHTTPMiddleware):
    """
    Answers GET/HEAD requests from a directory of static files.

    A missing assets directory is not an error: the middleware then passes
    every request through, so the API works without a front-end build.
    """

    SERVED_METHODS = {"GET", "HEAD"}
    INDEX_FILE = "index.html"

    def __init__(self, app: ASGIApp, directory: str = "dist"):
        super().__init__(app)
        self.directory = Path(directory).resolve()

    def lookup(self, url_path: str) -> Optional[Path]:
        """
        Returns the file that serves `url_path`, or None.

        Paths the filesystem cannot represent (e.g. an embedded NUL byte)
        are treated as misses.
        """
        try:
            if not self.directory.is_dir():
                return None

            candidate = (self.directory / url_path.lstrip("/")).resolve()
            if candidate != self.directory and self.directory not in candidate.parents:
                logger.warning("Rejected static path outside assets dir: %s", url_path)
                return None

            if candidate.is_dir():
                candidate = candidate / self.INDEX_FILE
            return candidate if candidate.is_file() else None
        except (OSError, ValueError) as e:
            logger.debug("Static lookup failed for %r: %s", url_path, e)
            return None

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method in self.SERVED_METHODS:
            target = self.lookup(request.url.path)
            if target is not None:
                logger.debug("Serving static file %s", target)
                return FileResponse(path=str(target))

        return await call_next(request)
