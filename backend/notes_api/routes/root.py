"""
Notes API — Root Route
=======================

What:  GET / answers with a fixed HTML greeting.

When the assets directory holds an index.html, the static-asset middleware
answers GET / first and this route is never reached.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Root"])

GREETING_HTML = "<h1>Hello World!</h1>"


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse, summary="HTML greeting")
async def root() -> HTMLResponse:
    return HTMLResponse(content=GREETING_HTML, status_code=200)
