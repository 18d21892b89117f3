"""
Notes API — Hello World Server
===============================

What:  The smallest possible server: every request, whatever its method or
       path, gets 200 text/plain "Hello World".
Who:   Started with the `notes-api-hello` console script; shares the
       PORT/HOST settings of the Note Service.

The catch-all is a plain Starlette route registered without a method list,
so TRACE, PROPFIND and any other verb are answered too.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from starlette.requests import Request

from notes_api.config import settings

logger = logging.getLogger(__name__)

HELLO_TEXT = "Hello World"


async def hello(request: Request) -> PlainTextResponse:
    return PlainTextResponse(HELLO_TEXT)


def create_hello_app() -> FastAPI:
    """Builds the catch-all Hello World application."""
    app = FastAPI(
        title="Hello World",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    # methods=None: the route matches every HTTP method
    app.add_route("/{path:path}", hello, methods=None, include_in_schema=False)
    return app


def run() -> None:
    """Console entry point: serve the Hello World app with uvicorn."""
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(create_hello_app(), host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())
