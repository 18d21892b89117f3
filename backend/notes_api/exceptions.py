"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the few ways a request can fail.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       turn them into the response each one maps to.
Who:   Raised by the note store and by the validation translation layer;
       caught by the global handlers.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError     → 400 {"error": message}
    ├── NotFoundError       → 404, empty body
    └── UnknownRouteError   → 404 {"error": "unknown endpoint"}
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  Client-facing error description
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a create request does not carry a usable note.

    When:    `content` missing or empty, wrong field types, unknown fields,
             body that is not JSON.
    HTTP:    400 Bad Request

    Example response:
        {"error": "content missing"}
    """

    def __init__(
        self,
        message: str = "content missing",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesAPIError):
    """
    Raised when a note id lookup misses.

    When:    GET /api/notes/{id} with an id not in the store.
    HTTP:    404 Not Found with an empty body.
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class UnknownRouteError(NotesAPIError):
    """
    Raised when no method + path pair matches the request.

    HTTP:    404 Not Found, body {"error": "unknown endpoint"}.
    Note:    A known path with an unsupported method lands here too.
    """

    def __init__(
        self,
        method: str = "",
        path: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if method:
            ctx["method"] = method
        if path:
            ctx["path"] = path
        super().__init__(message="unknown endpoint", context=ctx)
