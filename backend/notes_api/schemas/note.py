"""
Notes API — Pydantic Note Schemas
==================================

What:  Pydantic models defining the API contract between front-end and backend.
How:   FastAPI validates request bodies against `NoteCreate` and serializes
       responses through `Note`; OpenAPI docs are generated from both.
Who:   Used by the note store (as its record type) and by route handlers.

Wire shape of a note (field order is preserved in JSON output):
    {"id": "4", "content": "test", "important": true}
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Domain / Response Models
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """
    What:  A single note held in the in-memory store.
    Who:   Returned by every note endpoint.

    `id` is always server-assigned: the string form of a positive integer.
    """
    id: str = Field(description="Server-assigned identifier (stringified integer)")
    content: str = Field(description="Note text")
    important: bool = Field(default=False, description="Whether the note is flagged important")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Validated body of POST /api/notes.

    Rules:
        - content: required, non-empty string
        - important: optional JSON boolean (no "yes"/1/"true" coercion);
          omitted, null and false all mean false
        - any other key (including a client-supplied `id`) is rejected
    """
    content: str = Field(min_length=1, description="Note text (non-empty)")
    important: bool = Field(default=False, strict=True, description="Flag the note as important")

    model_config = {"extra": "forbid"}

    @field_validator("important", mode="before")
    @classmethod
    def null_means_false(cls, v: Any) -> Any:
        """Treats an explicit JSON null like an omitted flag."""
        return False if v is None else v


# ══════════════════════════════════════════════════════════════════════════
# Error Response Model
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Body of every structured error response.

    Example:
        {"error": "content missing"}
    """
    error: str = Field(description="Human-readable error description")
