"""
Notes API — Notes Route Handlers
=================================

What:  The REST surface of the note collection.
How:   Each handler receives the application's NoteStore through
       Depends(get_note_store) and maps one store operation onto HTTP.

Endpoints:
    GET    /api/notes        → 200, list of notes (HEAD on the read routes too)
    GET    /api/notes/{id}   → 200 note | 404 empty body
    POST   /api/notes        → 200 created note | 400 {"error": ...}
    DELETE /api/notes/{id}   → 204 empty body, whether or not the note existed
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from notes_api.dependencies import get_note_store
from notes_api.schemas.note import ErrorResponse, Note, NoteCreate
from notes_api.services.note_store import NoteStore

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])

# Read routes answer HEAD as well as GET
READ_METHODS = ["GET", "HEAD"]


@router.api_route(
    "/notes",
    methods=READ_METHODS,
    response_model=List[Note],
    summary="List all notes",
    description="Returns every note in insertion order. No pagination or filtering.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[Note]:
    return store.list()


@router.api_route(
    "/notes/{note_id}",
    methods=READ_METHODS,
    response_model=Note,
    responses={
        200: {"description": "The note", "model": Note},
        404: {"description": "No note with this id (empty body)"},
    },
    summary="Get a single note by id",
)
async def get_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> Note:
    """
    Get one note.

    A miss raises NotFoundError inside the store; the global handler turns
    it into a bare 404.
    """
    return store.get(note_id)


@router.post(
    "/notes",
    response_model=Note,
    responses={
        200: {"description": "The created note", "model": Note},
        400: {"description": "Invalid note body", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from {content, important?}. The id is assigned by the "
        "server as one more than the highest existing id."
    ),
)
async def create_note(
    payload: NoteCreate,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    """
    Create a note.

    Body validation happens before this handler runs: a missing or empty
    `content` never reaches the store and is answered with
    400 {"error": "content missing"} by the validation error handler.
    """
    return store.create(content=payload.content, important=payload.important)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Removes the note if present. Deleting an unknown id is not an error.",
)
async def delete_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> Response:
    store.delete(note_id)
    return Response(status_code=204)
