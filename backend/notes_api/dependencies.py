"""
Notes API — FastAPI Dependencies
=================================

What:  Dependency providers shared by route handlers.
How:   Each provider reads per-application state set up by create_app(),
       so two application instances never share a note collection.
"""

from fastapi import Request

from notes_api.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store owned by the current application.

    Usage in routes:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            ...
    """
    return request.app.state.note_store
