"""
Notes API — In-Memory Note Store
=================================

What:  Holds the note collection for the lifetime of one application instance.
How:   A plain list of `Note` models plus a lock; every operation is a
       linear scan over the list.
Who:   Created by the application factory, injected into route handlers.

Id Scheme:
    A new note gets str(max(numeric ids) + 1), or "1" when the store is empty.
    Deleting the note with the highest id means the next note reuses that id.

Thread Safety:
    The read-max/append sequence of create() and the filter/reassign of
    delete() both run under `self._lock`, so two creations can never
    observe the same maximum id.
"""

import logging
import threading
from typing import Iterable, List, Optional

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.schemas.note import Note

logger = logging.getLogger(__name__)


# Demo data loaded into every freshly built application instance
SEED_NOTES = (
    {"id": "1", "content": "HTML is easy", "important": True},
    {"id": "2", "content": "Browser can execute only JavaScript", "important": False},
    {
        "id": "3",
        "content": "GET and POST are the most important methods of HTTP protocol",
        "important": True,
    },
)


def seed_notes() -> List[Note]:
    """Returns fresh copies of the three demo notes."""
    return [Note(**data) for data in SEED_NOTES]


class NoteStore:
    """
    In-memory collection of notes.

    Responsibilities:
        - list():   all notes in insertion order
        - get():    exact id lookup, NotFoundError on miss
        - create(): validate, assign the next id, append
        - delete(): remove by id, silent no-op on miss
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._lock = threading.Lock()
        self._notes: List[Note] = list(notes or [])

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)

    def reset(self, notes: Optional[Iterable[Note]] = None) -> None:
        """Replaces the whole collection (empty when `notes` is None)."""
        with self._lock:
            self._notes = list(notes or [])
        logger.debug("Store reset with %d notes", len(self._notes))

    def list(self) -> List[Note]:
        """Returns a snapshot of all notes in insertion order."""
        with self._lock:
            return list(self._notes)

    def get(self, note_id: str) -> Note:
        """
        Looks up a note by exact id.

        Raises:
            NotFoundError: No note carries `note_id`
        """
        with self._lock:
            for note in self._notes:
                if note.id == note_id:
                    return note
        raise NotFoundError(resource="note", resource_id=note_id)

    def next_id(self) -> str:
        """Id the next created note would receive."""
        with self._lock:
            return self._next_id_locked()

    def _next_id_locked(self) -> str:
        # Caller must hold self._lock
        max_id = max((int(note.id) for note in self._notes), default=0)
        return str(max_id + 1)

    def create(self, content: Optional[str], important: Optional[bool] = None) -> Note:
        """
        Adds a new note and returns it.

        Args:
            content: Note text; must be a non-empty string
            important: Optional flag; None and False both store False

        Raises:
            ValidationError: `content` is missing or empty
        """
        if not content:
            raise ValidationError(message="content missing", field="content")

        with self._lock:
            note = Note(
                id=self._next_id_locked(),
                content=content,
                important=bool(important),
            )
            self._notes.append(note)

        logger.info("Note %s created (important=%s)", note.id, note.important)
        return note

    def delete(self, note_id: str) -> None:
        """Removes the note with `note_id`; does nothing if there is none."""
        with self._lock:
            before = len(self._notes)
            self._notes = [note for note in self._notes if note.id != note_id]
            removed = before - len(self._notes)

        if removed:
            logger.info("Note %s deleted", note_id)
        else:
            logger.debug("Delete of unknown note %s ignored", note_id)
