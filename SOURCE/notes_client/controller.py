"""
Session controller that keeps local note state in sync with the notes API.

The controller owns a single SessionState. Local actions (select, new,
edit, cancel) apply a transition directly; remote actions switch the mode to
LOADING, call the API and then resolve to VIEWING or ERROR.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from . import transitions
from .api import NotesApiClient
from .errors import NotesApiError, SessionBusyError
from .models import Mode, Note, NoteId, SessionState, find_note


logger = logging.getLogger(__name__)

LOAD_ALL_FAILED = "Failed to load notes."
LOAD_ONE_FAILED = "Note not found."
UPDATE_FAILED = "Failed to update note."
CREATE_FAILED = "Failed to create note."
DELETE_FAILED = "Failed to delete note."
EMPTY_TITLE = "Title cannot be empty."
UNEXPECTED_FAILURE = "Something went wrong."

ConfirmDelete = Callable[[Note], bool]


class NotesController:
    """Single owner of the notes session state."""

    def __init__(
        self,
        api: NotesApiClient,
        confirm_delete: ConfirmDelete,
        state: Optional[SessionState] = None,
    ) -> None:
        self._api = api
        self._confirm_delete = confirm_delete
        self._state = state or SessionState()
        self._lock = threading.Lock()
        self._started = False

    @property
    def state(self) -> SessionState:
        return self._state.model_copy(deep=True)

    @property
    def selected_note(self) -> Optional[Note]:
        return find_note(self._state, self._state.selected_id)

    @contextmanager
    def _exclusive(self, action: str) -> Iterator[None]:
        """
        Run one action at a time.

        Raises SessionBusyError if another action holds the session. If the
        body leaves the mode at LOADING (an unexpected exception), the mode is
        resolved to ERROR before the exception propagates.
        """
        if not self._lock.acquire(blocking=False):
            raise SessionBusyError(f"Cannot {action} while another request is in flight")
        try:
            if self._state.mode is Mode.LOADING:
                raise SessionBusyError(f"Cannot {action} while notes are loading")
            try:
                yield
            finally:
                if self._state.mode is Mode.LOADING:
                    logger.error("%s ended without resolving the loading state", action)
                    self._state = transitions.fail(self._state, UNEXPECTED_FAILURE)
        finally:
            self._lock.release()

    def start(self) -> None:
        """Load the note list the first time the controller is used."""
        if self._started:
            return
        self._started = True
        self.load_all()

    def load_all(self) -> None:
        with self._exclusive("load notes"):
            self._state = transitions.begin_loading(self._state)
            try:
                notes = self._api.list_notes()
            except NotesApiError as exc:
                logger.warning("Loading notes failed: %s", exc)
                self._state = transitions.fail(self._state, LOAD_ALL_FAILED)
                return
            self._state = transitions.notes_loaded(self._state, notes)
            logger.info("Loaded %d notes", len(notes))

    def load_one(self, note_id: NoteId) -> None:
        """Fetch one note and prime the draft fields with its contents."""
        with self._exclusive("load note"):
            self._state = transitions.begin_loading(self._state)
            try:
                note = self._api.get_note(note_id)
            except NotesApiError as exc:
                logger.warning("Loading note %s failed: %s", note_id, exc)
                self._state = transitions.fail(self._state, LOAD_ONE_FAILED)
                return
            self._state = transitions.note_fetched(self._state, note)

    def select_note(self, note_id: Optional[NoteId]) -> None:
        with self._exclusive("select a note"):
            self._state = transitions.select_note(self._state, note_id)

    def begin_create(self) -> None:
        with self._exclusive("create a note"):
            self._state = transitions.begin_create(self._state)

    def begin_edit(self) -> None:
        with self._exclusive("edit a note"):
            self._state = transitions.begin_edit(self._state)

    def update_draft(
        self, title: Optional[str] = None, content: Optional[str] = None
    ) -> None:
        with self._exclusive("change the draft"):
            self._state = transitions.update_draft(self._state, title, content)

    def resume_edit(self) -> None:
        with self._exclusive("resume editing"):
            self._state = transitions.resume_edit(self._state)

    def cancel_edit(self) -> None:
        with self._exclusive("cancel editing"):
            self._state = transitions.cancel_edit(self._state)

    def save(self) -> bool:
        """
        Submit the open draft. Returns True when the server accepted it.

        A draft opened with begin_edit is sent as an update of the selected
        note, one opened with begin_create as a new note.
        """
        with self._exclusive("save the note"):
            state = self._state
            if not state.drafting or state.mode not in (Mode.EDITING, Mode.ERROR):
                logger.debug("save ignored, no open draft")
                return False
            if not state.draft_title.strip():
                self._state = transitions.fail(state, EMPTY_TITLE)
                return False

            editing = transitions.is_editing_existing(state)
            self._state = transitions.begin_loading(state)
            try:
                if editing:
                    note = self._api.update_note(
                        state.selected_id, state.draft_title, state.draft_content
                    )
                else:
                    note = self._api.create_note(state.draft_title, state.draft_content)
            except NotesApiError as exc:
                logger.warning(
                    "%s note failed: %s", "Updating" if editing else "Creating", exc
                )
                self._state = transitions.fail(
                    self._state, UPDATE_FAILED if editing else CREATE_FAILED
                )
                return False

            if editing:
                self._state = transitions.note_updated(self._state, note)
                logger.info("Updated note %s", note.id)
            else:
                self._state = transitions.note_created(self._state, note)
                logger.info("Created note %s", note.id)
            return True

    def delete(self) -> bool:
        """Delete the selected note after confirmation. Returns True if deleted."""
        with self._exclusive("delete the note"):
            note = find_note(self._state, self._state.selected_id)
            if note is None:
                return False
            if not self._confirm_delete(note):
                logger.debug("Delete of note %s declined", note.id)
                return False

            self._state = transitions.begin_loading(self._state)
            try:
                self._api.delete_note(note.id)
            except NotesApiError as exc:
                logger.warning("Deleting note %s failed: %s", note.id, exc)
                self._state = transitions.fail(self._state, DELETE_FAILED)
                return False
            self._state = transitions.note_deleted(self._state, note.id)
            logger.info("Deleted note %s", note.id)
            return True

    def toggle_theme(self) -> None:
        # theme is independent of the notes, so it is not blocked by a request
        self._state = transitions.toggle_theme(self._state)


__all__ = [
    "NotesController",
    "ConfirmDelete",
    "LOAD_ALL_FAILED",
    "LOAD_ONE_FAILED",
    "UPDATE_FAILED",
    "CREATE_FAILED",
    "DELETE_FAILED",
    "EMPTY_TITLE",
]
