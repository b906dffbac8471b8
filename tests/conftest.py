from typing import Dict, List, Optional

import pytest

from notes_client.controller import NotesController
from notes_client.errors import NotesApiError
from notes_client.models import Note, SessionState


class FakeNotesApi:
    """In-memory stand-in for NotesApiClient that records every call."""

    def __init__(self, notes: Optional[List[Dict]] = None):
        self.notes = [Note.model_validate(n) for n in notes or []]
        self.calls = []
        self.failing = set()
        self.next_id = 99

    def _check(self, operation):
        if operation in self.failing:
            raise NotesApiError(f"{operation} failed", status_code=500)

    def list_notes(self):
        self.calls.append(("list",))
        self._check("list")
        return list(self.notes)

    def get_note(self, note_id):
        self.calls.append(("get", note_id))
        self._check("get")
        for note in self.notes:
            if note.id == note_id:
                return note
        raise NotesApiError("not found", status_code=404)

    def create_note(self, title, content):
        self.calls.append(("create", title, content))
        self._check("create")
        note = Note(id=self.next_id, title=title, content=content)
        self.notes.insert(0, note)
        return note

    def update_note(self, note_id, title, content):
        self.calls.append(("update", note_id, title, content))
        self._check("update")
        note = Note(id=note_id, title=title, content=content)
        self.notes = [note if n.id == note_id else n for n in self.notes]
        return note

    def delete_note(self, note_id):
        self.calls.append(("delete", note_id))
        self._check("delete")
        self.notes = [n for n in self.notes if n.id != note_id]


def make_notes(*ids):
    return [{"id": i, "title": f"Note {i}", "content": f"Body {i}"} for i in ids]


@pytest.fixture
def fake_api():
    return FakeNotesApi(make_notes(1, 2, 3))


@pytest.fixture
def confirmations():
    """Answers handed to the delete confirmation, plus the notes it was asked about."""
    return {"answer": True, "asked": []}


@pytest.fixture
def make_controller(fake_api, confirmations):
    def _confirm(note):
        confirmations["asked"].append(note.id)
        return confirmations["answer"]

    def _make(state: Optional[SessionState] = None, api=None):
        return NotesController(api or fake_api, confirm_delete=_confirm, state=state)

    return _make


@pytest.fixture
def loaded_controller(make_controller):
    controller = make_controller()
    controller.start()
    return controller
