"""
Pure state transitions for the notes session.

Every function takes a SessionState and returns a new one; nothing here
performs I/O. The controller decides which transition to apply once a
request has finished.
"""

from __future__ import annotations

from typing import List, Optional

from .models import (
    TITLE_MAX_LENGTH,
    Mode,
    Note,
    NoteId,
    SessionState,
    Theme,
    find_note,
)


_CLEARED_DRAFT = {"draft_title": "", "draft_content": "", "drafting": False}


def begin_loading(state: SessionState) -> SessionState:
    return state.model_copy(update={"mode": Mode.LOADING, "error": ""})


def fail(state: SessionState, message: str) -> SessionState:
    """Switch to the error view. Drafts are kept so a failed save can be retried."""
    return state.model_copy(update={"mode": Mode.ERROR, "error": message})


def notes_loaded(state: SessionState, notes: List[Note]) -> SessionState:
    selected_id = state.selected_id
    if selected_id is None and notes:
        selected_id = notes[0].id
    return state.model_copy(
        update={
            "notes": list(notes),
            "selected_id": selected_id,
            "mode": Mode.VIEWING,
            "error": "",
            **_CLEARED_DRAFT,
        }
    )


def note_fetched(state: SessionState, note: Note) -> SessionState:
    """Prime the drafts from a freshly fetched note and refresh its list entry."""
    notes = [note if existing.id == note.id else existing for existing in state.notes]
    return state.model_copy(
        update={
            "notes": notes,
            "selected_id": note.id,
            "draft_title": note.title,
            "draft_content": note.content,
            "drafting": False,
            "mode": Mode.VIEWING,
            "error": "",
        }
    )


def select_note(state: SessionState, note_id: Optional[NoteId]) -> SessionState:
    return state.model_copy(
        update={
            "selected_id": note_id,
            "mode": Mode.VIEWING,
            "error": "",
            **_CLEARED_DRAFT,
        }
    )


def begin_create(state: SessionState) -> SessionState:
    return state.model_copy(
        update={
            "selected_id": None,
            "mode": Mode.EDITING,
            "error": "",
            "draft_title": "",
            "draft_content": "",
            "drafting": True,
        }
    )


def begin_edit(state: SessionState) -> SessionState:
    note = find_note(state, state.selected_id)
    if note is None:
        return state
    return state.model_copy(
        update={
            "mode": Mode.EDITING,
            "error": "",
            "draft_title": note.title,
            "draft_content": note.content,
            "drafting": True,
        }
    )


def update_draft(
    state: SessionState,
    title: Optional[str] = None,
    content: Optional[str] = None,
) -> SessionState:
    if not state.drafting:
        return state
    update = {}
    if title is not None:
        update["draft_title"] = title[:TITLE_MAX_LENGTH]
    if content is not None:
        update["draft_content"] = content
    return state.model_copy(update=update)


def resume_edit(state: SessionState) -> SessionState:
    if not state.drafting or state.mode is not Mode.ERROR:
        return state
    return state.model_copy(update={"mode": Mode.EDITING, "error": ""})


def cancel_edit(state: SessionState) -> SessionState:
    return state.model_copy(
        update={"mode": Mode.VIEWING, "error": "", **_CLEARED_DRAFT}
    )


def is_editing_existing(state: SessionState) -> bool:
    """A draft opened with begin_edit keeps its selection; a create draft has none."""
    return state.drafting and state.selected_id is not None


def note_updated(state: SessionState, note: Note) -> SessionState:
    notes = [note if existing.id == note.id else existing for existing in state.notes]
    return state.model_copy(
        update={
            "notes": notes,
            "selected_id": note.id,
            "mode": Mode.VIEWING,
            "error": "",
            **_CLEARED_DRAFT,
        }
    )


def note_created(state: SessionState, note: Note) -> SessionState:
    return state.model_copy(
        update={
            "notes": [note, *state.notes],
            "selected_id": note.id,
            "mode": Mode.VIEWING,
            "error": "",
            **_CLEARED_DRAFT,
        }
    )


def note_deleted(state: SessionState, note_id: NoteId) -> SessionState:
    remaining = [note for note in state.notes if note.id != note_id]
    return state.model_copy(
        update={
            "notes": remaining,
            "selected_id": remaining[0].id if remaining else None,
            "mode": Mode.VIEWING,
            "error": "",
            **_CLEARED_DRAFT,
        }
    )


def toggle_theme(state: SessionState) -> SessionState:
    theme = Theme.DARK if state.theme is Theme.LIGHT else Theme.LIGHT
    return state.model_copy(update={"theme": theme})


__all__ = [
    "begin_loading",
    "fail",
    "notes_loaded",
    "note_fetched",
    "select_note",
    "begin_create",
    "begin_edit",
    "update_draft",
    "resume_edit",
    "cancel_edit",
    "is_editing_existing",
    "note_updated",
    "note_created",
    "note_deleted",
    "toggle_theme",
]
