"""
Data model for the notes client session.
"""

from __future__ import annotations

import enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


TITLE_MAX_LENGTH = 120

NoteId = Union[int, str]


class Mode(str, enum.Enum):
    VIEWING = "viewing"
    EDITING = "editing"
    LOADING = "loading"
    ERROR = "error"


class Theme(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"


class Note(BaseModel):
    """A note as returned by the API. Extra fields are ignored."""

    id: NoteId
    title: str = ""
    content: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "content", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class SessionState(BaseModel):
    """
    Everything the client knows about the current session.

    ``drafting`` is true while a create/edit form is open, including when a
    failed save has switched the mode to ERROR and the draft is kept around
    for a retry.
    """

    notes: List[Note] = Field(default_factory=list)
    selected_id: Optional[NoteId] = None
    mode: Mode = Mode.VIEWING
    error: str = ""
    draft_title: str = ""
    draft_content: str = ""
    drafting: bool = False
    theme: Theme = Theme.LIGHT


def find_note(state: SessionState, note_id: Optional[NoteId]) -> Optional[Note]:
    """Look up a note in the session by id; ``None`` for a missing or stale id."""
    if note_id is None:
        return None
    for note in state.notes:
        if note.id == note_id:
            return note
    return None


__all__ = [
    "TITLE_MAX_LENGTH",
    "NoteId",
    "Mode",
    "Theme",
    "Note",
    "SessionState",
    "find_note",
]
