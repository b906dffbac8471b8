"""
Read-only projections of the session state for the rendering layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .models import Mode, Note, NoteId, SessionState, Theme, find_note


SNIPPET_LENGTH = 30
UNTITLED_LABEL = "(Untitled)"


@dataclass
class SidebarItem:
    note_id: NoteId
    label: str
    snippet: str
    selected: bool


@dataclass
class PanelView:
    """
    What the main panel should show.

    ``kind`` is one of "loading", "error", "editor", "note" or "welcome".
    """

    kind: str
    note: Optional[Note] = None
    message: str = ""
    submit_label: str = ""
    can_resume: bool = False


def snippet(content: str, length: int = SNIPPET_LENGTH) -> str:
    content = content or ""
    if len(content) > length:
        return content[:length] + "..."
    return content


def sidebar_items(state: SessionState) -> List[SidebarItem]:
    return [
        SidebarItem(
            note_id=note.id,
            label=note.title or UNTITLED_LABEL,
            snippet=snippet(note.content),
            selected=note.id == state.selected_id,
        )
        for note in state.notes
    ]


def main_panel(state: SessionState) -> PanelView:
    if state.mode is Mode.LOADING:
        return PanelView(kind="loading", message="Loading...")
    if state.mode is Mode.ERROR:
        return PanelView(kind="error", message=state.error, can_resume=state.drafting)
    if state.mode is Mode.EDITING:
        label = "Save Changes" if state.selected_id is not None else "Create Note"
        return PanelView(kind="editor", submit_label=label)

    note = find_note(state, state.selected_id)
    if note is None:
        return PanelView(
            kind="welcome",
            message="Select a note on the left or create a new note.",
        )
    return PanelView(kind="note", note=note)


def theme_toggle_label(theme: Theme) -> str:
    return "🌙 Dark" if theme is Theme.LIGHT else "☀️ Light"


__all__ = [
    "SidebarItem",
    "PanelView",
    "snippet",
    "sidebar_items",
    "main_panel",
    "theme_toggle_label",
]
