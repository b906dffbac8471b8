from notes_client.models import Mode, Note, SessionState, Theme
from notes_client.views import main_panel, sidebar_items, snippet, theme_toggle_label


NOTES = [
    Note(id=1, title="Groceries", content="eggs, milk, bread, butter, cheese, apples"),
    Note(id=2, title="", content="short"),
]


def test_sidebar_items_label_snippet_and_selection():
    items = sidebar_items(SessionState(notes=NOTES, selected_id=2))

    assert [item.label for item in items] == ["Groceries", "(Untitled)"]
    assert items[0].snippet == "eggs, milk, bread, butter, che..."
    assert items[1].snippet == "short"
    assert [item.selected for item in items] == [False, True]


def test_snippet_exact_length_has_no_ellipsis():
    assert snippet("x" * 30) == "x" * 30
    assert snippet("") == ""


def test_panel_priority():
    assert main_panel(SessionState(mode=Mode.LOADING)).kind == "loading"
    error = main_panel(SessionState(mode=Mode.ERROR, error="Failed to load notes."))
    assert (error.kind, error.message, error.can_resume) == (
        "error",
        "Failed to load notes.",
        False,
    )


def test_error_panel_offers_resume_with_open_draft():
    view = main_panel(SessionState(mode=Mode.ERROR, error="x", drafting=True))

    assert view.can_resume


def test_editor_submit_label():
    editing = SessionState(notes=NOTES, selected_id=1, mode=Mode.EDITING, drafting=True)
    creating = SessionState(notes=NOTES, mode=Mode.EDITING, drafting=True)

    assert main_panel(editing).submit_label == "Save Changes"
    assert main_panel(creating).submit_label == "Create Note"


def test_viewing_selected_note():
    view = main_panel(SessionState(notes=NOTES, selected_id=1))

    assert view.kind == "note"
    assert view.note.title == "Groceries"


def test_dangling_selection_shows_welcome():
    assert main_panel(SessionState(notes=NOTES, selected_id=7)).kind == "welcome"
    assert main_panel(SessionState()).kind == "welcome"


def test_theme_toggle_label():
    assert theme_toggle_label(Theme.LIGHT) == "🌙 Dark"
    assert theme_toggle_label(Theme.DARK) == "☀️ Light"
