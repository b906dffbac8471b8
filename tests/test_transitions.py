from notes_client import transitions
from notes_client.models import Mode, Note, SessionState, find_note


def _state(**kwargs):
    notes = [Note(id=i, title=f"Note {i}", content="") for i in (1, 2, 3)]
    return SessionState(notes=notes, **kwargs)


def test_transitions_do_not_mutate_input():
    state = _state(selected_id=2)

    transitions.note_deleted(state, 2)
    transitions.note_created(state, Note(id=9, title="x"))

    assert [n.id for n in state.notes] == [1, 2, 3]
    assert state.selected_id == 2


def test_note_deleted_picks_first_of_remaining():
    result = transitions.note_deleted(_state(selected_id=2), 2)

    assert [n.id for n in result.notes] == [1, 3]
    assert result.selected_id == 1


def test_note_updated_for_unknown_id_keeps_list():
    state = _state(selected_id=5, drafting=True, mode=Mode.LOADING)

    result = transitions.note_updated(state, Note(id=5, title="ghost"))

    assert [n.id for n in result.notes] == [1, 2, 3]
    assert result.mode is Mode.VIEWING


def test_fail_keeps_drafts():
    state = _state(mode=Mode.LOADING, draft_title="t", drafting=True)

    result = transitions.fail(state, "Failed to create note.")

    assert result.mode is Mode.ERROR
    assert result.draft_title == "t"
    assert result.drafting


def test_resume_edit_requires_open_draft():
    state = _state(mode=Mode.ERROR, error="Failed to load notes.")

    assert transitions.resume_edit(state) == state


def test_update_draft_ignored_without_draft():
    state = _state()

    assert transitions.update_draft(state, title="x") == state


def test_is_editing_existing():
    assert transitions.is_editing_existing(_state(selected_id=1, drafting=True))
    assert not transitions.is_editing_existing(_state(drafting=True))
    assert not transitions.is_editing_existing(_state(selected_id=1))


def test_find_note_handles_stale_and_missing_ids():
    state = _state()

    assert find_note(state, 2).title == "Note 2"
    assert find_note(state, 99) is None
    assert find_note(state, None) is None


def test_string_ids_are_kept_as_given():
    note = Note.model_validate({"id": "a1b2", "title": "x", "content": None, "extra": 1})

    assert note.id == "a1b2"
    assert note.content == ""


def test_session_state_serializes():
    state = _state(selected_id=1)

    restored = SessionState.model_validate(state.model_dump())

    assert restored == state
