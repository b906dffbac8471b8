"""
Streamlit frontend for the Simple Notes app.

Renders the sidebar note list and the main panel from the session
controller. All state lives in the controller stored in st.session_state.
"""

from __future__ import annotations

import datetime as dt
import html
import logging
from typing import Any, Callable, Optional, Tuple

import streamlit as st

from notes_client import NotesApiClient, NotesController, SessionBusyError, Theme
from notes_client.config import get_settings
from notes_client.models import TITLE_MAX_LENGTH, Note
from notes_client.views import main_panel, sidebar_items, theme_toggle_label


THEME_COLORS = {
    Theme.LIGHT: {"background": "#ffffff", "surface": "#f5f6f8", "text": "#1f2328"},
    Theme.DARK: {"background": "#16181d", "surface": "#1f232b", "text": "#e6e6e6"},
}


def inject_styles(theme: Theme) -> None:
    colors = THEME_COLORS[theme]
    st.markdown(
        f"""
        <style>
        .stApp {{
            background-color: {colors["background"]};
            color: {colors["text"]};
        }}
        section[data-testid="stSidebar"] {{
            background-color: {colors["surface"]};
        }}
        .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{
            color: {colors["text"]};
        }}
        .note-content {{
            white-space: pre-wrap;
            font-family: inherit;
        }}
        /* Flash message styling with fade-out animation */
        .flash-message {{
            padding: 0.9rem 1.2rem;
            border-radius: 0.75rem;
            margin-bottom: 1.5rem;
            font-weight: 500;
            animation: flash-fade 10s forwards;
        }}
        .flash-success {{
            background-color: rgba(46, 204, 113, 0.2);
            color: #2ecc71;
        }}
        .flash-warning {{
            background-color: rgba(231, 76, 60, 0.2);
            color: #e74c3c;
        }}
        @keyframes flash-fade {{
            0%, 90% {{ opacity: 1; }}
            100% {{ opacity: 0; display: none; }}
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def confirm_from_session(note: Note) -> bool:
    """Deletion is confirmed when the user pressed "Yes, delete" for this note."""
    return st.session_state.get("confirm_delete_id") == note.id


def ensure_session_defaults() -> None:
    defaults = {
        "controller": None,
        "confirm_delete_id": None,
        "flash": None,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(key, value)


def get_controller() -> NotesController:
    controller = st.session_state["controller"]
    if controller is None:
        controller = NotesController(NotesApiClient(), confirm_delete=confirm_from_session)
        st.session_state["controller"] = controller
        with st.spinner("Loading..."):
            controller.start()
    return controller


def set_flash(level: str, message: str) -> None:
    st.session_state["flash"] = (level, message)


def pop_flash() -> Optional[Tuple[str, str]]:
    flash = st.session_state.get("flash")
    st.session_state["flash"] = None
    return flash


def display_flash() -> None:
    flash = pop_flash()
    if not flash:
        return

    level, message = flash
    css_class = {
        "success": "flash-success",
        "warning": "flash-warning",
    }.get(level, "flash-success")
    st.markdown(
        f"<div class='flash-message {css_class}'>{message}</div>",
        unsafe_allow_html=True,
    )


def dispatch(
    action: Callable[[], Any],
    busy_text: Optional[str] = None,
    success: Optional[str] = None,
) -> None:
    """Run a controller action and rerun the script to show the new state."""
    try:
        if busy_text:
            with st.spinner(busy_text):
                result = action()
        else:
            result = action()
        if success and result:
            set_flash("success", success)
    except SessionBusyError as exc:
        set_flash("warning", str(exc))
    st.rerun()


def render_header(controller: NotesController) -> None:
    header_cols = st.columns([6, 1])
    with header_cols[-1]:
        theme = controller.state.theme
        next_theme = Theme.DARK if theme is Theme.LIGHT else Theme.LIGHT
        if st.button(
            theme_toggle_label(theme),
            key="theme_toggle",
            help=f"Switch to {next_theme.value} mode",
            use_container_width=True,
        ):
            controller.toggle_theme()
            st.rerun()


def render_sidebar(controller: NotesController) -> None:
    state = controller.state
    with st.sidebar:
        st.title("Simple Notes")
        if st.button("+ New Note", key="new_note", type="primary", use_container_width=True):
            st.session_state["confirm_delete_id"] = None
            dispatch(controller.begin_create)

        items = sidebar_items(state)
        if not items:
            st.caption("No notes")
        for item in items:
            if st.button(
                item.label,
                key=f"select_{item.note_id}",
                type="primary" if item.selected else "secondary",
                use_container_width=True,
            ):
                st.session_state["confirm_delete_id"] = None
                dispatch(lambda note_id=item.note_id: controller.select_note(note_id))
            if item.snippet:
                st.caption(item.snippet)


def render_editor(controller: NotesController, submit_label: str) -> None:
    state = controller.state
    with st.form("note_form"):
        title = st.text_input(
            "Title",
            value=state.draft_title,
            max_chars=TITLE_MAX_LENGTH,
            placeholder="Note Title",
        )
        content = st.text_area(
            "Content",
            value=state.draft_content,
            placeholder="Note Content",
            height=240,
        )
        cols = st.columns([1, 1, 4])
        submitted = cols[0].form_submit_button(submit_label, type="primary")
        cancelled = cols[1].form_submit_button("Cancel")

    if submitted:
        controller.update_draft(title=title, content=content)
        dispatch(controller.save, busy_text="Saving...", success="Note saved.")
    if cancelled:
        dispatch(controller.cancel_edit)


def render_note(controller: NotesController, note: Note) -> None:
    st.header(note.title)
    if note.content:
        st.markdown(
            f"<pre class='note-content'>{html.escape(note.content)}</pre>",
            unsafe_allow_html=True,
        )
    else:
        st.caption("(No content)")

    cols = st.columns([1, 1, 1, 3])
    if cols[0].button("Edit", key="edit_note", type="primary"):
        st.session_state["confirm_delete_id"] = None
        dispatch(controller.begin_edit)
    if cols[1].button("Refresh", key="refresh_note"):
        dispatch(lambda: controller.load_one(note.id), busy_text="Loading...")
    if cols[2].button("Delete", key="delete_note"):
        st.session_state["confirm_delete_id"] = note.id
        st.rerun()

    if st.session_state.get("confirm_delete_id") == note.id:
        st.warning("Are you sure you want to delete this note?")
        confirm_cols = st.columns([1, 1, 4])
        if confirm_cols[0].button("Yes, delete", key="confirm_delete_yes"):
            try:
                with st.spinner("Deleting..."):
                    deleted = controller.delete()
                if deleted:
                    set_flash("success", "Note deleted.")
            except SessionBusyError as exc:
                set_flash("warning", str(exc))
            finally:
                st.session_state["confirm_delete_id"] = None
            st.rerun()
        if confirm_cols[1].button("No, keep it", key="confirm_delete_no"):
            st.session_state["confirm_delete_id"] = None
            st.rerun()


def render_main_panel(controller: NotesController) -> None:
    view = main_panel(controller.state)

    if view.kind == "loading":
        st.info(view.message)
    elif view.kind == "error":
        st.error(view.message)
        cols = st.columns([1, 1, 4])
        if view.can_resume and cols[0].button("Back to editor", key="resume_edit"):
            dispatch(controller.resume_edit)
        if cols[1].button("Reload notes", key="reload_notes"):
            dispatch(controller.load_all, busy_text="Loading...")
    elif view.kind == "editor":
        render_editor(controller, view.submit_label)
    elif view.kind == "note" and view.note is not None:
        render_note(controller, view.note)
    else:
        st.header("Welcome!")
        st.write(view.message)


def render_footer() -> None:
    st.divider()
    st.caption(
        f"Simple Notes App © {dt.date.today().year} · Minimal, fast, and yours."
    )


def main():
    st.set_page_config(page_title="Simple Notes", page_icon="📝", layout="wide")
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ensure_session_defaults()

    controller = get_controller()
    inject_styles(controller.state.theme)
    display_flash()

    render_header(controller)
    render_sidebar(controller)
    render_main_panel(controller)
    render_footer()


if __name__ == "__main__":
    main()
