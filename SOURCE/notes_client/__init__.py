"""
Client side of the Simple Notes app.

Exposes the session controller and the API client so the Streamlit
frontend and scripts can build a session with a single import.
"""

from .api import NotesApiClient
from .controller import NotesController
from .errors import NotesApiError, NotesClientError, SessionBusyError
from .models import Mode, Note, SessionState, Theme

__all__ = [
    "NotesApiClient",
    "NotesController",
    "NotesApiError",
    "NotesClientError",
    "SessionBusyError",
    "Mode",
    "Note",
    "SessionState",
    "Theme",
]
