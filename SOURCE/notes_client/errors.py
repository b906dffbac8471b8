"""
Exception types raised by the notes client.
"""

from __future__ import annotations

from typing import Optional


class NotesClientError(Exception):
    """Base class for all notes client errors."""


class NotesApiError(NotesClientError):
    """
    Raised when a call to the notes API does not succeed.

    Covers transport failures, non-2xx statuses and bodies that are not
    valid JSON. ``status_code`` is ``None`` when no response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SessionBusyError(NotesClientError):
    """Raised when an operation is issued while another one is in flight."""


__all__ = ["NotesClientError", "NotesApiError", "SessionBusyError"]
