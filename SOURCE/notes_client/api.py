"""
HTTP client for the notes REST API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .config import get_settings
from .errors import NotesApiError
from .models import Note, NoteId


logger = logging.getLogger(__name__)


def _ensure_json_response(response: requests.Response) -> Any:
    if not 200 <= response.status_code < 300:
        raise NotesApiError(
            f"Request to {response.url} returned {response.status_code}",
            status_code=response.status_code,
        )

    if not response.content:
        return None

    try:
        return response.json()
    except ValueError as exc:
        raise NotesApiError(
            f"Invalid JSON response: {exc}. Body: {response.text!r}",
            status_code=response.status_code,
        ) from exc


def _parse_note(data: Any) -> Note:
    try:
        return Note.model_validate(data)
    except ValidationError as exc:
        raise NotesApiError(f"Malformed note in response: {exc}") from exc


def _note_path(note_id: NoteId) -> str:
    return f"/notes/{quote(str(note_id), safe='')}"


class NotesApiClient:
    """
    Thin wrapper around the notes endpoints.

    Every failure, whether the request never completed, the status was not
    2xx or the body could not be decoded, is raised as NotesApiError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._session = session or requests.Session()

    def api_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = {"Accept": "application/json"}
        if payload is not None:
            headers["Content-Type"] = "application/json"
        url = self.api_url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method, url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise NotesApiError(f"{method} {url} failed: {exc}") from exc
        return _ensure_json_response(response)

    def list_notes(self) -> List[Note]:
        data = self._request("GET", "/notes")
        if not isinstance(data, list):
            raise NotesApiError(f"Expected a list of notes, got {type(data).__name__}")
        return [_parse_note(item) for item in data]

    def get_note(self, note_id: NoteId) -> Note:
        return _parse_note(self._request("GET", _note_path(note_id)))

    def create_note(self, title: str, content: str) -> Note:
        data = self._request("POST", "/notes", {"title": title, "content": content})
        return _parse_note(data)

    def update_note(self, note_id: NoteId, title: str, content: str) -> Note:
        data = self._request(
            "PUT", _note_path(note_id), {"title": title, "content": content}
        )
        return _parse_note(data)

    def delete_note(self, note_id: NoteId) -> None:
        self._request("DELETE", _note_path(note_id))


__all__ = ["NotesApiClient"]
