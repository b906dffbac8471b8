"""
API route definitions for the notes service.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from sqlalchemy import select

from .database import session_scope
from .models import Note
from .schemas import NoteCreateRequest, NoteResponse, NoteUpdateRequest


logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def parse_request(model_cls, payload: Optional[dict] = None):
    """Utility to build and validate Pydantic models from request JSON."""
    payload = payload or request.get_json(silent=True) or {}
    return model_cls.model_validate(payload)


def serialize_note(note: Note) -> Dict[str, Any]:
    return NoteResponse.model_validate(note).model_dump(mode="json")


def _not_found():
    return jsonify({"error": "not-found"}), 404


@api_bp.errorhandler(ValidationError)
def handle_validation_error(err: ValidationError):  # type: ignore[override]
    return (
        jsonify(
            {
                "error": "invalid-request",
                "details": err.errors(include_url=False, include_context=False),
            }
        ),
        400,
    )


@api_bp.route("/notes", methods=["GET"])
def list_notes():
    with session_scope() as session:
        notes = session.execute(select(Note).order_by(Note.id.desc())).scalars().all()
        return jsonify([serialize_note(note) for note in notes])


@api_bp.route("/notes/<int:note_id>", methods=["GET"])
def get_note(note_id: int):
    with session_scope() as session:
        note = session.get(Note, note_id)
        if note is None:
            return _not_found()
        return jsonify(serialize_note(note))


@api_bp.route("/notes", methods=["POST"])
def create_note():
    data = parse_request(NoteCreateRequest)
    with session_scope() as session:
        note = Note(title=data.title, content=data.content)
        session.add(note)
        session.flush()
        session.refresh(note)
        logger.info("Created note %s", note.id)
        return jsonify(serialize_note(note)), 201


@api_bp.route("/notes/<int:note_id>", methods=["PUT"])
def update_note(note_id: int):
    data = parse_request(NoteUpdateRequest)
    with session_scope() as session:
        note = session.get(Note, note_id)
        if note is None:
            return _not_found()
        if data.title is not None:
            note.title = data.title
        if data.content is not None:
            note.content = data.content
        session.flush()
        session.refresh(note)
        logger.info("Updated note %s", note_id)
        return jsonify(serialize_note(note)), 200


@api_bp.route("/notes/<int:note_id>", methods=["DELETE"])
def delete_note(note_id: int):
    with session_scope() as session:
        note = session.get(Note, note_id)
        if note is None:
            return _not_found()
        session.delete(note)
        logger.info("Deleted note %s", note_id)
        return jsonify({"status": "deleted"}), 200


__all__ = ["api_bp"]
