"""
Pydantic models for request and response validation.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import TITLE_MAX_LENGTH


class NoteCreateRequest(BaseModel):
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    content: str = ""


class NoteUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = None


class NoteResponse(BaseModel):
    id: int
    title: str
    content: str
    last_update: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "NoteCreateRequest",
    "NoteUpdateRequest",
    "NoteResponse",
]
