"""Chat request and response schemas."""

import html
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_MESSAGE_LENGTH = 500
SESSION_ID_MAX_LENGTH = 36


class ChatRequest(BaseModel):
    """Chat API request schema.

    The message is trimmed, length-checked, then HTML-escaped. A supplied
    session id must parse as a UUID but is kept exactly as sent, so history
    lookups under the same text find the turn.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)
    session_id: str | None = Field(default=None, max_length=SESSION_ID_MAX_LENGTH)

    @field_validator("message")
    @classmethod
    def escape_message(cls, v: str) -> str:
        return html.escape(v)

    @field_validator("session_id")
    @classmethod
    def check_session_id(cls, v: str | None) -> str | None:
        if v is not None:
            UUID(v)
        return v


class ChatResponse(BaseModel):
    """Chat API response schema."""

    model_config = ConfigDict(frozen=True)

    response: str
    session_id: str


class ChatRecordResponse(BaseModel):
    """One stored chat turn."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    session_id: str
    message: str
    response: str
    timestamp: datetime
