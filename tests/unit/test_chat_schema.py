"""Tests for chat schemas."""

import uuid

import pytest
from pydantic import ValidationError

from app.schemas.chat_schema import MAX_MESSAGE_LENGTH, ChatRequest, ChatResponse


class TestChatRequest:
    """Tests for ChatRequest validation."""

    def test_message_is_trimmed(self) -> None:
        assert ChatRequest(message="  what is a stack?  ").message == "what is a stack?"

    def test_message_is_html_escaped(self) -> None:
        req = ChatRequest(message="<script>alert(1)</script>")
        assert req.message == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="")

    def test_whitespace_only_message_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="     ")

    def test_max_length_accepted(self) -> None:
        assert len(ChatRequest(message="a" * MAX_MESSAGE_LENGTH).message) == 500

    def test_over_max_length_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="a" * (MAX_MESSAGE_LENGTH + 1))

    def test_session_id_optional(self) -> None:
        assert ChatRequest(message="hi").session_id is None

    def test_session_id_kept_verbatim(self) -> None:
        sid = "6F9619FF-8B86-D011-B42D-00C04FC964FF"
        assert ChatRequest(message="hi", session_id=sid).session_id == sid

    def test_hyphen_free_session_id_kept(self) -> None:
        sid = uuid.uuid4().hex
        assert ChatRequest(message="hi", session_id=sid).session_id == sid

    def test_braced_session_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="hi", session_id="{" + str(uuid.uuid4()) + "}")

    def test_invalid_session_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="hi", session_id="not-a-uuid")


class TestChatResponse:
    """Tests for ChatResponse."""

    def test_frozen(self) -> None:
        resp = ChatResponse(response="Hello", session_id="abc")
        with pytest.raises(ValidationError):
            resp.response = "changed"  # type: ignore[misc]
