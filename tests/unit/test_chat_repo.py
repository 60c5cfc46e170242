"""Unit tests for ChatRepository."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.chat_message import ChatMessage
from app.repositories.chat_repo import HISTORY_LIMIT, ChatRepository


@pytest.fixture
def chat_repo(db_session: AsyncSession) -> ChatRepository:
    """Create a ChatRepository backed by the test DB session."""
    return ChatRepository(db_session)


class TestCreateMessage:
    """Tests for ChatRepository.create_message."""

    async def test_persists_turn(self, chat_repo: ChatRepository) -> None:
        record = await chat_repo.create_message(
            session_id="s-1", message="what is a queue?", response="chai line"
        )
        assert record.id is not None
        assert record.session_id == "s-1"
        assert record.timestamp is not None


class TestFindBySessionId:
    """Tests for ChatRepository.find_by_session_id."""

    async def test_unknown_session_is_empty(self, chat_repo: ChatRepository) -> None:
        assert await chat_repo.find_by_session_id("missing") == []

    async def test_only_requested_session(self, chat_repo: ChatRepository) -> None:
        await chat_repo.create_message("a", "m1", "r1")
        await chat_repo.create_message("b", "m2", "r2")
        records = await chat_repo.find_by_session_id("a")
        assert [r.message for r in records] == ["m1"]

    async def test_ordered_oldest_first(
        self, chat_repo: ChatRepository, db_session: AsyncSession
    ) -> None:
        base = datetime(2024, 1, 1, tzinfo=UTC)
        for offset, text in ((2, "third"), (0, "first"), (1, "second")):
            db_session.add(
                ChatMessage(
                    session_id="s",
                    message=text,
                    response="r",
                    timestamp=base + timedelta(minutes=offset),
                )
            )
        await db_session.flush()

        records = await chat_repo.find_by_session_id("s")
        assert [r.message for r in records] == ["first", "second", "third"]

    async def test_capped_at_limit(
        self, chat_repo: ChatRepository, db_session: AsyncSession
    ) -> None:
        base = datetime(2024, 1, 1, tzinfo=UTC)
        db_session.add_all(
            ChatMessage(
                session_id="busy",
                message=f"m{i}",
                response="r",
                timestamp=base + timedelta(seconds=i),
            )
            for i in range(HISTORY_LIMIT + 5)
        )
        await db_session.flush()

        records = await chat_repo.find_by_session_id("busy")
        assert len(records) == HISTORY_LIMIT
        assert records[0].message == "m0"
