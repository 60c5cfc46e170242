"""Chat repository for message database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.chat_message import ChatMessage

HISTORY_LIMIT = 100


class ChatRepository:
    """Encapsulates chat message queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_message(
        self,
        session_id: str,
        message: str,
        response: str,
    ) -> ChatMessage:
        """Persist one chat turn."""
        record = ChatMessage(
            session_id=session_id,
            message=message,
            response=response,
        )
        self._session.add(record)
        await self._session.flush()
        await self._session.refresh(record)
        return record

    async def find_by_session_id(
        self, session_id: str, limit: int = HISTORY_LIMIT
    ) -> list[ChatMessage]:
        """Turns of a conversation, oldest first, at most ``limit`` rows."""
        result = await self._session.execute(
            select(ChatMessage)
            .where(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
            .limit(limit)
        )
        return list(result.scalars().all())
