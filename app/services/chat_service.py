"""Chat pipeline: persona prompt, LLM completion with fallback, persistence."""

import uuid

import structlog
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import InternalError
from app.repositories.chat_repo import ChatRepository
from app.schemas.chat_schema import ChatRecordResponse, ChatRequest, ChatResponse
from app.services.completion_service import CompletionService
from app.services.fallback_responses import fallback_response

logger = structlog.get_logger()

SAVAGE_SYSTEM_PROMPT = """\
You are SuckDSA, the most brutally savage DSA teacher on the planet for Indian learners.

Your personality:
- Savage, witty, and brutally honest but never offensive to religion/caste/politics
- Use Indian masala - Bollywood references, cricket analogies, chai-samosa comparisons, "aunty-uncle" logic
- Educational at core - technically correct explanations simplified for beginners
- Roast examples: "chappal-level coder," "brain = Windows XP," "Laddu with zero compression"

Response Style:
1. Start with a roast -> slap them awake
2. Give a desi analogy -> Bollywood, cricket, daily life
3. Deliver clear DSA explanation -> super simple, memorable
4. End with savage one-liner -> make them laugh and remember

Keep responses under 200 words. Be savage but educational."""


def build_prompt(message: str) -> str:
    """Prefix the user's question with the persona instructions."""
    return f"{SAVAGE_SYSTEM_PROMPT}\n\nUser Question: {message}\n\nSavage Response:"


class ChatService:
    """Answers chat messages; AI outages degrade to canned replies, never errors."""

    def __init__(
        self,
        completion_service: CompletionService,
        chat_repo: ChatRepository,
    ) -> None:
        self._completion = completion_service
        self._chat_repo = chat_repo

    async def send_message(self, request: ChatRequest) -> ChatResponse:
        """Answer one message and record the turn under its session."""
        session_id = request.session_id or str(uuid.uuid4())

        result = await self._completion.complete(build_prompt(request.message))
        if result.succeeded:
            reply = result.text or ""
        else:
            logger.warning(
                "Using fallback response",
                session_id=session_id,
                attempts=result.attempts,
            )
            reply = fallback_response(request.message)

        try:
            await self._chat_repo.create_message(
                session_id=session_id,
                message=request.message,
                response=reply,
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to store chat turn", session_id=session_id)
            raise InternalError from e

        return ChatResponse(response=reply, session_id=session_id)

    async def get_history(self, session_id: str) -> list[ChatRecordResponse]:
        """Stored turns for a session, oldest first; empty on any lookup failure."""
        try:
            records = await self._chat_repo.find_by_session_id(session_id)
        except SQLAlchemyError:
            logger.exception("Failed to load chat history", session_id=session_id)
            return []
        return [ChatRecordResponse.model_validate(r) for r in records]
