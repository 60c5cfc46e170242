"""Chat endpoints for the savage DSA tutor."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import (
    enforce_chat_rate_limit,
    get_chat_service,
    get_current_user,
)
from app.schemas.chat_schema import ChatRecordResponse, ChatRequest, ChatResponse
from app.schemas.response_schema import ApiResponse, success_response
from app.services.chat_service import ChatService

router = APIRouter(
    prefix="/api/chat",
    tags=["chat"],
    dependencies=[Depends(get_current_user)],
)

ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]


@router.post(
    "",
    response_model=ApiResponse[ChatResponse],
    dependencies=[Depends(enforce_chat_rate_limit)],
)
async def chat(
    request: ChatRequest,
    chat_service: ChatServiceDep,
) -> dict:
    """Answer a DSA question in persona."""
    result = await chat_service.send_message(request)
    return success_response(result)


@router.get(
    "/history/{session_id}",
    response_model=ApiResponse[list[ChatRecordResponse]],
)
async def get_history(
    session_id: str,
    chat_service: ChatServiceDep,
) -> dict:
    """List a session's stored turns, oldest first."""
    history = await chat_service.get_history(session_id)
    return success_response(history)
