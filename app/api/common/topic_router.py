"""DSA topic catalog endpoint."""

from fastapi import APIRouter

from app.schemas.response_schema import ApiResponse, success_response
from app.schemas.topic_schema import Topic
from app.services.topic_catalog import list_topics

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=ApiResponse[list[Topic]])
async def get_topics() -> dict:
    """List the available DSA topics."""
    return success_response(list_topics())
