"""Rate limit configuration."""

from pydantic import BaseModel


class RateLimitConfig(BaseModel, frozen=True):
    """Per-client request budgets in ``limits`` notation."""

    global_limit: str
    chat_limit: str
