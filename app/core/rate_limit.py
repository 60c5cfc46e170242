"""Process-local fixed-window rate limiting."""

import structlog
from limits import RateLimitItem, parse
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.exceptions import RateLimitedError
from app.core.settings import RateLimitConfig

logger = structlog.get_logger()

GLOBAL_LIMIT_MESSAGE = (
    "Arre yaar! Too many requests from your IP. "
    "Take a chai break and try again later!"
)
CHAT_LIMIT_MESSAGE = (
    "Slow down, speed racer! Even the savage teacher needs time to think. "
    "Wait a minute!"
)


def client_identity(request: Request) -> str:
    """Rate-limit key for the caller (remote address)."""
    return get_remote_address(request)


class RateLimiter:
    """Two independent buckets per client: global and chat.

    Requests over budget are rejected immediately, never queued.
    """

    def __init__(
        self,
        global_limit: str,
        chat_limit: str,
        storage: Storage | None = None,
    ) -> None:
        self._storage = storage or MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self._storage)
        self._global: RateLimitItem = parse(global_limit)
        self._chat: RateLimitItem = parse(chat_limit)

    @classmethod
    def from_config(cls, config: RateLimitConfig) -> "RateLimiter":
        """Build a limiter from the rate limit settings."""
        return cls(global_limit=config.global_limit, chat_limit=config.chat_limit)

    def hit_global(self, client_id: str) -> None:
        """Count one request against the global bucket."""
        if not self._strategy.hit(self._global, "global", client_id):
            logger.warning("Global rate limit exceeded", client=client_id)
            raise RateLimitedError(GLOBAL_LIMIT_MESSAGE)

    def hit_chat(self, client_id: str) -> None:
        """Count one request against the chat bucket."""
        if not self._strategy.hit(self._chat, "chat", client_id):
            logger.warning("Chat rate limit exceeded", client=client_id)
            raise RateLimitedError(CHAT_LIMIT_MESSAGE)

    def reset(self) -> None:
        """Drop every counter."""
        self._storage.reset()
