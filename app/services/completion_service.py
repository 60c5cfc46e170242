"""Bounded-retry text completion against the configured LLM."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import structlog
from langchain_core.language_models import BaseChatModel

logger = structlog.get_logger()

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_BASE_SECONDS = 1.0

Sleep = Callable[[float], Awaitable[None]]


def backoff_delay(attempt: int, base: float = DEFAULT_BACKOFF_BASE_SECONDS) -> float:
    """Seconds to wait after failed attempt number ``attempt`` (1-based).

    Grows linearly: 1s after the first failure, 2s after the second.
    """
    if attempt < 1:
        raise ValueError("attempt is 1-based")
    return attempt * base


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of a completion call; ``text`` is None when every attempt failed."""

    text: str | None
    attempts: int

    @property
    def succeeded(self) -> bool:
        return self.text is not None


class CompletionService:
    """Ask the LLM for a completion, retrying with backoff.

    Failures are reported through ``CompletionResult`` rather than raised,
    so callers decide how to degrade.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff_base_seconds: float = DEFAULT_BACKOFF_BASE_SECONDS,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._llm = llm
        self._max_attempts = max_attempts
        self._backoff_base = backoff_base_seconds
        self._sleep = sleep

    async def complete(self, prompt: str) -> CompletionResult:
        """Return the first non-empty completion within ``max_attempts`` tries."""
        for attempt in range(1, self._max_attempts + 1):
            remaining = self._max_attempts - attempt
            try:
                reply = await self._llm.ainvoke(prompt)
            except Exception as exc:  # provider SDKs raise their own error types
                logger.warning(
                    "Completion attempt failed",
                    attempt=attempt,
                    retries_left=remaining,
                    error=str(exc),
                )
            else:
                text = str(reply.content).strip()
                if text:
                    return CompletionResult(text=text, attempts=attempt)
                logger.warning(
                    "Completion was empty", attempt=attempt, retries_left=remaining
                )

            if remaining:
                await self._sleep(backoff_delay(attempt, self._backoff_base))

        return CompletionResult(text=None, attempts=self._max_attempts)
