"""Tests for CompletionService retry behaviour."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from app.services.completion_service import CompletionService, backoff_delay


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


class TestBackoffDelay:
    """Tests for the backoff schedule."""

    def test_linear_schedule(self) -> None:
        assert backoff_delay(1) == 1.0
        assert backoff_delay(2) == 2.0

    def test_custom_base(self) -> None:
        assert backoff_delay(2, base=0.5) == 1.0

    def test_attempt_is_one_based(self) -> None:
        with pytest.raises(ValueError):
            backoff_delay(0)


class TestComplete:
    """Tests for CompletionService.complete."""

    async def test_first_attempt_succeeds(
        self, mock_llm: MagicMock, sleeper: SleepRecorder
    ) -> None:
        service = CompletionService(mock_llm, sleep=sleeper)
        result = await service.complete("prompt")
        assert result.succeeded
        assert result.text == "Test response"
        assert result.attempts == 1
        assert sleeper.calls == []

    async def test_recovers_after_failures(
        self, mock_llm: MagicMock, sleeper: SleepRecorder
    ) -> None:
        mock_llm.ainvoke = AsyncMock(
            side_effect=[
                RuntimeError("boom"),
                TimeoutError(),
                AIMessage(content="third time lucky"),
            ]
        )
        service = CompletionService(mock_llm, sleep=sleeper)
        result = await service.complete("prompt")
        assert result.text == "third time lucky"
        assert result.attempts == 3
        assert sleeper.calls == [1.0, 2.0]

    async def test_gives_up_after_three_attempts(
        self, mock_llm: MagicMock, sleeper: SleepRecorder
    ) -> None:
        mock_llm.ainvoke = AsyncMock(side_effect=RuntimeError("down"))
        service = CompletionService(mock_llm, sleep=sleeper)
        result = await service.complete("prompt")
        assert not result.succeeded
        assert result.text is None
        assert mock_llm.ainvoke.await_count == 3
        assert sleeper.calls == [1.0, 2.0]

    async def test_empty_reply_counts_as_failure(
        self, mock_llm: MagicMock, sleeper: SleepRecorder
    ) -> None:
        mock_llm.ainvoke = AsyncMock(
            side_effect=[AIMessage(content="   "), AIMessage(content="ok")]
        )
        service = CompletionService(mock_llm, sleep=sleeper)
        result = await service.complete("prompt")
        assert result.text == "ok"
        assert result.attempts == 2
        assert sleeper.calls == [1.0]

    async def test_respects_max_attempts(
        self, mock_llm: MagicMock, sleeper: SleepRecorder
    ) -> None:
        mock_llm.ainvoke = AsyncMock(side_effect=RuntimeError("down"))
        service = CompletionService(mock_llm, max_attempts=1, sleep=sleeper)
        result = await service.complete("prompt")
        assert result.attempts == 1
        assert sleeper.calls == []
