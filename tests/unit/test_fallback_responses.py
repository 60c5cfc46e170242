"""Tests for keyword-selected fallback answers."""

import pytest

from app.services.fallback_responses import (
    ARRAY_RESPONSE,
    DEFAULT_RESPONSE,
    LINKED_LIST_RESPONSE,
    QUEUE_RESPONSE,
    STACK_RESPONSE,
    fallback_response,
)


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("Explain ARRAYS please", ARRAY_RESPONSE),
        ("how does a stack work?", STACK_RESPONSE),
        ("reverse a Linked List", LINKED_LIST_RESPONSE),
        ("what is a queue", QUEUE_RESPONSE),
        ("teach me dynamic programming", DEFAULT_RESPONSE),
    ],
)
def test_keyword_selection(message: str, expected: str) -> None:
    assert fallback_response(message) == expected


def test_first_keyword_wins() -> None:
    assert fallback_response("stack vs array") == ARRAY_RESPONSE


def test_responses_are_non_empty() -> None:
    for text in (
        ARRAY_RESPONSE,
        STACK_RESPONSE,
        LINKED_LIST_RESPONSE,
        QUEUE_RESPONSE,
        DEFAULT_RESPONSE,
    ):
        assert text.strip()
