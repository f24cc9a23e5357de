"""Tests for the keyword intent fallback."""

import pytest

from src.config.constants import IntentCategory
from src.services.intent.fallback import FALLBACK_RULES, classify_intent_fallback


@pytest.mark.parametrize(
    "message,expected",
    [
        ("Hello there!", IntentCategory.GREETING),
        ("good morning team", IntentCategory.GREETING),
        ("What time is it?", IntentCategory.QUESTION),
        ("Please schedule a meeting", IntentCategory.COMMAND),
        ("Thanks a lot", IntentCategory.GOODBYE),
        ("I need help", IntentCategory.CLARIFICATION),
        ("tell me a story", IntentCategory.INFORMATION_REQUEST),
        ("asdkjf", IntentCategory.UNKNOWN),
    ],
)
def test_classify_intent_fallback(message, expected):
    assert classify_intent_fallback(message) == expected


def test_question_requires_question_mark():
    """Test that a question word without '?' is not a question."""
    assert classify_intent_fallback("what time is it") == IntentCategory.UNKNOWN


def test_greeting_must_start_the_message():
    assert classify_intent_fallback("well, hello") == IntentCategory.UNKNOWN


def test_rules_checked_in_priority_order():
    """Test that the first matching rule wins."""
    assert classify_intent_fallback("Hi, can you help?") == IntentCategory.GREETING
    assert classify_intent_fallback("Can you help me?") == IntentCategory.COMMAND
    assert [rule.intent for rule in FALLBACK_RULES] == [
        IntentCategory.GREETING,
        IntentCategory.QUESTION,
        IntentCategory.COMMAND,
        IntentCategory.GOODBYE,
        IntentCategory.CLARIFICATION,
        IntentCategory.INFORMATION_REQUEST,
    ]


def test_fallback_never_returns_feedback():
    assert classify_intent_fallback("This app is great") == IntentCategory.UNKNOWN
