"""Keyword fallback used when the model reply carries no JSON object."""

import re
from typing import NamedTuple

from src.config.constants import IntentCategory


class FallbackRule(NamedTuple):
    """One keyword rule; rules are checked in order and the first match wins."""

    intent: IntentCategory
    pattern: re.Pattern[str]
    requires_question_mark: bool = False


FALLBACK_RULES: tuple[FallbackRule, ...] = (
    FallbackRule(
        IntentCategory.GREETING,
        re.compile(r"^(hi|hello|hey|greetings|good morning|good afternoon)", re.IGNORECASE),
    ),
    FallbackRule(
        IntentCategory.QUESTION,
        re.compile(r"(what|when|where|why|how|who|which)", re.IGNORECASE),
        requires_question_mark=True,
    ),
    FallbackRule(
        IntentCategory.COMMAND,
        re.compile(r"(please|could you|can you|would you|schedule|book|create|add)", re.IGNORECASE),
    ),
    FallbackRule(
        IntentCategory.GOODBYE,
        re.compile(r"(thanks|thank you|appreciate|grateful|bye|goodbye|see you)", re.IGNORECASE),
    ),
    FallbackRule(
        IntentCategory.CLARIFICATION,
        re.compile(r"(help|assist|support|clarify|explain)", re.IGNORECASE),
    ),
    FallbackRule(
        IntentCategory.INFORMATION_REQUEST,
        re.compile(r"(tell me|what is|what are|show me|give me)", re.IGNORECASE),
    ),
)


def classify_intent_fallback(user_input: str) -> IntentCategory:
    """Classify a message with keyword rules only."""
    lower_input = user_input.lower()

    for rule in FALLBACK_RULES:
        if rule.requires_question_mark and "?" not in lower_input:
            continue
        if rule.pattern.search(lower_input):
            return rule.intent

    return IntentCategory.UNKNOWN
