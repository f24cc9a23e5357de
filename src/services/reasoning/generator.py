"""Reasoning generator service."""

import json
import logging
from typing import List

from pydantic import ValidationError

from src.config.prompts import build_reasoning_prompt
from src.infrastructure.llm.client import ChatMessage, LLMClient
from src.services.reasoning.models import (
    IntentJustification,
    MessageAnalysis,
    Reasoning,
    ResponseStrategy,
)
from src.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)


class ReasoningGenerator:
    """Asks the model to explain a classification decision as structured JSON."""

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def generate(
        self,
        user_input: str,
        intent: str,
        confidence: float,
        history: List[ChatMessage],
    ) -> Reasoning:
        """Request the reasoning object; LLM failures propagate to the caller."""
        prompt = build_reasoning_prompt(user_input, intent, confidence)
        content = await self.llm.invoke([*history, {"role": "user", "content": prompt}])
        return self.parse_reply(content, user_input, intent, confidence)

    def parse_reply(
        self,
        content: str,
        user_input: str,
        intent: str,
        confidence: float,
    ) -> Reasoning:
        """Parse the widest ``{...}`` span, or fall back to a static object."""
        content = content.strip()
        span = JSONParser.find_object(content, greedy=True)

        if span is None:
            logger.info("No JSON in reasoning reply, keeping raw text as justification")
            return unparsed_reasoning(content)

        try:
            return Reasoning.model_validate(JSONParser.loads_clean(span))
        except (json.JSONDecodeError, RecursionError, ValidationError) as e:
            logger.warning(f"Could not parse reasoning reply: {e}")
            return fallback_reasoning(user_input, intent, confidence)


def unparsed_reasoning(content: str) -> Reasoning:
    """Reasoning for a reply that carried no JSON object."""
    return Reasoning(
        message_analysis=MessageAnalysis(key_phrases=[], user_goal="Could not parse reasoning"),
        intent_justification=IntentJustification(why_this_intent=content, confidence_factors=[]),
        response_strategy=ResponseStrategy(approach="Direct response", user_expectation="Helpful answer"),
    )


def fallback_reasoning(user_input: str, intent: str, confidence: float) -> Reasoning:
    """Reasoning rebuilt from the classification when the reply was unusable."""
    return Reasoning(
        message_analysis=MessageAnalysis(key_phrases=[], user_goal=user_input),
        intent_justification=IntentJustification(
            why_this_intent=f"Classified as {intent}",
            confidence_factors=[f"Confidence: {confidence}"],
        ),
        response_strategy=ResponseStrategy(approach="Direct response", user_expectation="Helpful answer"),
    )


def error_reasoning(error_message: str) -> Reasoning:
    """Reasoning attached to a reply that failed to generate."""
    return Reasoning(
        message_analysis=MessageAnalysis(key_phrases=[], user_goal="Error occurred"),
        intent_justification=IntentJustification(why_this_intent=error_message, confidence_factors=[]),
        response_strategy=ResponseStrategy(approach="Error recovery", user_expectation="Error message"),
    )
