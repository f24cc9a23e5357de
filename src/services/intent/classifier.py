"""Intent classifier service."""

import json
import logging
import math
import re
from typing import Any, Dict, List

from src.config.constants import (
    DEFAULT_CONFIDENCE,
    FALLBACK_CONFIDENCE,
    IntentCategory,
)
from src.config.prompts import build_intent_prompt
from src.infrastructure.llm.client import ChatMessage, LLMClient
from src.services.intent.fallback import classify_intent_fallback
from src.services.intent.models import IntentResult
from src.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)

_INTENT_FIELD_RE = re.compile(r'"intent"\s*:\s*"([^"]+)"')
_CONFIDENCE_FIELD_RE = re.compile(r'"confidence"\s*:\s*([\d.]+)')
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class IntentClassifier:
    """Classifies a user message into one of the IntentCategory values."""

    def __init__(self, llm: LLMClient):
        """Initialize intent classifier."""
        self.llm = llm

    async def classify(self, user_input: str, history: List[ChatMessage]) -> IntentResult:
        """
        Ask the model for the intent of a message and parse its reply.

        Args:
            user_input: The user's message
            history: System and user messages built by the first pipeline step

        Returns:
            IntentResult with intent, confidence and entities

        Raises:
            Exception: Whatever the LLM client raises; reply parsing never raises
        """
        messages = [*history, {"role": "user", "content": build_intent_prompt(user_input)}]
        content = await self.llm.invoke(messages)
        return self.parse_reply(user_input, content)

    def parse_reply(self, user_input: str, content: str) -> IntentResult:
        """
        Turn raw model text into an IntentResult.

        The first ``{...}`` object is cleaned and parsed. When it is not valid
        JSON, the intent and confidence fields are pulled out with regexes.
        When there is no object at all, the keyword fallback classifies the
        original message.
        """
        span = JSONParser.find_object(content)

        if span is None:
            intent = classify_intent_fallback(user_input)
            logger.info(f"No JSON in model reply, keyword fallback chose '{intent.value}'")
            return IntentResult(intent=intent, confidence=FALLBACK_CONFIDENCE, entities={})

        try:
            data = JSONParser.loads_clean(span)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning(f"Malformed JSON in model reply ({e}), extracting fields with patterns")
            return self._from_patterns(content)

        return self._from_json(data)

    def _from_json(self, data: Dict[str, Any]) -> IntentResult:
        """Adopt parsed fields, defaulting the missing ones."""
        return IntentResult(
            intent=_normalize_intent(data.get("intent")),
            confidence=_normalize_confidence(data.get("confidence")),
            entities=_normalize_entities(data.get("entities")),
        )

    def _from_patterns(self, content: str) -> IntentResult:
        """Pull intent and confidence out of text that failed to parse."""
        intent_match = _INTENT_FIELD_RE.search(content)
        confidence_match = _CONFIDENCE_FIELD_RE.search(content)

        return IntentResult(
            intent=_normalize_intent(intent_match.group(1) if intent_match else None),
            confidence=_normalize_confidence(
                _leading_number(confidence_match.group(1)) if confidence_match else None
            ),
            entities={},
        )


def _normalize_intent(value: Any) -> IntentCategory:
    """Map a raw label onto the closed category set; anything else is unknown."""
    if not isinstance(value, str) or not value.strip():
        return IntentCategory.UNKNOWN
    label = value.strip().lower()
    try:
        return IntentCategory(label)
    except ValueError:
        logger.info(f"Model returned label '{value}' outside the category set, using 'unknown'")
        return IntentCategory.UNKNOWN


def _leading_number(capture: str) -> str | None:
    """Leading number of a capture such as ``0.9.``; None when it has no digits."""
    match = _LEADING_NUMBER_RE.match(capture)
    return match.group(0) if match else None


def _normalize_confidence(value: Any, default: float = DEFAULT_CONFIDENCE) -> float:
    """Coerce a raw confidence to a float in [0, 1]."""
    if value is None or isinstance(value, bool):
        return default
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(confidence):
        return default
    return min(max(confidence, 0.0), 1.0)


def _normalize_entities(value: Any) -> Dict[str, str]:
    """Keep only a flat str -> str mapping."""
    if not isinstance(value, dict):
        return {}
    entities: Dict[str, str] = {}
    for key, entity in value.items():
        if entity is None:
            continue
        entities[str(key)] = entity if isinstance(entity, str) else json.dumps(entity, ensure_ascii=False)
    return entities
