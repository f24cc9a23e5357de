"""Prompts for the intent agent."""

from src.config.prompts.intent import ENTITY_EXAMPLES, build_intent_prompt
from src.config.prompts.reasoning import build_reasoning_prompt
from src.config.prompts.response import build_response_prompt
from src.config.prompts.system import INTENT_AGENT_SYSTEM_PROMPT

__all__ = [
    "ENTITY_EXAMPLES",
    "INTENT_AGENT_SYSTEM_PROMPT",
    "build_intent_prompt",
    "build_reasoning_prompt",
    "build_response_prompt",
]
